"""Named chunking presets offered to the knowledge base upload flow."""

from loguru import logger

from kbchunker.errors import ConfigurationError

from .models import ChunkingOptions, ChunkingPreset

CHUNKING_PRESETS: dict[str, ChunkingPreset] = {
    "small": ChunkingPreset(
        chunk_size=256,
        chunk_overlap=32,
        description="Small chunks (256 tokens) - Better for precise retrieval",
    ),
    "medium": ChunkingPreset(
        chunk_size=512,
        chunk_overlap=64,
        description="Medium chunks (512 tokens) - Balanced approach",
    ),
    "large": ChunkingPreset(
        chunk_size=1024,
        chunk_overlap=128,
        description="Large chunks (1024 tokens) - More context per chunk",
    ),
    "paragraph": ChunkingPreset(
        chunk_size=2048,
        chunk_overlap=200,
        description="Paragraph-level (2048 tokens) - Natural text boundaries",
    ),
}


def get_preset(name: str) -> ChunkingPreset:
    """Look up a preset by name.

    Raises:
        ConfigurationError: If no preset has that name
    """
    try:
        return CHUNKING_PRESETS[name]
    except KeyError:
        available = ", ".join(CHUNKING_PRESETS)
        raise ConfigurationError(
            f"Unknown chunking preset: '{name}'. Available presets: {available}",
            details={"preset": name},
        ) from None


def resolve_chunking_options(
    preset: str,
    chunk_size: int | None = None,
    chunk_overlap: int | None = None,
    separators: list[str] | None = None,
) -> ChunkingOptions:
    """Build options from a preset, applying any explicit caller overrides.

    Args:
        preset: Preset name (see CHUNKING_PRESETS)
        chunk_size: Custom chunk size; None keeps the preset's value
        chunk_overlap: Custom overlap; None keeps the preset's value, 0 disables overlap
        separators: Custom separator list; None keeps the chunker defaults

    Returns:
        Validated chunking options
    """
    base = get_preset(preset)
    options = ChunkingOptions(
        chunk_size=base.chunk_size if chunk_size is None else chunk_size,
        chunk_overlap=base.chunk_overlap if chunk_overlap is None else chunk_overlap,
        separators=separators,
    )
    logger.debug(
        f"Resolved preset '{preset}': size={options.chunk_size}, overlap={options.chunk_overlap}"
    )
    return options
