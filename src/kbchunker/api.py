"""
kbchunker High-Level API.

One-call functions for chunking a document's text. Both are pure: they
hold no state between calls and can be used from several threads at once.

Example Usage:
    from kbchunker import ChunkingOptions, chunk_text, chunk_with_preset

    chunks = chunk_text(text, ChunkingOptions(chunk_size=512, chunk_overlap=64))
    chunks = chunk_with_preset(text, "small")
"""

from collections.abc import Mapping
from typing import Any

from kbchunker.config.models import ChunkingOptions
from kbchunker.config.presets import resolve_chunking_options
from kbchunker.core.chunk import Chunk
from kbchunker.splitter.factory import ChunkerFactory


def chunk_text(text: str, options: ChunkingOptions | Mapping[str, Any]) -> list[Chunk]:
    """
    Split text into ordered, token-budgeted, overlapping chunks.

    Args:
        text: Document text; empty or whitespace-only text yields []
        options: ChunkingOptions, or a mapping with chunk_size, chunk_overlap
            and optional separators

    Returns:
        Chunks in source order, indexed from 0

    Raises:
        pydantic.ValidationError: If chunk_size < 1 or chunk_overlap < 0
    """
    if not isinstance(options, ChunkingOptions):
        options = ChunkingOptions.model_validate(dict(options))
    return ChunkerFactory.from_options(options).split_text(text)


def chunk_with_preset(
    text: str,
    preset: str = "medium",
    chunk_size: int | None = None,
    chunk_overlap: int | None = None,
) -> list[Chunk]:
    """Chunk text with a named preset, optionally overriding its sizes."""
    options = resolve_chunking_options(preset, chunk_size=chunk_size, chunk_overlap=chunk_overlap)
    return chunk_text(text, options)
