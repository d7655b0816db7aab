"""Configuration system for kbchunker."""

from .models import ChunkingOptions, ChunkingPreset, ComponentConfig
from .presets import CHUNKING_PRESETS, get_preset, resolve_chunking_options
from .settings import Settings, load_settings, settings

__all__ = [
    "ChunkingOptions",
    "ChunkingPreset",
    "ComponentConfig",
    "CHUNKING_PRESETS",
    "get_preset",
    "resolve_chunking_options",
    "Settings",
    "load_settings",
    "settings",
]
