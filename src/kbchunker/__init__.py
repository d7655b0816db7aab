"""
kbchunker - Document chunking engine for a knowledge base.

This package splits document text into overlapping, token-budgeted chunks
for embedding and vector search, and provides the ingestion workflow that
persists those chunks.
"""

__version__ = "0.1.0"

# High-level API
from .api import chunk_text, chunk_with_preset

# Configuration
from .config.models import ChunkingOptions, ChunkingPreset, ComponentConfig
from .config.presets import CHUNKING_PRESETS, get_preset, resolve_chunking_options
from .config.settings import Settings, settings

# Core entities
from .core.chunk import Chunk, ChunkMetadata, ChunkRecord
from .core.document import KnowledgeDocument, ProcessingStatus, SourceType

# Storage collaborators
from .datasource import (
    BaseDocumentStore,
    BaseVectorStore,
    InMemoryDocumentStore,
    InMemoryVectorStore,
)

# Pipelines
from .pipeline import IngestionPipeline, IngestionResult

# Chunkers
from .splitter import BaseChunker, ChunkerFactory, RecursiveCharacterChunker, estimate_token_count

__all__ = [
    # Version
    "__version__",
    # API
    "chunk_text",
    "chunk_with_preset",
    # Config
    "ChunkingOptions",
    "ChunkingPreset",
    "ComponentConfig",
    "CHUNKING_PRESETS",
    "get_preset",
    "resolve_chunking_options",
    "Settings",
    "settings",
    # Core
    "Chunk",
    "ChunkMetadata",
    "ChunkRecord",
    "KnowledgeDocument",
    "ProcessingStatus",
    "SourceType",
    # Storage
    "BaseDocumentStore",
    "InMemoryDocumentStore",
    "BaseVectorStore",
    "InMemoryVectorStore",
    # Pipelines
    "IngestionPipeline",
    "IngestionResult",
    # Chunkers
    "BaseChunker",
    "RecursiveCharacterChunker",
    "ChunkerFactory",
    "estimate_token_count",
]
