"""Core data entities for kbchunker."""

from .chunk import Chunk, ChunkMetadata, ChunkRecord
from .document import KnowledgeDocument, ProcessingStatus, SourceType

__all__ = [
    "Chunk",
    "ChunkMetadata",
    "ChunkRecord",
    "KnowledgeDocument",
    "ProcessingStatus",
    "SourceType",
]
