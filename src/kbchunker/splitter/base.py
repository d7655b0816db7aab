"""Base chunker interface."""

from abc import ABC, abstractmethod

from ..core.chunk import Chunk


class BaseChunker(ABC):
    """Abstract base class for text chunking.

    Chunkers split the text of one document into smaller pieces suitable
    for embedding and retrieval. Implementations hold configuration only,
    so a single instance can be shared between threads.
    """

    @abstractmethod
    def split_text(self, text: str) -> list[Chunk]:
        """Split text into chunks.

        Args:
            text: Raw document text, possibly empty

        Returns:
            Ordered chunks covering the text; empty for blank input
        """
        pass
