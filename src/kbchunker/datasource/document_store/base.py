from abc import ABC, abstractmethod

from kbchunker.core.chunk import ChunkRecord
from kbchunker.core.document import KnowledgeDocument


class BaseDocumentStore(ABC):
    """
    Abstract Base Class for knowledge document persistence.
    Stores documents and their chunk records, keyed by (document_id, chunk_index).
    """

    @abstractmethod
    def save_document(self, document: KnowledgeDocument) -> None:
        """Insert or replace a document."""
        pass

    @abstractmethod
    def get_document(self, document_id: str) -> KnowledgeDocument | None:
        """Get a document, or None if unknown."""
        pass

    @abstractmethod
    def delete_document(self, document_id: str) -> None:
        """Delete a document (its chunks are deleted separately)."""
        pass

    @abstractmethod
    def add_chunks(self, document_id: str, records: list[ChunkRecord]) -> None:
        """Store chunk records for a document."""
        pass

    @abstractmethod
    def get_chunks(self, document_id: str) -> list[ChunkRecord]:
        """Get a document's chunk records ordered by chunk_index."""
        pass

    @abstractmethod
    def set_chunk_vector_id(self, document_id: str, chunk_index: int, vector_id: str) -> None:
        """Record the vector store identifier of one chunk."""
        pass

    @abstractmethod
    def delete_chunks(self, document_id: str) -> int:
        """Delete all chunk records of a document; returns how many were removed."""
        pass

    def update_document(self, document: KnowledgeDocument) -> None:
        """Persist changes to an existing document."""
        self.save_document(document)
