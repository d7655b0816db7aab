from kbchunker.core.chunk import ChunkRecord
from kbchunker.core.document import KnowledgeDocument

from .base import BaseDocumentStore


class InMemoryDocumentStore(BaseDocumentStore):
    """
    Simple In-Memory Document Store.
    Not persistent and not thread-safe.
    """

    def __init__(self):
        self._documents: dict[str, KnowledgeDocument] = {}
        self._chunks: dict[str, dict[int, ChunkRecord]] = {}

    def save_document(self, document: KnowledgeDocument) -> None:
        self._documents[document.id] = document.model_copy(deep=True)

    def get_document(self, document_id: str) -> KnowledgeDocument | None:
        document = self._documents.get(document_id)
        return document.model_copy(deep=True) if document else None

    def delete_document(self, document_id: str) -> None:
        self._documents.pop(document_id, None)

    def add_chunks(self, document_id: str, records: list[ChunkRecord]) -> None:
        chunks = self._chunks.setdefault(document_id, {})
        for record in records:
            chunks[record.chunk_index] = record.model_copy(deep=True)

    def get_chunks(self, document_id: str) -> list[ChunkRecord]:
        chunks = self._chunks.get(document_id, {})
        return [chunks[i].model_copy(deep=True) for i in sorted(chunks)]

    def set_chunk_vector_id(self, document_id: str, chunk_index: int, vector_id: str) -> None:
        record = self._chunks.get(document_id, {}).get(chunk_index)
        if record is None:
            raise KeyError(f"No chunk {chunk_index} for document {document_id}")
        record.vector_id = vector_id

    def delete_chunks(self, document_id: str) -> int:
        return len(self._chunks.pop(document_id, {}))
