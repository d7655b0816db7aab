"""
Ingestion Pipeline Module.

This pipeline handles the knowledge document flow:
Chunk -> Persist chunk records -> Write to vector store -> Record vector ids

It also owns the reverse flow (deleting a document with its chunks and
vectors) and re-chunking a stored document with new options.
"""

from dataclasses import dataclass

from loguru import logger

from kbchunker.api import chunk_text
from kbchunker.config.presets import resolve_chunking_options
from kbchunker.config.settings import settings
from kbchunker.core.chunk import Chunk, ChunkRecord
from kbchunker.core.document import KnowledgeDocument, ProcessingStatus
from kbchunker.datasource.document_store.base import BaseDocumentStore
from kbchunker.datasource.vdb.base import BaseVectorStore
from kbchunker.errors import IngestionError, NotFoundError, VectorStoreError
from kbchunker.pipeline.base import BasePipeline


@dataclass
class IngestionResult:
    """Result of ingesting one document."""
    document_id: str
    chunk_count: int
    has_vector: bool
    status: ProcessingStatus


class IngestionPipeline(BasePipeline):
    """
    Ingestion pipeline for the knowledge base.

    Orchestrates:
    1. Option resolution from a preset plus caller overrides
    2. Text chunking
    3. Chunk persistence keyed by (document_id, chunk_index)
    4. Optional vector store upload, with vector ids recorded per chunk
    """

    def __init__(
        self,
        document_store: BaseDocumentStore,
        vector_store: BaseVectorStore | None = None,
        default_preset: str | None = None,
    ):
        """
        Initialize the ingestion pipeline.

        Args:
            document_store: Where documents and chunk records are persisted.
            vector_store: Vector database receiving chunk content (optional).
            default_preset: Preset used when ingest() gets none.
        """
        self.document_store = document_store
        self.vector_store = vector_store
        self.default_preset = default_preset or settings.DEFAULT_PRESET

    def run(self, document: KnowledgeDocument, **kwargs) -> IngestionResult:
        """Alias for ingest()."""
        return self.ingest(document, **kwargs)

    def ingest(
        self,
        document: KnowledgeDocument,
        preset: str | None = None,
        chunk_size: int | None = None,
        chunk_overlap: int | None = None,
    ) -> IngestionResult:
        """
        Chunk a document and persist its chunks.

        Args:
            document: Document to ingest; its processing fields are updated.
            preset: Chunking preset name (defaults to the pipeline's preset).
            chunk_size: Overrides the preset's chunk size.
            chunk_overlap: Overrides the preset's overlap.

        Returns:
            Summary of the stored chunks.

        Raises:
            ConfigurationError: If the preset is unknown.
            IngestionError: If chunk records could not be stored.
        """
        options = resolve_chunking_options(
            preset or self.default_preset,
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
        )

        logger.info(
            f"[Ingestion] Processing document {document.id} ('{document.title}'), "
            f"size={options.chunk_size}, overlap={options.chunk_overlap}"
        )

        # Chunks from an earlier run are replaced, never merged
        stored = self.document_store.get_document(document.id)
        if stored is not None:
            self._remove_chunks(stored)

        document.processing_status = ProcessingStatus.PROCESSING
        document.error_message = None
        self.document_store.save_document(document)

        chunks = chunk_text(document.content, options)
        records = [ChunkRecord.from_chunk(document.id, chunk) for chunk in chunks]

        if records:
            try:
                self.document_store.add_chunks(document.id, records)
            except Exception as e:
                document.processing_status = ProcessingStatus.FAILED
                document.error_message = str(e)
                self.document_store.update_document(document)
                raise IngestionError(
                    "Failed to store chunks",
                    details={"document_id": document.id, "chunk_count": len(records)},
                    original_error=e,
                ) from e

        has_vector = self._upload_vectors(document, chunks)

        document.processing_status = ProcessingStatus.COMPLETED
        document.chunk_count = len(chunks)
        document.has_vector = has_vector
        self.document_store.update_document(document)

        logger.info(
            f"[Ingestion] Document {document.id}: {len(chunks)} chunks, has_vector={has_vector}"
        )
        return IngestionResult(
            document_id=document.id,
            chunk_count=len(chunks),
            has_vector=has_vector,
            status=document.processing_status,
        )

    def delete(self, document_id: str) -> int:
        """
        Delete a document, its chunk records and their vector entries.

        Returns:
            Number of chunk records removed.

        Raises:
            NotFoundError: If the document does not exist.
        """
        document = self._require_document(document_id)
        removed = self._remove_chunks(document)
        self.document_store.delete_document(document_id)
        logger.info(f"[Ingestion] Deleted document {document_id} with {removed} chunks")
        return removed

    def reindex(
        self,
        document_id: str,
        preset: str | None = None,
        chunk_size: int | None = None,
        chunk_overlap: int | None = None,
    ) -> IngestionResult:
        """Ingest a stored document again; its old chunks and vectors are replaced."""
        document = self._require_document(document_id)
        document.chunk_count = 0
        document.has_vector = False
        return self.ingest(document, preset=preset, chunk_size=chunk_size, chunk_overlap=chunk_overlap)

    def _require_document(self, document_id: str) -> KnowledgeDocument:
        document = self.document_store.get_document(document_id)
        if document is None:
            raise NotFoundError(
                "Document not found",
                details={"document_id": document_id},
            )
        return document

    def _upload_vectors(self, document: KnowledgeDocument, chunks: list[Chunk]) -> bool:
        """Write chunks to the vector store; a rejected write leaves the document without vectors."""
        if self.vector_store is None or not chunks:
            return False

        try:
            for chunk in chunks:
                vector_id = self.vector_store.add_object(
                    document.vector_class,
                    {
                        "content": chunk.content,
                        "title": document.title,
                        "document_id": document.id,
                        "chunk_index": chunk.index,
                    },
                )
                self.document_store.set_chunk_vector_id(document.id, chunk.index, vector_id)
        except VectorStoreError as e:
            logger.error(f"[Ingestion] Vector upload failed for document {document.id}: {e}")
            return False

        return True

    def _remove_chunks(self, document: KnowledgeDocument) -> int:
        """Delete a document's vectors, then its chunk records.

        A vector that cannot be deleted is logged and skipped; the chunk
        records are removed regardless.
        """
        if self.vector_store is not None:
            for record in self.document_store.get_chunks(document.id):
                if not record.vector_id:
                    continue
                try:
                    self.vector_store.delete_object(document.vector_class, record.vector_id)
                except VectorStoreError as e:
                    logger.warning(
                        f"[Ingestion] Could not delete vector {record.vector_id} "
                        f"of document {document.id}: {e}"
                    )
        return self.document_store.delete_chunks(document.id)
