#!/usr/bin/env python3
"""
kbchunker Demo Application

Demonstrates the knowledge base flow: a document is chunked with a preset,
its chunks are stored, written to an in-memory vector store, and finally
deleted again.

Usage:
    python main.py [path/to/file.txt] [preset]
"""

import sys
from pathlib import Path

from loguru import logger

from kbchunker import (
    IngestionPipeline,
    InMemoryDocumentStore,
    InMemoryVectorStore,
    KnowledgeDocument,
    SourceType,
    get_preset,
)
from kbchunker.utils import setup_logging

SAMPLE_CONTENT = """Retrieval-Augmented Generation (RAG) is a technique that combines information
retrieval with text generation. It allows language models to access external
knowledge bases to provide more accurate and up-to-date responses.

The RAG process consists of two main phases: indexing and retrieval. During
indexing, documents are parsed, chunked, embedded, and stored in a vector
database. During retrieval, user queries are embedded and similar chunks
are retrieved to provide context for generation.

The quality of a RAG system depends on several factors: the chunking strategy,
the embedding model quality, the vector store's search algorithm, and optional
reranking mechanisms that refine the initial retrieval results.
"""


def load_document(argv: list[str]) -> KnowledgeDocument:
    """Build the demo document from a file argument, or the built-in sample."""
    if argv:
        path = Path(argv[0])
        return KnowledgeDocument(
            title=path.name,
            content=path.read_text(encoding="utf-8"),
            source_type=SourceType.FILE,
        )
    return KnowledgeDocument(title="RAG Overview", content=SAMPLE_CONTENT)


def main():
    setup_logging()
    logger.info("Starting kbchunker demo")

    preset = sys.argv[2] if len(sys.argv) > 2 else "small"
    logger.info(f"Preset '{preset}': {get_preset(preset).description}")

    document_store = InMemoryDocumentStore()
    vector_store = InMemoryVectorStore()
    pipeline = IngestionPipeline(document_store, vector_store=vector_store)

    document = load_document(sys.argv[1:2])

    # 1. Ingest
    result = pipeline.ingest(document, preset=preset)
    logger.info(f"Ingested '{document.title}': {result.chunk_count} chunks, status={result.status}")

    for record in document_store.get_chunks(document.id):
        preview = record.content.replace("\n", " ")[:80]
        logger.info(
            f"[{record.chunk_index}] tokens={record.token_count} "
            f"chars={record.metadata.start_char}-{record.metadata.end_char}: {preview}..."
        )

    # 2. Delete
    removed = pipeline.delete(document.id)
    logger.info(f"Deleted {removed} chunks; vectors left: {vector_store.count(document.vector_class)}")

    logger.info("Demo complete!")


if __name__ == "__main__":
    main()
