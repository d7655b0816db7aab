"""Pytest configuration and global fixtures for kbchunker tests."""

from pathlib import Path

import pytest

from kbchunker.core.document import KnowledgeDocument
from kbchunker.datasource.document_store.in_memory import InMemoryDocumentStore
from kbchunker.datasource.vdb.in_memory import InMemoryVectorStore
from kbchunker.pipeline.ingestion import IngestionPipeline
from kbchunker.splitter import RecursiveCharacterChunker

# Import shared fixtures
from tests.fixtures.common import (  # noqa: F401
    sample_paragraphs,
    sample_article,
    unique_words_text,
    knowledge_document,
)


@pytest.fixture
def sample_text():
    return """
    Retrieval-Augmented Generation (RAG) is a technique that combines
    information retrieval with large language models.
    """


# ==================== Component Fixtures ====================

@pytest.fixture
def recursive_chunker():
    return RecursiveCharacterChunker(chunk_size=64, chunk_overlap=8)


@pytest.fixture
def document_store():
    return InMemoryDocumentStore()


@pytest.fixture
def vector_store():
    return InMemoryVectorStore()


@pytest.fixture
def pipeline(document_store, vector_store):
    return IngestionPipeline(document_store, vector_store=vector_store, default_preset="small")


@pytest.fixture
def empty_document():
    return KnowledgeDocument(title="Empty", content="   \n\n  ")


# ==================== Pytest Configuration ====================

def pytest_configure(config):
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


def pytest_collection_modifyitems(config, items):
    for item in items:
        rel_path = Path(item.fspath).relative_to(Path(__file__).parent)
        if "unit" in rel_path.parts:
            item.add_marker(pytest.mark.unit)
        elif "integration" in rel_path.parts:
            item.add_marker(pytest.mark.integration)
