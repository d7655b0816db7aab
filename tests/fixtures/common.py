"""Shared test fixtures for all test types."""

import pytest

from kbchunker.core.document import KnowledgeDocument


@pytest.fixture
def sample_paragraphs() -> list[str]:
    """Provide sample paragraph contents."""
    return [
        "Machine learning is a subset of artificial intelligence. "
        "It focuses on teaching computers to learn from data. "
        "Common algorithms include neural networks, decision trees, and support vector machines.",
        "Python is a high-level programming language. "
        "It is widely used in data science, web development, and automation. "
        "Python has a simple syntax that makes it easy to learn.",
        "Natural language processing (NLP) is a field of AI. "
        "It deals with the interaction between computers and human language. "
        "Applications include chatbots, translation, and sentiment analysis.",
    ]


@pytest.fixture
def sample_article(sample_paragraphs) -> str:
    """A multi-paragraph article, repeated to span several chunks."""
    return "\n\n".join(sample_paragraphs * 4)


@pytest.fixture
def unique_words_text() -> str:
    """A single paragraph of unique words with no punctuation (about 6000 chars)."""
    return " ".join(f"w{i:04d}" for i in range(1200))


@pytest.fixture
def knowledge_document(sample_article) -> KnowledgeDocument:
    return KnowledgeDocument(
        id="doc-1",
        title="AI Notes",
        content=sample_article,
        metadata={"author": "Alice"},
    )
