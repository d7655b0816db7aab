"""Storage collaborators used by the ingestion pipeline."""

from .document_store.base import BaseDocumentStore
from .document_store.in_memory import InMemoryDocumentStore
from .vdb.base import BaseVectorStore
from .vdb.in_memory import InMemoryVectorStore

__all__ = [
    "BaseDocumentStore",
    "InMemoryDocumentStore",
    "BaseVectorStore",
    "InMemoryVectorStore",
]
