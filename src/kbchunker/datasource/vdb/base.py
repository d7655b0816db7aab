from abc import ABC, abstractmethod
from typing import Any


class BaseVectorStore(ABC):
    """Abstract base class for the vector database that receives chunk content.

    Embedding happens inside the store; callers only hand over properties.
    Implementations raise VectorStoreError when an operation is rejected.
    """

    @abstractmethod
    def add_object(self, class_name: str, properties: dict[str, Any]) -> str:
        """Add one object to a class and return its identifier."""
        pass

    @abstractmethod
    def delete_object(self, class_name: str, object_id: str) -> None:
        """Delete one object by identifier."""
        pass
