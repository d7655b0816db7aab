from typing import Any
from uuid import uuid4

from loguru import logger

from kbchunker.errors import VectorStoreError

from .base import BaseVectorStore


class InMemoryVectorStore(BaseVectorStore):
    """
    A simple in-memory vector store for tests and demos.
    Keeps objects per class; no embedding or search is performed.
    """

    def __init__(self):
        self._objects: dict[str, dict[str, dict[str, Any]]] = {}

    def add_object(self, class_name: str, properties: dict[str, Any]) -> str:
        object_id = str(uuid4())
        self._objects.setdefault(class_name, {})[object_id] = dict(properties)
        logger.debug(f"Stored object {object_id} in class '{class_name}'")
        return object_id

    def delete_object(self, class_name: str, object_id: str) -> None:
        objects = self._objects.get(class_name, {})
        if object_id not in objects:
            raise VectorStoreError(
                f"Object not found in class '{class_name}'",
                details={"class_name": class_name, "object_id": object_id},
            )
        del objects[object_id]

    def get_object(self, class_name: str, object_id: str) -> dict[str, Any] | None:
        return self._objects.get(class_name, {}).get(object_id)

    def count(self, class_name: str) -> int:
        return len(self._objects.get(class_name, {}))
