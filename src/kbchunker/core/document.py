"""Knowledge document entity tracked through ingestion."""

from enum import StrEnum
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, Field

from kbchunker.config.settings import settings


class SourceType(StrEnum):
    TEXT = "text"
    URL = "url"
    FILE = "file"


class ProcessingStatus(StrEnum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class KnowledgeDocument(BaseModel):
    """
    A titled text stored in the knowledge base and chunked for retrieval.

    The processing fields (status, chunk_count, has_vector, error_message)
    are owned by the ingestion pipeline.
    """
    id: str = Field(default_factory=lambda: str(uuid4()))
    title: str = Field(..., min_length=1)
    content: str = ""

    collection_id: str | None = None
    source_type: SourceType = SourceType.TEXT
    source_url: str | None = None
    vector_class: str = Field(default_factory=lambda: settings.DEFAULT_VECTOR_CLASS)

    # Processing state
    processing_status: ProcessingStatus = ProcessingStatus.PENDING
    chunk_count: int = Field(default=0, ge=0)
    has_vector: bool = False
    error_message: str | None = None

    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def content_preview(self) -> str:
        return self.content[: settings.CONTENT_PREVIEW_LENGTH]

    model_config = {
        "frozen": False,
    }
