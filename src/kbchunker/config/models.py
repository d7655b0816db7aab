"""Configuration models for the chunking engine.

Options are validated once, when they are built; the chunker trusts them
afterwards.
"""

from typing import Any

from pydantic import BaseModel, Field


class ChunkingOptions(BaseModel):
    """Size and boundary configuration for one chunking call.

    Attributes:
        chunk_size: Maximum estimated tokens per chunk
        chunk_overlap: Estimated tokens carried from the tail of one chunk
            into the head of the next
        separators: Boundary strings from coarsest to finest; None selects
            the chunker's defaults
    """

    chunk_size: int = Field(..., ge=1)
    chunk_overlap: int = Field(default=0, ge=0)
    separators: list[str] | None = None

    model_config = {
        "frozen": True,
    }


class ChunkingPreset(BaseModel):
    """A named (chunk_size, chunk_overlap) pair offered to callers."""

    chunk_size: int = Field(..., ge=1)
    chunk_overlap: int = Field(..., ge=0)
    description: str = ""

    model_config = {
        "frozen": True,
    }


class ComponentConfig(BaseModel):
    """Configuration for a single component.

    Attributes:
        type: Component type identifier (e.g., "recursive")
        params: Component-specific parameters as a dictionary
    """

    type: str
    params: dict[str, Any] = Field(default_factory=dict)
