"""Chunk entities: the chunker's output unit and its persisted record."""

from pydantic import BaseModel, Field


class ChunkMetadata(BaseModel):
    """Character offsets of a chunk's un-overlapped content in the source text."""

    start_char: int
    end_char: int


class Chunk(BaseModel):
    """Represents a chunk of text produced by the chunker.

    Attributes:
        content: The trimmed text of this chunk (may start with overlap text)
        index: Zero-based position in the produced sequence
        token_count: Estimated token count of content
        metadata: Best-effort offsets into the original text
    """

    content: str = Field(..., min_length=1)
    index: int = Field(..., ge=0)
    token_count: int = Field(..., ge=0)
    metadata: ChunkMetadata

    model_config = {
        "frozen": False,
    }


class ChunkRecord(BaseModel):
    """A chunk as persisted by the document store, keyed by (document_id, chunk_index).

    Attributes:
        document_id: Owning knowledge document
        chunk_index: Position of the chunk within the document
        content: Chunk text
        token_count: Estimated token count
        metadata: Offsets copied from the chunk
        vector_id: Identifier assigned by the vector store, once written
    """

    document_id: str
    chunk_index: int = Field(..., ge=0)
    content: str = Field(..., min_length=1)
    token_count: int = Field(default=0, ge=0)
    metadata: ChunkMetadata
    vector_id: str | None = None

    @classmethod
    def from_chunk(cls, document_id: str, chunk: Chunk) -> "ChunkRecord":
        return cls(
            document_id=document_id,
            chunk_index=chunk.index,
            content=chunk.content,
            token_count=chunk.token_count,
            metadata=chunk.metadata.model_copy(),
        )
