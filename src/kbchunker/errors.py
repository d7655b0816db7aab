"""
kbchunker Error Classification System.

This module provides a small hierarchy of exceptions for the knowledge-base
side of the package. The chunker itself is a total function over any string
and only rejects invalid options with ``ValueError``; everything below is
raised by configuration lookups and the ingestion workflow.

Error Categories:
-----------------
1. Permanent Errors: Failures that won't succeed on retry
   - Unknown preset or invalid settings
   - Document not found

2. Workflow Errors: Failures of an external collaborator
   - Chunk persistence failed (document store)
   - Vector store rejected an operation

Usage:
------
    from kbchunker.errors import IngestionError, NotFoundError

    try:
        pipeline.delete(document_id)
    except NotFoundError as e:
        logger.warning(f"Nothing to delete: {e}")
"""

from typing import Any


class KBChunkerError(Exception):
    """
    Base exception for all kbchunker errors.

    Attributes:
        message: Human-readable error description
        details: Additional context about the error (optional)
        original_error: The underlying exception that caused this error (optional)
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def __str__(self) -> str:
        base = self.message
        if self.details:
            base += f" | Details: {self.details}"
        if self.original_error:
            base += f" | Caused by: {type(self.original_error).__name__}: {self.original_error}"
        return base

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "details": self.details,
            "original_error": str(self.original_error) if self.original_error else None
        }


# =============================================================================
# Permanent Errors
# =============================================================================

class PermanentError(KBChunkerError):
    """
    Base class for errors that will not succeed on retry.

    These errors indicate issues that require caller intervention, such as
    asking for a preset that does not exist.
    """
    pass


class ConfigurationError(PermanentError):
    """
    Raised when there's a configuration problem.

    Common causes:
    - Unknown chunking preset name
    - Invalid settings values
    """

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


class NotFoundError(PermanentError):
    """Raised when a requested knowledge document does not exist."""

    def __init__(
        self,
        message: str = "Resource not found",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


# =============================================================================
# Workflow Errors
# =============================================================================

class IngestionError(KBChunkerError):
    """Raised when chunks of a document could not be persisted."""
    pass


class VectorStoreError(KBChunkerError):
    """Raised when vector store operation fails."""
    pass
