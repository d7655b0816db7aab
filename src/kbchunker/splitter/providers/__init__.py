"""Provider implementations for chunkers."""

from .recursive_character import RecursiveCharacterChunker

__all__ = ["RecursiveCharacterChunker"]
