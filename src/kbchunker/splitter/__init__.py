"""Splitter module for text chunking.

This module provides the recursive chunker, the token estimate it uses
and a factory for creating chunkers by type.
"""

from .base import BaseChunker
from .factory import ChunkerFactory
from .providers.recursive_character import RecursiveCharacterChunker
from .tokens import CHARS_PER_TOKEN, estimate_token_count

__all__ = [
    "BaseChunker",
    "RecursiveCharacterChunker",
    "ChunkerFactory",
    "CHARS_PER_TOKEN",
    "estimate_token_count",
]
