"""Utility functions for kbchunker."""

from .logging import setup_logging

__all__ = ["setup_logging"]
