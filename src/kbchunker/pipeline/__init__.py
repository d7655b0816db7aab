"""Knowledge base pipelines."""

from .base import BasePipeline
from .ingestion import IngestionPipeline, IngestionResult

__all__ = ["BasePipeline", "IngestionPipeline", "IngestionResult"]
