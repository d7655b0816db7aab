from abc import ABC, abstractmethod
from typing import Any


class BasePipeline(ABC):
    """
    Abstract base class for all pipelines.
    Pipelines orchestrate the chunker and its storage collaborators.
    """

    @abstractmethod
    def run(self, *args, **kwargs) -> Any:
        """Execute the pipeline."""
        pass
