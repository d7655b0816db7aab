"""Chunker factory: named chunker types for the knowledge base."""

from typing import Any

from loguru import logger

from ..config.models import ChunkingOptions, ComponentConfig
from .base import BaseChunker
from .providers.recursive_character import RecursiveCharacterChunker

# Type used for every chunking request built from ChunkingOptions
DEFAULT_CHUNKER_TYPE = "recursive"


class ChunkerFactory:
    """Builds chunkers by type name.

    Knowledge base uploads always go through the "recursive" chunker via
    from_options(); other types can be registered for component configs
    that name them explicitly.
    """

    _registry: dict[str, type[BaseChunker]] = {
        DEFAULT_CHUNKER_TYPE: RecursiveCharacterChunker,
    }

    @classmethod
    def create(cls, chunker_type: str, **params: Any) -> BaseChunker:
        """Instantiate the chunker registered under chunker_type.

        Raises:
            ValueError: If no chunker is registered under that name
        """
        chunker_class = cls._registry.get(chunker_type)
        if chunker_class is None:
            raise ValueError(
                f"Unknown chunker type: '{chunker_type}'. "
                f"Available types: {', '.join(cls.list_types())}"
            )

        logger.debug(f"Creating {chunker_class.__name__} with params: {params}")
        return chunker_class(**params)

    @classmethod
    def from_config(cls, config: ComponentConfig) -> BaseChunker:
        """Create a chunker from a component configuration."""
        return cls.create(config.type, **config.params)

    @classmethod
    def from_options(cls, options: ChunkingOptions) -> BaseChunker:
        """Create the recursive chunker for a set of chunking options."""
        return cls.create(
            DEFAULT_CHUNKER_TYPE,
            chunk_size=options.chunk_size,
            chunk_overlap=options.chunk_overlap,
            separators=options.separators,
        )

    @classmethod
    def register(cls, chunker_type: str, chunker_class: type[BaseChunker]):
        """Make a chunker class available to create() and from_config().

        Registering an existing name replaces the previous class, which is
        how the default recursive chunker can be swapped out.

        Raises:
            TypeError: If chunker_class is not a BaseChunker subclass
        """
        if not isinstance(chunker_class, type) or not issubclass(chunker_class, BaseChunker):
            raise TypeError(
                f"{getattr(chunker_class, '__name__', chunker_class)} must be a subclass of BaseChunker"
            )

        previous = cls._registry.get(chunker_type)
        if previous is not None and previous is not chunker_class:
            logger.warning(
                f"Replacing chunker type '{chunker_type}': {previous.__name__} -> {chunker_class.__name__}"
            )

        cls._registry[chunker_type] = chunker_class
        logger.info(f"Registered chunker type '{chunker_type}': {chunker_class.__name__}")

    @classmethod
    def list_types(cls) -> list[str]:
        """Registered chunker type names, sorted."""
        return sorted(cls._registry)
