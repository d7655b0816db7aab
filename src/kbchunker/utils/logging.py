"""Loguru sink setup for applications embedding kbchunker."""

import sys

from loguru import logger

from kbchunker.config.settings import settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def setup_logging(level: str | None = None) -> int:
    """Replace loguru's default sink with a single stderr sink.

    Args:
        level: Minimum level; defaults to settings.LOG_LEVEL

    Returns:
        The loguru handler id of the new sink
    """
    logger.remove()
    return logger.add(sys.stderr, level=(level or settings.LOG_LEVEL).upper(), format=LOG_FORMAT)
