"""Logging configuration for dendron-tree."""

import sys

from loguru import logger

# Messages bound to a vault carry its path; everything else shows "-".
LOG_FORMAT = "{level.icon} [{extra[vault]}] {message}"


def configure_logging(*, verbose: bool = False) -> None:
    """Send log records to stderr, at DEBUG level when ``verbose``."""
    logger.remove()
    logger.configure(extra={"vault": "-"})
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO", format=LOG_FORMAT)
