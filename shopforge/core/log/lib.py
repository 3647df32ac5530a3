"""Core logging implementation for shopforge."""

import logging
import sys
from typing import Optional

__all__ = ["LOG_FORMAT", "get_logger", "setup_logging"]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.INFO, stream=sys.stderr) -> None:
    """Configure basic logging for CLI and server entry points.

    Args:
        level: Logging level.
        stream: Output stream. Defaults to stderr so stdio transports stay clean.
    """
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=stream)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Name of the logger.

    Returns:
        Logger instance, the package root logger when no name is given.
    """
    return logging.getLogger(name or "shopforge")
