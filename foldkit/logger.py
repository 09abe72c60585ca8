"""Package logger configuration for foldkit.

The library is silent unless the application opts in with setup_logger()."""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "FOLDKIT_LOG_LEVEL"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

def setup_logger(
    name: str = "foldkit",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (the package name by default)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL),
            falls back to $FOLDKIT_LOG_LEVEL, then INFO
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or os.getenv(LOG_LEVEL_ENV, "INFO")
    format_string = format_string or DEFAULT_FORMAT

    logger = logging.getLogger(name)

    # Only attach a stream handler once
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper()))

    return logger

logger = logging.getLogger("foldkit")
logger.addHandler(logging.NullHandler())

__all__ = ("LOG_LEVEL_ENV", "logger", "setup_logger")
