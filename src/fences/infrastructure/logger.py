"""Logging setup for fences.

Modules log through ``logging.getLogger(__name__)``; this module attaches a
single terminal handler to the ``fences`` logger.
"""

from __future__ import annotations

import logging
import os
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

ROOT_LOGGER = "fences"
LEVEL_ENV_VAR = "FENCES_LOG_LEVEL"

# Default format for fences logs
DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%H:%M:%S"


def configure_logging(level: LogLevel | None = None) -> logging.Logger:
    """Configure the ``fences`` logger.

    Args:
        level: Log level override (default: from FENCES_LOG_LEVEL env or WARNING)

    Returns:
        The configured ``fences`` logger

    Example:
        >>> configure_logging("DEBUG")
        >>> logging.getLogger("fences.config").debug("loading pyproject.toml")
        20:55:39 | DEBUG    | fences.config | loading pyproject.toml
    """
    logger = logging.getLogger(ROOT_LOGGER)

    # Only add a handler once
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
        logger.addHandler(handler)
        # Don't propagate to root logger
        logger.propagate = False

    if level:
        logger.setLevel(getattr(logging, level))
    else:
        env_level = os.environ.get(LEVEL_ENV_VAR, "WARNING").upper()
        logger.setLevel(getattr(logging, env_level, logging.WARNING))

    return logger
