"""Logging configuration for bookprint."""

from __future__ import annotations

import logging

from bookprint.config import BOOKPRINT_LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """Configure the root ``bookprint`` logger to write to stderr.

    Args:
        level: Logging level name or number. Defaults to BOOKPRINT_LOG_LEVEL.
    """
    logger = logging.getLogger("bookprint")
    logger.setLevel(level if level is not None else BOOKPRINT_LOG_LEVEL)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the ``bookprint`` namespace."""
    return logging.getLogger(name)
