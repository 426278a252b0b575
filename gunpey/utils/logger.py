"""Logging utilities for the puzzle core.

Every module logs through a child of the ``gunpey`` package logger, so an
embedding application can route or silence the whole core in one place.
"""

from __future__ import annotations

import logging
from typing import Optional, TextIO


PACKAGE_LOGGER = "gunpey"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"


def configure_logging(level: int = logging.INFO, *, stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach a compact stream handler to the package logger.

    Recalculation dumps the rendered grid at DEBUG after every mutation, which
    is noisy; keep INFO unless chasing a connectivity bug. Calling this again
    replaces the previous handler instead of stacking a second one.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the package namespace, configuring defaults if needed."""

    if not logging.getLogger(PACKAGE_LOGGER).handlers:
        configure_logging()
    if not name or name == PACKAGE_LOGGER:
        return logging.getLogger(PACKAGE_LOGGER)
    if not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
