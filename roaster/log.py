"""Logging setup shared by the API and the CLI."""

from __future__ import annotations

import logging
import sys

APP_LOGGER = "roaster"

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stderr handler to the ``roaster`` logger.

    Safe to call more than once: existing handlers are replaced, never
    stacked.
    """
    lvl = getattr(logging, str(level).upper(), logging.INFO)

    logger = logging.getLogger(APP_LOGGER)
    logger.setLevel(lvl)
    logger.handlers.clear()
    logger.propagate = False

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(lvl)
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))
    logger.addHandler(handler)
    return logger
