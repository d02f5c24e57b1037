"""Logging setup shared by the CLI and library modules."""

from __future__ import annotations

import logging
import sys

_ROOT_LOGGER = "mdtree"
_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a module logger under the mdtree namespace."""
    return logging.getLogger(name)


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Install a single stderr handler on the mdtree logger.

    Calling this more than once replaces the previous handler rather than
    stacking duplicates.

    Args:
        level: Logging level as an int or a name such as "DEBUG".

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(_ROOT_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_mdtree_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler._mdtree_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
