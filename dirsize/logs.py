"""Logging setup for the command-line tool.

Library modules log through ``logging.getLogger(__name__)``; only the CLI
attaches a handler, which writes to stderr so reports on stdout stay clean.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOGGER_NAME = "dirsize"
LOG_FORMAT = "%(levelname)s: %(message)s"
_HANDLER_ATTR = "_dirsize_cli_handler"


def level_for_verbosity(verbosity: int) -> int:
    """Map ``-q``/``-v`` counts to a logging level.

    ``0`` shows warnings, ``1`` adds special-file notes, ``2+`` adds per
    directory debug output, and negative values show errors only.
    """
    if verbosity < 0:
        return logging.ERROR
    if verbosity == 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def configure_logging(verbosity: int = 0, stream: TextIO | None = None) -> logging.Logger:
    """Attach one stderr handler to the package logger and set its level.

    Calling again replaces the previous CLI handler instead of stacking them.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    setattr(handler, _HANDLER_ATTR, True)
    logger.addHandler(handler)
    logger.setLevel(level_for_verbosity(verbosity))
    logger.propagate = False
    return logger


__all__ = [
    "LOGGER_NAME",
    "LOG_FORMAT",
    "level_for_verbosity",
    "configure_logging",
]
