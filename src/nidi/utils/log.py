"""Logging setup for the ``nidi`` logger hierarchy.

Modules log through ``logging.getLogger(__name__)``; this module attaches
a single Rich handler (stderr) to the package logger.  Configuration is
idempotent: calling it again only updates the level.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "nidi"

_HANDLER_MARKER = "_nidi_handler"


def level_for(debug: bool) -> int:
    """Map the ``--debug`` flag to a logging level."""
    return logging.DEBUG if debug else logging.WARNING


def configure_logging(*, debug: bool = False) -> logging.Logger:
    """Configure and return the package logger.

    Safe to call multiple times.
    """
    logger = logging.getLogger(LOGGER_NAME)
    level = level_for(debug)
    logger.setLevel(level)

    for handler in logger.handlers:
        if getattr(handler, _HANDLER_MARKER, False):
            handler.setLevel(level)
            return logger

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    setattr(handler, _HANDLER_MARKER, True)
    logger.addHandler(handler)
    return logger
