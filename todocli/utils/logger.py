"""Shared logger initialization for the to-do CLI.

Usage:
    from todocli.utils.logger import get_logger
    log = get_logger(__name__)
    log.info("message")
"""
from __future__ import annotations

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

_FORMAT = "%(message)s"  # rich handler already adds time & level
_HANDLER: Optional[RichHandler] = None


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def configure_logging(level: Union[int, str] = logging.WARNING) -> None:
    """Idempotently attach a stderr RichHandler to the root logger.

    Calling again only adjusts the level. Logs go to stderr so they never
    interleave with the interactive menu on stdout.
    """
    global _HANDLER
    numeric = _resolve_level(level)
    root = logging.getLogger()
    if _HANDLER is None:
        _HANDLER = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            markup=False,
            show_path=False,
        )
        _HANDLER.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(_HANDLER)
    root.setLevel(numeric)
    _HANDLER.setLevel(numeric)


def get_logger(name: str = __name__, level: Optional[int] = None) -> logging.Logger:
    """Return a module-level logger."""
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger
