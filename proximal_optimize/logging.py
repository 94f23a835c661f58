"""Logging utilities for proximal_optimize.

Only the package logger ``proximal_optimize`` owns a handler. Module loggers
are its children: they carry no level or handler of their own and forward
their records to it, so one call to :func:`set_log_level` or
:func:`configure_logging` governs every optimizer, including modules imported
later. Nothing is printed unless the level is lowered below WARNING.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "proximal_optimize"
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_installed = False


def _level_of(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _package_logger() -> logging.Logger:
    global _installed
    root = logging.getLogger(PACKAGE_LOGGER)
    if not _installed:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.WARNING)
        # Iteration traces stay out of the application's root logger.
        root.propagate = False
        _installed = True
    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the logger for ``name`` inside the package hierarchy.

    Args:
        name: Typically ``__name__`` of the calling module. Names outside the
            package are placed under it; None returns the package logger.

    Example:
        >>> from proximal_optimize.logging import get_logger
        >>> get_logger("pgm").name
        'proximal_optimize.pgm'
    """
    root = _package_logger()
    if name is None or name == PACKAGE_LOGGER:
        return root
    if not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def set_log_level(level: int | str) -> None:
    """Set the threshold of the package logger and its handlers.

    Args:
        level: ``logging.DEBUG`` etc. or a level name; unknown names fall back
            to WARNING.
    """
    level = _level_of(level)
    root = _package_logger()
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Replace the package handler with one writing to ``stream``.

    Args:
        level: Logging level (default: WARNING).
        format_string: Record layout; defaults to ``[LEVEL] name: message``.
        stream: Output stream (default: sys.stderr).
    """
    root = _package_logger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or _DEFAULT_FORMAT))
    root.addHandler(handler)
    set_log_level(level)


__all__ = ["PACKAGE_LOGGER", "configure_logging", "get_logger", "set_log_level"]
