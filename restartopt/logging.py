"""Logging helpers for restartopt.

Every module asks for its logger through :func:`get_logger` so that all
optimizer output lives under the ``restartopt`` namespace and can be switched
on for a whole experiment with a single call.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

ROOT_NAME = "restartopt"
DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_DEFAULT_LEVEL = logging.WARNING
_loggers: dict[str, logging.Logger] = {}


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _qualify(name: Optional[str]) -> str:
    if name is None or name == ROOT_NAME:
        return ROOT_NAME
    if name.startswith(f"{ROOT_NAME}."):
        return name
    return f"{ROOT_NAME}.{name}"


def _attach_handler(
    logger: logging.Logger,
    level: int,
    stream: TextIO,
    format_string: str,
) -> None:
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format_string))
    logger.addHandler(handler)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the cached logger for ``name``.

    Args:
        name: Usually ``__name__`` of the calling module. Names outside the
            package namespace are prefixed with ``restartopt.``; ``None``
            returns the package logger itself.

    Returns:
        A logger writing ``[LEVEL] name: message`` lines to stderr.

    Example:
        >>> from restartopt.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("restart 1/5 finished")
    """
    qualified = _qualify(name)
    cached = _loggers.get(qualified)
    if cached is not None:
        return cached

    logger = logging.getLogger(qualified)
    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        _attach_handler(logger, _DEFAULT_LEVEL, sys.stderr, DEFAULT_FORMAT)
        logger.propagate = False

    _loggers[qualified] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Change the level of every restartopt logger, present and future.

    Args:
        level: A ``logging`` level constant or its name (``"DEBUG"``, ...).
            Unknown names fall back to WARNING.
    """
    global _DEFAULT_LEVEL
    resolved = _resolve_level(level)
    for logger in _loggers.values():
        logger.setLevel(resolved)
        for handler in logger.handlers:
            handler.setLevel(resolved)
    _DEFAULT_LEVEL = resolved


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Replace the handlers of all restartopt loggers.

    Call once when an experiment starts, e.g.
    ``configure_logging(level="DEBUG")`` to trace every restart.

    Args:
        level: Logging level (default WARNING).
        format_string: Formatter pattern; defaults to :data:`DEFAULT_FORMAT`.
        stream: Destination stream; defaults to ``sys.stderr``.
    """
    global _DEFAULT_LEVEL
    resolved = _resolve_level(level)
    target = sys.stderr if stream is None else stream
    pattern = DEFAULT_FORMAT if format_string is None else format_string

    for logger in _loggers.values():
        logger.setLevel(resolved)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        _attach_handler(logger, resolved, target, pattern)

    _DEFAULT_LEVEL = resolved


__all__ = [
    "DEFAULT_FORMAT",
    "ROOT_NAME",
    "configure_logging",
    "get_logger",
    "set_log_level",
]
