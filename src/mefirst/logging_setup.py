"""Centralized logging configuration for the ``mefirst`` package.

- ``configure_logging(...)`` attaches a single ``StreamHandler`` to the package
  root logger (``"mefirst"``). Called once by the CLI at startup.
- ``get_logger(name)`` returns a logger and makes sure the package root logger
  has at least a ``NullHandler`` when nothing has been configured.

Library modules never attach their own handlers.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

_PKG_LOGGER_NAME = "mefirst"
_CONFIGURED = False


def _level_from_name(name: str) -> int | None:
    name = name.strip().upper()
    if name.isdigit():
        return int(name)
    numeric = getattr(logging, name, None)
    return numeric if isinstance(numeric, int) else None


def _parse_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        resolved = _level_from_name(level)
        if resolved is not None:
            return resolved
    # Env override when explicit ``level`` is missing or unknown
    env_val = os.getenv("MEFIRST_LOG_LEVEL")
    if env_val:
        resolved = _level_from_name(env_val)
        if resolved is not None:
            return resolved
    return logging.WARNING


class _StderrHandler(logging.StreamHandler):
    """Write to whatever ``sys.stderr`` is at emit time (it may be swapped by test runners)."""

    def __init__(self) -> None:
        logging.Handler.__init__(self)

    @property
    def stream(self) -> IO[str]:
        return sys.stderr

    @stream.setter
    def stream(self, value: IO[str]) -> None:
        pass


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Configure the package root logger exactly once.

    Args:
        level: Level as ``int`` or name (e.g. ``"INFO"``). ``None`` falls back to
            the ``MEFIRST_LOG_LEVEL`` environment variable, then ``WARNING``.
        fmt: Optional format string.
        stream: Output stream for the handler (defaults to ``sys.stderr``).
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)

    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    resolved = _parse_level(level)
    handler = logging.StreamHandler(stream) if stream is not None else _StderrHandler()
    handler.setLevel(resolved)
    handler.setFormatter(
        logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s %(message)s")
    )

    logger.setLevel(resolved)
    logger.addHandler(handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger by name, safe for library use before configuration."""
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
