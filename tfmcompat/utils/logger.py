"""
Logging utilities for tfmcompat.

The engine is a library: it never configures logging on import and every
logger it hands out falls back to a ``NullHandler``. Applications that want
to see the engine's debug trail (parse results, nearest-match decisions)
call :func:`setup_logging` once.
"""

from __future__ import annotations

import os
import sys
import logging
import threading
from typing import IO, Optional, Union

from tfmcompat.constants import (
    LOG_DATE_FORMAT,
    LOG_DEFAULT_FORMAT,
    LOG_VERBOSE_FORMAT,
)

#: Root of the tfmcompat logger hierarchy.
LOGGER_NAMESPACE = "tfmcompat"

_logging_configured: bool = False
_lock = threading.Lock()


class ColoredFormatter(logging.Formatter):
    """Logging formatter with optional ANSI color support."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(
        self,
        fmt: str,
        *,
        datefmt: Optional[str] = None,
        use_color: bool = True,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        if self.use_color and self._should_use_color():
            color = self.COLORS.get(levelname)
            if color:
                record.levelname = f"{color}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            # Other handlers must see the plain level name
            record.levelname = levelname

    @staticmethod
    def _should_use_color() -> bool:
        """Determine whether ANSI colors should be emitted."""
        if os.environ.get("NO_COLOR"):
            return False
        if os.environ.get("CI"):
            return False
        try:
            return sys.stderr.isatty()
        except (AttributeError, OSError):
            return False


def _resolve_level(level: Union[int, str]) -> int:
    """Turn ``"debug"`` or ``logging.DEBUG`` into a numeric level."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(
    *,
    level: Union[int, str] = logging.INFO,
    verbose: bool = False,
    stream: Optional[IO[str]] = None,
) -> None:
    """Configure logging for tfmcompat.

    Safe to call multiple times; each call replaces the previous handler.
    Configuration is protected by a process-wide lock.

    Args:
        level: Logging level, numeric or by name (``"DEBUG"``).
        verbose: Enable verbose formatting with timestamps and logger names.
        stream: Output stream; defaults to ``sys.stderr``.
    """
    global _logging_configured

    numeric_level = _resolve_level(level)

    with _lock:
        root_logger = logging.getLogger(LOGGER_NAMESPACE)
        root_logger.handlers.clear()
        root_logger.setLevel(numeric_level)

        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setLevel(numeric_level)

        fmt = LOG_VERBOSE_FORMAT if verbose else LOG_DEFAULT_FORMAT
        formatter = ColoredFormatter(
            fmt,
            datefmt=LOG_DATE_FORMAT,
            use_color=not os.environ.get("NO_COLOR"),
        )
        handler.setFormatter(formatter)

        root_logger.addHandler(handler)
        root_logger.propagate = False
        _logging_configured = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger within the tfmcompat namespace.

    Args:
        name: Logger name, either relative (``"reducer"``) or already
            qualified (``"tfmcompat.core.reducer"``).

    Returns:
        A logger instance under the ``tfmcompat`` hierarchy.
    """
    if not name or name == LOGGER_NAMESPACE:
        logger = logging.getLogger(LOGGER_NAMESPACE)
    elif name.startswith(LOGGER_NAMESPACE + "."):
        logger = logging.getLogger(name)
    else:
        logger = logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")

    if not logger.handlers and (not logger.parent or not logger.parent.handlers):
        logger.addHandler(logging.NullHandler())

    return logger


def is_logging_configured() -> bool:
    """Return True if tfmcompat logging has been configured."""
    return _logging_configured


def disable_logging() -> None:
    """Silence all tfmcompat logging output."""
    global _logging_configured

    with _lock:
        root_logger = logging.getLogger(LOGGER_NAMESPACE)
        root_logger.handlers.clear()
        root_logger.addHandler(logging.NullHandler())
        root_logger.setLevel(logging.NOTSET)
        _logging_configured = False
