"""
Custom exception hierarchy for tfmcompat.

This module defines structured exception types used across tfmcompat.
All exceptions inherit from :class:`TfmCompatError` and support optional
structured metadata via the ``details`` attribute to improve diagnostics
and logging.

Only the parse boundary and the configuration loader raise; compatibility
checks and reductions are total over valid framework identities.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional


class TfmCompatError(Exception):
    """Base exception for all tfmcompat errors.

    All tfmcompat-specific exceptions should inherit from this class.
    It supports structured metadata via ``details`` for richer error
    reporting and debugging.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


def _truncate(text: str, max_length: int = 200) -> str:
    """Truncate long text for safe logging or error reporting."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


class ParseError(TfmCompatError):
    """Raised when a framework token cannot be parsed.

    Args:
        message: Error description.
        token: The offending framework token.
        reason: Short machine-friendly reason (``"empty"``, ``"version"``,
            ``"profile"``, ``"portable"``, ``"syntax"``).
    """

    __slots__ = ("token", "reason")

    def __init__(
        self,
        message: str,
        *,
        token: Optional[str] = None,
        reason: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "token", _truncate(token) if token is not None else None)
        _add_if(details, "reason", reason)

        super().__init__(message, details)

        self.token = token
        self.reason = reason


class ConfigError(TfmCompatError):
    """Raised when a configuration file is invalid.

    Args:
        message: Error description.
        config_path: Path to the configuration file.
        option: Name of the offending option, if any.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "config", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option
