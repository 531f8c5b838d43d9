"""
Utility helpers for tfmcompat.

This package provides reusable utilities used across tfmcompat, including:

- Logging configuration and retrieval
- Framework version construction, parsing and formatting

Only symbols listed in ``__all__`` are considered part of the public API.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Logging utilities
# ---------------------------------------------------------------------------

from tfmcompat.utils.logger import (
    disable_logging,
    get_logger,
    is_logging_configured,
    setup_logging,
)

# ---------------------------------------------------------------------------
# Version utilities
# ---------------------------------------------------------------------------

from tfmcompat.utils.version_utils import (
    EMPTY_VERSION,
    MAX_VERSION,
    format_display_version,
    format_short_version,
    make_version,
    normalize_version,
)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    "disable_logging",
    "is_logging_configured",
    # Version utilities
    "EMPTY_VERSION",
    "MAX_VERSION",
    "make_version",
    "normalize_version",
    "format_short_version",
    "format_display_version",
]
