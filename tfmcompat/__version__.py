"""
tfmcompat version information.

This module provides a single source of truth for the package version.
It follows Semantic Versioning: https://semver.org/

Examples:
    0.1.0
    0.1.0.dev0
"""

from __future__ import annotations

from packaging.version import Version

# ---------------------------------------------------------------------------
# Main version (single source of truth)
# ---------------------------------------------------------------------------

__version__ = "0.1.0"


# ---------------------------------------------------------------------------
# Structured version metadata
# ---------------------------------------------------------------------------

_parsed = Version(__version__)

VERSION_INFO = {
    "major": _parsed.major,
    "minor": _parsed.minor,
    "patch": _parsed.micro,
    "prerelease": _parsed.pre,
    "is_dev": _parsed.is_devrelease,
}

VERSION_STRING = f"tfmcompat {__version__}"
