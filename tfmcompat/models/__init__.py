"""
Unified data model exports for tfmcompat.

Example:
    >>> from tfmcompat.models import FrameworkIdentity, PortableProfile
"""

from __future__ import annotations

from tfmcompat.models.framework import (
    AGNOSTIC_FRAMEWORK,
    ANY_FRAMEWORK,
    UNSUPPORTED_FRAMEWORK,
    FrameworkIdentity,
)
from tfmcompat.models.portable import PortableProfile
from tfmcompat.models.ranges import FrameworkRange, OneWayCompatibilityMapping

__all__ = [
    "FrameworkIdentity",
    "PortableProfile",
    "FrameworkRange",
    "OneWayCompatibilityMapping",
    "ANY_FRAMEWORK",
    "AGNOSTIC_FRAMEWORK",
    "UNSUPPORTED_FRAMEWORK",
]
