"""
Framework version helpers for tfmcompat.

Framework versions are :class:`packaging.version.Version` values that always
carry exactly four release components (``major.minor.build.revision``).
``packaging`` compares releases with trailing zeros stripped, so ``4.5`` and
``4.5.0.0`` are equal and hash alike; keeping four components on every
instance makes formatting predictable.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Tuple, Union

from packaging.version import InvalidVersion, Version

from tfmcompat.constants import (
    DOTTED_VERSION_IDENTIFIERS,
    EMPTY_RELEASE,
    MAX_VERSION_COMPONENT,
    SINGLE_DIGIT_VERSION_IDENTIFIERS,
    VERSION_COMPONENTS,
)

_DOTTED_VERSION = re.compile(r"^\d+(?:\.\d+){1,3}$")
_UNDOTTED_VERSION = re.compile(r"^\d+$")

VersionLike = Union[str, Version, Tuple[int, ...]]


def make_version(*components: int) -> Version:
    """Build a four-component framework version.

    Missing trailing components default to zero.

    Example::

        >>> make_version(4, 5)
        <Version('4.5.0.0')>
    """
    if len(components) > VERSION_COMPONENTS:
        raise ValueError(f"A framework version has at most {VERSION_COMPONENTS} parts")
    parts = list(components) + [0] * (VERSION_COMPONENTS - len(components))
    for part in parts:
        if part < 0 or part > MAX_VERSION_COMPONENT:
            raise ValueError(f"Version component out of range: {part}")
    return Version(".".join(str(part) for part in parts))


#: The empty framework version (``0.0.0.0``).
EMPTY_VERSION: Version = make_version(*EMPTY_RELEASE)

#: The largest framework version, used as an open upper bound.
MAX_VERSION: Version = make_version(*([MAX_VERSION_COMPONENT] * VERSION_COMPONENTS))


def normalize_version(value: VersionLike) -> Version:
    """Coerce a string, tuple or ``Version`` into a four-component version.

    Only plain release versions are accepted; pre-release, post-release,
    local and epoch segments are meaningless for framework versions.

    Raises:
        ValueError: The value is not a plain dotted release version.
    """
    if isinstance(value, tuple):
        return make_version(*value)

    if isinstance(value, Version):
        version = value
    else:
        if not _DOTTED_VERSION.match(value) and not _UNDOTTED_VERSION.match(value):
            raise ValueError(f"Invalid framework version: {value!r}")
        try:
            version = Version(value)
        except InvalidVersion as exc:
            raise ValueError(f"Invalid framework version: {value!r}") from exc

    if (
        version.epoch
        or version.pre is not None
        or version.post is not None
        or version.dev is not None
        or version.local is not None
    ):
        raise ValueError(f"Framework versions are plain releases: {version}")

    return make_version(*version.release)


def release_parts(version: Version) -> Tuple[int, int, int, int]:
    """Return ``(major, minor, build, revision)`` for a framework version."""
    release = tuple(version.release) + (0,) * VERSION_COMPONENTS
    return release[0], release[1], release[2], release[3]


def is_empty_version(version: Version) -> bool:
    """Return True for ``0.0.0.0``."""
    return version == EMPTY_VERSION


def parse_version_shorthand(value: str) -> Optional[Version]:
    """Parse the version part of a short folder name.

    Dotted strings are read as-is (two to four parts). Undotted strings are
    read positionally, one digit per part, padded to at least two digits:
    ``"4"`` is 4.0, ``"45"`` is 4.5, ``"451"`` is 4.5.1. At most four digits
    are used. An empty string is the empty version.

    Returns:
        The parsed version, or ``None`` when the string is not a version.

    Example::

        >>> parse_version_shorthand("450") == parse_version_shorthand("4.5")
        True
    """
    if value == "":
        return EMPTY_VERSION

    if "." in value:
        if not _DOTTED_VERSION.match(value):
            return None
        parts = [int(part) for part in value.split(".")]
        if any(part > MAX_VERSION_COMPONENT for part in parts):
            return None
        return make_version(*parts)

    if not _UNDOTTED_VERSION.match(value):
        return None

    digits = value if len(value) > 1 else value + "0"
    return make_version(*(int(digit) for digit in digits[:VERSION_COMPONENTS]))


def parse_display_version(value: str) -> Optional[Version]:
    """Parse the ``Version=`` value of a long framework name.

    Accepts an optional leading ``v`` and a bare major version (``v4``).
    """
    if value[:1] in ("v", "V"):
        value = value[1:]
    if _UNDOTTED_VERSION.match(value):
        value += ".0"
    if not _DOTTED_VERSION.match(value):
        return None
    parts = [int(part) for part in value.split(".")]
    if any(part > MAX_VERSION_COMPONENT for part in parts):
        return None
    return make_version(*parts)


def format_short_version(identifier: str, version: Version) -> str:
    """Render a version the way short folder names spell it.

    Trailing zero parts are trimmed down to two parts, or one for Windows,
    WindowsPhone and Silverlight. Parts are concatenated (``45``) unless a
    part exceeds nine or the identifier always uses dots, in which case
    they are joined with dots and padded to two parts (``10.0``).
    """
    parts: List[int] = list(release_parts(version))

    min_parts = 2
    if _contains_identifier(SINGLE_DIGIT_VERSION_IDENTIFIERS, identifier):
        min_parts = 1

    while len(parts) > min_parts and parts[-1] == 0:
        parts.pop()

    if _contains_identifier(DOTTED_VERSION_IDENTIFIERS, identifier) or any(
        part > 9 for part in parts
    ):
        if len(parts) < 2:
            parts.append(0)
        return ".".join(str(part) for part in parts)

    return "".join(str(part) for part in parts)


def format_display_version(version: Version) -> str:
    """Render a version the way long framework names spell it (``4.5.1``)."""
    major, minor, build, revision = release_parts(version)
    text = f"{major}.{minor}"
    if build > 0 or revision > 0:
        text += f".{build}"
        if revision > 0:
            text += f".{revision}"
    return text


def _contains_identifier(identifiers: Iterable[str], identifier: str) -> bool:
    lowered = identifier.lower()
    return any(candidate.lower() == lowered for candidate in identifiers)
