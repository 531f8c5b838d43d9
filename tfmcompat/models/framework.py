"""
Framework identity model for tfmcompat.

:class:`FrameworkIdentity` is the immutable value type for a target
platform (``.NETFramework,Version=v4.5``, ``win81``, ``portable-net45+win8``).
Identities are built by :mod:`tfmcompat.core.parser`; building one by hand
is fine for tests and tables, but only parsed identities carry a resolved
:class:`~tfmcompat.models.portable.PortableProfile`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional, Tuple, Union

from packaging.version import Version

from tfmcompat.constants import (
    AGNOSTIC,
    ANY,
    DNX_CORE,
    NET_CORE,
    NET_PLATFORM,
    PORTABLE,
    UAP,
    UNSUPPORTED,
)
from tfmcompat.utils.version_utils import (
    EMPTY_VERSION,
    format_display_version,
    is_empty_version,
    normalize_version,
    release_parts,
)

if TYPE_CHECKING:
    from tfmcompat.models.portable import PortableProfile

_SPECIAL_IDENTIFIERS = frozenset(name.lower() for name in (ANY, AGNOSTIC, UNSUPPORTED))

# Every version of these is delivered as packages; .NETCore joins from 5.0.
_PACKAGE_BASED_IDENTIFIERS = frozenset(
    name.lower() for name in (NET_PLATFORM, DNX_CORE, UAP)
)


@dataclass(frozen=True, eq=False)
class FrameworkIdentity:
    """A canonical target framework.

    Equality ignores case in the identifier and profile, and compares
    versions numerically, so ``net45`` parsed from ``"net4.5.0"`` equals
    one parsed from ``".NETFramework,Version=v4.5"``.

    Attributes:
        identifier: Canonical identifier (``.NETFramework``, ``Windows``,
            ``Any``...).
        version: Four-component version; ``0.0.0.0`` when unspecified.
        profile: Profile name (``Client``, ``WindowsPhone``), the portable
            profile name (``Profile7`` or a ``+``-joined framework list),
            or ``""``.
        platform_version: Optional secondary version of two-axis
            frameworks.
        portable_profile: Resolved component frameworks of a portable
            identity; ``None`` for every other framework.
    """

    identifier: str
    version: Union[Version, str, Tuple[int, ...]] = EMPTY_VERSION
    profile: str = ""
    platform_version: Optional[Union[Version, str, Tuple[int, ...]]] = None
    portable_profile: Optional["PortableProfile"] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not self.identifier:
            raise ValueError("A framework identifier cannot be empty")
        object.__setattr__(self, "version", normalize_version(self.version))
        object.__setattr__(self, "profile", self.profile or "")
        if self.platform_version is not None:
            object.__setattr__(
                self, "platform_version", normalize_version(self.platform_version)
            )

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FrameworkIdentity):
            return NotImplemented
        return (
            self.identifier.lower() == other.identifier.lower()
            and self.version == other.version
            and self.profile.lower() == other.profile.lower()
            and self.platform_version == other.platform_version
        )

    def __hash__(self) -> int:
        return hash(
            (
                self.identifier.lower(),
                self.version,
                self.profile.lower(),
                self.platform_version,
            )
        )

    def __str__(self) -> str:
        return self.framework_name

    def same_identifier(self, other: FrameworkIdentity) -> bool:
        """Return True if both frameworks share an identifier."""
        return self.identifier.lower() == other.identifier.lower()

    def with_version(self, version: Union[Version, str]) -> FrameworkIdentity:
        """Return a copy of this (non-portable) framework at *version*."""
        return FrameworkIdentity(self.identifier, version, self.profile)

    def with_profile(self, profile: str) -> FrameworkIdentity:
        """Return a copy of this (non-portable) framework with *profile*."""
        return FrameworkIdentity(self.identifier, self.version, profile)

    def sort_key(self) -> Tuple[str, Version, str]:
        """Ordering by identifier, then version, then profile."""
        return (self.identifier.lower(), self.version, self.profile.lower())

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    @property
    def is_any(self) -> bool:
        return self.identifier.lower() == ANY.lower()

    @property
    def is_agnostic(self) -> bool:
        return self.identifier.lower() == AGNOSTIC.lower()

    @property
    def is_unsupported(self) -> bool:
        return self.identifier.lower() == UNSUPPORTED.lower()

    @property
    def is_specific(self) -> bool:
        """False for the ``Any``, ``Agnostic`` and ``Unsupported`` sentinels."""
        return self.identifier.lower() not in _SPECIAL_IDENTIFIERS

    @property
    def has_profile(self) -> bool:
        return bool(self.profile)

    @property
    def is_pcl(self) -> bool:
        """True for portable class library frameworks (``.NETPortable`` < 5)."""
        return (
            self.identifier.lower() == PORTABLE.lower()
            and release_parts(self.version)[0] < 5
        )

    @property
    def is_package_based(self) -> bool:
        """True for frameworks whose platform ships as packages."""
        identifier = self.identifier.lower()
        if identifier in _PACKAGE_BASED_IDENTIFIERS:
            return True
        return identifier == NET_CORE.lower() and release_parts(self.version)[0] >= 5

    @property
    def all_framework_versions(self) -> bool:
        """True when the version is unspecified (``0.0.0.0``)."""
        return is_empty_version(self.version)

    @property
    def framework_name(self) -> str:
        """Long framework name, e.g. ``.NETFramework,Version=v4.0,Profile=Client``."""
        if not self.is_specific:
            return self.identifier

        parts = [self.identifier, f"Version=v{format_display_version(self.version)}"]
        if self.profile:
            parts.append(f"Profile={self.profile}")
        return ",".join(parts)


#: Compatible with every project.
ANY_FRAMEWORK = FrameworkIdentity(ANY)

#: Content-only assets usable by every project.
AGNOSTIC_FRAMEWORK = FrameworkIdentity(AGNOSTIC)

#: Anything that could not be identified.
UNSUPPORTED_FRAMEWORK = FrameworkIdentity(UNSUPPORTED)
