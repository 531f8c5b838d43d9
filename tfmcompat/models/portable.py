"""
Portable class library profile model.

A portable (``.NETPortable``) framework stands for a set of component
platforms. Numbered profiles (``Profile259``) come from a static table and
may list optional Xamarin placeholders; ``+``-joined lists that match no
table entry keep exactly the frameworks they name.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, FrozenSet, Optional

from tfmcompat.constants import PORTABLE_PROFILE_PREFIX

if TYPE_CHECKING:
    from tfmcompat.models.framework import FrameworkIdentity


@dataclass(frozen=True)
class PortableProfile:
    """Resolved component frameworks of a portable framework.

    Attributes:
        frameworks: Every component framework, optional ones included.
        optional_frameworks: Placeholders (``MonoAndroid``, ``MonoTouch``...)
            that a consumer does not need to match; a subset of
            ``frameworks``.
        number: Profile number from the profile table, when known.
    """

    frameworks: FrozenSet[FrameworkIdentity]
    optional_frameworks: FrozenSet[FrameworkIdentity] = frozenset()
    number: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.optional_frameworks <= self.frameworks:
            raise ValueError("Optional frameworks must be part of the profile")

    @property
    def required_frameworks(self) -> FrozenSet[FrameworkIdentity]:
        """Frameworks a consumer has to account for."""
        return self.frameworks - self.optional_frameworks

    @property
    def name(self) -> Optional[str]:
        """``ProfileNNN`` for numbered profiles, ``None`` otherwise."""
        if self.number is None:
            return None
        return f"{PORTABLE_PROFILE_PREFIX}{self.number}"
