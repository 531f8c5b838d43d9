"""
Portable class library profile table.

Maps ``.NETPortable`` profile numbers to the frameworks they target. The
optional frameworks of a profile are Xamarin placeholders that packages
built against the profile also run on.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from tfmcompat import constants as ids
from tfmcompat.core.mappings import (
    NET4,
    NET403,
    NET45,
    NET451,
    SL4,
    SL5,
    WIN8,
    WIN81,
    WP7,
    WP71,
    WP8,
    WP81,
    WPA81,
)
from tfmcompat.models.framework import FrameworkIdentity

ProfileFrameworks = Tuple[int, Tuple[FrameworkIdentity, ...]]


@dataclass(frozen=True)
class PortableFrameworkMappings:
    """One source of portable profile data.

    Attributes:
        profile_frameworks: ``(number, frameworks)`` pairs of required
            frameworks.
        profile_optional_frameworks: ``(number, frameworks)`` pairs of
            optional placeholder frameworks.
    """

    profile_frameworks: Tuple[ProfileFrameworks, ...] = ()
    profile_optional_frameworks: Tuple[ProfileFrameworks, ...] = ()


_XAMARIN_PLACEHOLDERS: Tuple[FrameworkIdentity, ...] = tuple(
    FrameworkIdentity(identifier)
    for identifier in (
        ids.MONO_ANDROID,
        ids.MONO_TOUCH,
        ids.XAMARIN_IOS,
        ids.XAMARIN_MAC,
        ids.XAMARIN_TVOS,
        ids.XAMARIN_WATCHOS,
    )
)

_PROFILES_WITH_OPTIONAL_FRAMEWORKS: Tuple[int, ...] = (
    5, 6, 7, 14, 19, 24, 37, 42, 44, 47, 49, 78, 92, 102, 111,
    136, 147, 151, 158, 225, 255, 259, 328, 336, 344,
)

DEFAULT_PORTABLE_MAPPINGS = PortableFrameworkMappings(
    profile_frameworks=(
        # .NETPortable v4.6
        (31, (WIN81, WP81)),
        (32, (WIN81, WPA81)),
        (44, (NET451, WIN81)),
        (84, (WPA81, WP81)),
        (151, (NET451, WIN81, WPA81)),
        (157, (WIN81, WPA81, WP81)),
        # .NETPortable v4.5
        (7, (NET45, WIN8)),
        (49, (NET45, WP8)),
        (78, (NET45, WIN8, WP8)),
        (111, (NET45, WIN8, WPA81)),
        (259, (NET45, WIN8, WPA81, WP8)),
        # .NETPortable v4.0
        (2, (NET4, WIN8, SL4, WP7)),
        (3, (NET4, SL4)),
        (4, (NET45, SL4, WIN8, WP7)),
        (5, (NET4, WIN8)),
        (6, (NET403, WIN8)),
        (14, (NET4, SL5)),
        (18, (NET403, SL4)),
        (19, (NET403, SL5)),
        (23, (NET45, SL4)),
        (24, (NET45, SL5)),
        (36, (NET4, SL4, WIN8, WP8)),
        (37, (NET4, SL5, WIN8)),
        (41, (NET403, SL4, WIN8)),
        (42, (NET403, SL5, WIN8)),
        (46, (NET45, SL4, WIN8)),
        (47, (NET45, SL5, WIN8)),
        (88, (NET4, SL4, WIN8, WP71)),
        (92, (NET4, WIN8, WPA81)),
        (95, (NET403, SL4, WIN8, WP7)),
        (96, (NET403, SL4, WIN8, WP71)),
        (102, (NET403, WIN8, WPA81)),
        (104, (NET45, SL4, WIN8, WP71)),
        (136, (NET4, SL5, WIN8, WP8)),
        (143, (NET403, SL4, WIN8, WP8)),
        (147, (NET403, SL5, WIN8, WP8)),
        (154, (NET45, SL4, WIN8, WP8)),
        (158, (NET45, SL5, WIN8, WP8)),
        (225, (NET4, SL5, WIN8, WPA81)),
        (240, (NET403, SL5, WIN8, WPA81)),
        (255, (NET45, SL5, WIN8, WPA81)),
        (328, (NET4, SL5, WIN8, WPA81, WP8)),
        (336, (NET403, SL5, WIN8, WPA81, WP8)),
        (344, (NET45, SL5, WIN8, WPA81, WP8)),
    ),
    profile_optional_frameworks=tuple(
        (number, _XAMARIN_PLACEHOLDERS) for number in _PROFILES_WITH_OPTIONAL_FRAMEWORKS
    ),
)
