"""
Static framework mapping tables.

A :class:`FrameworkMappings` instance is plain, immutable data: synonyms,
short names, equivalences, one-way compatibility ranges and precedence
lists. :class:`~tfmcompat.core.name_provider.FrameworkNameProvider` indexes
one or more of them; nothing else reads these tables directly.

The built-in table is :data:`DEFAULT_FRAMEWORK_MAPPINGS`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from tfmcompat import constants as ids
from tfmcompat.models.framework import FrameworkIdentity
from tfmcompat.models.ranges import FrameworkRange, OneWayCompatibilityMapping
from tfmcompat.utils.version_utils import MAX_VERSION, make_version

FrameworkPair = Tuple[FrameworkIdentity, FrameworkIdentity]


@dataclass(frozen=True)
class FrameworkMappings:
    """One source of framework naming and compatibility data.

    Attributes:
        identifier_synonyms: ``(alias, identifier)`` pairs, e.g.
            ``("NETFramework", ".NETFramework")``.
        identifier_short_names: ``(short, identifier)`` pairs used by short
            folder names.
        profile_short_names: ``(identifier, short, profile)`` triples.
        equivalent_frameworks: Pairs of mutually compatible frameworks.
        equivalent_profiles: ``(identifier, profile, profile)`` triples of
            interchangeable profiles.
        subset_frameworks: ``(identifier, subset identifier)`` pairs; a
            framework may consume the same version of its subsets.
        compatibility_mappings: One-way compatibility ranges.
        framework_precedence: Identifiers preferred when picking between
            otherwise equal candidates, best first.
        equivalent_framework_precedence: Identifiers preferred when
            collapsing equivalent frameworks, best first.
        framework_rewrites: Parsed frameworks replaced by their canonical
            alias (``win`` becomes ``win8``).
        short_name_rewrites: Frameworks printed as another framework's
            short name (``dotnet5.0`` prints as ``dotnet``).
    """

    identifier_synonyms: Tuple[Tuple[str, str], ...] = ()
    identifier_short_names: Tuple[Tuple[str, str], ...] = ()
    profile_short_names: Tuple[Tuple[str, str, str], ...] = ()
    equivalent_frameworks: Tuple[FrameworkPair, ...] = ()
    equivalent_profiles: Tuple[Tuple[str, str, str], ...] = ()
    subset_frameworks: Tuple[Tuple[str, str], ...] = ()
    compatibility_mappings: Tuple[OneWayCompatibilityMapping, ...] = ()
    framework_precedence: Tuple[str, ...] = ()
    equivalent_framework_precedence: Tuple[str, ...] = ()
    framework_rewrites: Tuple[FrameworkPair, ...] = ()
    short_name_rewrites: Tuple[FrameworkPair, ...] = ()


def _fw(identifier: str, *version: int, profile: str = "") -> FrameworkIdentity:
    return FrameworkIdentity(identifier, make_version(*version), profile)


def _all_versions(identifier: str, profile: str = "") -> FrameworkRange:
    return FrameworkRange(
        FrameworkIdentity(identifier, make_version(0, 0), profile),
        FrameworkIdentity(identifier, MAX_VERSION, profile),
    )


def _from(framework: FrameworkIdentity) -> FrameworkRange:
    """``framework`` and every later version."""
    return FrameworkRange(framework, framework.with_version(MAX_VERSION))


def _up_to(framework: FrameworkIdentity) -> FrameworkRange:
    """Every version up to and including ``framework``."""
    return FrameworkRange(framework.with_version(make_version(0, 0)), framework)


def _exactly(framework: FrameworkIdentity) -> FrameworkRange:
    return FrameworkRange(framework, framework)


def _one_way(target: FrameworkRange, supported: FrameworkRange) -> OneWayCompatibilityMapping:
    return OneWayCompatibilityMapping(target_range=target, supported_range=supported)


# ---------------------------------------------------------------------------
# Common frameworks
# ---------------------------------------------------------------------------

NET4 = _fw(ids.NET, 4, 0)
NET403 = _fw(ids.NET, 4, 0, 3)
NET45 = _fw(ids.NET, 4, 5)
NET451 = _fw(ids.NET, 4, 5, 1)
NET46 = _fw(ids.NET, 4, 6)
NET461 = _fw(ids.NET, 4, 6, 1)

WIN = _fw(ids.WINDOWS, 0, 0)
WIN8 = _fw(ids.WINDOWS, 8, 0)
WIN81 = _fw(ids.WINDOWS, 8, 1)

NETCORE = _fw(ids.NET_CORE, 0, 0)
NETCORE45 = _fw(ids.NET_CORE, 4, 5)
NETCORE451 = _fw(ids.NET_CORE, 4, 5, 1)
NETCORE50 = _fw(ids.NET_CORE, 5, 0)

WINRT = _fw(ids.WINRT, 0, 0)
WINRT45 = _fw(ids.WINRT, 4, 5)

SL3 = _fw(ids.SILVERLIGHT, 3, 0)
SL4 = _fw(ids.SILVERLIGHT, 4, 0)
SL5 = _fw(ids.SILVERLIGHT, 5, 0)
SL3_WP = _fw(ids.SILVERLIGHT, 3, 0, profile=ids.PROFILE_WINDOWS_PHONE)
SL4_WP71 = _fw(ids.SILVERLIGHT, 4, 0, profile=ids.PROFILE_WINDOWS_PHONE71)
SL8_WP = _fw(ids.SILVERLIGHT, 8, 0, profile=ids.PROFILE_WINDOWS_PHONE)
SL81_WP = _fw(ids.SILVERLIGHT, 8, 1, profile=ids.PROFILE_WINDOWS_PHONE)

WP = _fw(ids.WINDOWS_PHONE, 0, 0)
WP7 = _fw(ids.WINDOWS_PHONE, 7, 0)
WP71 = _fw(ids.WINDOWS_PHONE, 7, 1)
WP8 = _fw(ids.WINDOWS_PHONE, 8, 0)
WP81 = _fw(ids.WINDOWS_PHONE, 8, 1)

WPA = _fw(ids.WINDOWS_PHONE_APP, 0, 0)
WPA81 = _fw(ids.WINDOWS_PHONE_APP, 8, 1)

UAP = _fw(ids.UAP, 0, 0)
UAP10 = _fw(ids.UAP, 10, 0)

DNX = _fw(ids.DNX, 0, 0)
DNX45 = _fw(ids.DNX, 4, 5)
DNXCORE = _fw(ids.DNX_CORE, 0, 0)
DNXCORE50 = _fw(ids.DNX_CORE, 5, 0)

ASPNET = _fw(ids.ASP_NET, 0, 0)
ASPNET50 = _fw(ids.ASP_NET, 5, 0)
ASPNETCORE = _fw(ids.ASP_NET_CORE, 0, 0)
ASPNETCORE50 = _fw(ids.ASP_NET_CORE, 5, 0)

NATIVE = _fw(ids.NATIVE, 0, 0)
CORE50 = _fw(ids.CORE, 5, 0)

DOTNET = _fw(ids.NET_PLATFORM, 0, 0)
DOTNET50 = _fw(ids.NET_PLATFORM, 5, 0)
DOTNET51 = _fw(ids.NET_PLATFORM, 5, 1)
DOTNET52 = _fw(ids.NET_PLATFORM, 5, 2)
DOTNET53 = _fw(ids.NET_PLATFORM, 5, 3)
DOTNET54 = _fw(ids.NET_PLATFORM, 5, 4)
DOTNET55 = _fw(ids.NET_PLATFORM, 5, 5)

# ---------------------------------------------------------------------------
# dotnet generations
# ---------------------------------------------------------------------------

_DOTNET_GENERATION_TARGETS: Tuple[Tuple[FrameworkRange, FrameworkIdentity], ...] = (
    (_all_versions(ids.DNX_CORE), DOTNET55),
    (_all_versions(ids.UAP), DOTNET54),
    (_from(NETCORE50), DOTNET54),
    (_from(WPA81), DOTNET53),
    (_from(WP8), DOTNET51),
    (_from(NET45), DOTNET52),
    (_from(NET451), DOTNET53),
    (_from(NET46), DOTNET54),
    (_from(NET461), DOTNET55),
    (_from(NETCORE45), DOTNET52),
    (_from(NETCORE451), DOTNET53),
    (_all_versions(ids.MONO_ANDROID), DOTNET55),
    (_all_versions(ids.MONO_MAC), DOTNET55),
    (_all_versions(ids.MONO_TOUCH), DOTNET55),
    (_all_versions(ids.XAMARIN_IOS), DOTNET55),
    (_all_versions(ids.XAMARIN_MAC), DOTNET55),
    (_all_versions(ids.XAMARIN_PLAYSTATION3), DOTNET55),
    (_all_versions(ids.XAMARIN_PLAYSTATION4), DOTNET55),
    (_all_versions(ids.XAMARIN_PLAYSTATION_VITA), DOTNET55),
    (_all_versions(ids.XAMARIN_XBOX360), DOTNET55),
    (_all_versions(ids.XAMARIN_XBOXONE), DOTNET55),
    (_all_versions(ids.XAMARIN_TVOS), DOTNET55),
    (_all_versions(ids.XAMARIN_WATCHOS), DOTNET55),
)

# ---------------------------------------------------------------------------
# Default mappings
# ---------------------------------------------------------------------------

DEFAULT_FRAMEWORK_MAPPINGS = FrameworkMappings(
    identifier_synonyms=(
        ("NETFramework", ids.NET),
        (".NET", ids.NET),
        ("NETCore", ids.NET_CORE),
        ("NETPlatform", ids.NET_PLATFORM),
        ("NETPortable", ids.PORTABLE),
        ("NETMicroFramework", ids.NET_MICRO),
        ("asp.net", ids.ASP_NET),
        ("asp.netcore", ids.ASP_NET_CORE),
        ("Xamarin.PlayStationThree", ids.XAMARIN_PLAYSTATION3),
        ("XamarinPlayStationThree", ids.XAMARIN_PLAYSTATION3),
        ("Xamarin.PlayStationFour", ids.XAMARIN_PLAYSTATION4),
        ("XamarinPlayStationFour", ids.XAMARIN_PLAYSTATION4),
        ("XamarinPlayStationVita", ids.XAMARIN_PLAYSTATION_VITA),
    ),
    identifier_short_names=(
        ("dotnet", ids.NET_PLATFORM),
        ("net", ids.NET),
        ("netmf", ids.NET_MICRO),
        ("sl", ids.SILVERLIGHT),
        ("portable", ids.PORTABLE),
        ("wp", ids.WINDOWS_PHONE),
        ("wpa", ids.WINDOWS_PHONE_APP),
        ("win", ids.WINDOWS),
        ("aspnet", ids.ASP_NET),
        ("aspnetcore", ids.ASP_NET_CORE),
        ("native", ids.NATIVE),
        ("core", ids.CORE),
        ("monoandroid", ids.MONO_ANDROID),
        ("monotouch", ids.MONO_TOUCH),
        ("monomac", ids.MONO_MAC),
        ("xamarinios", ids.XAMARIN_IOS),
        ("xamarinmac", ids.XAMARIN_MAC),
        ("xamarinpsthree", ids.XAMARIN_PLAYSTATION3),
        ("xamarinpsfour", ids.XAMARIN_PLAYSTATION4),
        ("xamarinpsvita", ids.XAMARIN_PLAYSTATION_VITA),
        ("xamarinwatchos", ids.XAMARIN_WATCHOS),
        ("xamarintvos", ids.XAMARIN_TVOS),
        ("xamarinxboxthreesixty", ids.XAMARIN_XBOX360),
        ("xamarinxboxone", ids.XAMARIN_XBOXONE),
        ("dnx", ids.DNX),
        ("dnxcore", ids.DNX_CORE),
        ("netcore", ids.NET_CORE),
        ("winrt", ids.WINRT),
        ("uap", ids.UAP),
    ),
    profile_short_names=(
        (ids.NET, "client", ids.PROFILE_CLIENT),
        (ids.NET, "cf", ids.PROFILE_COMPACT_FRAMEWORK),
        (ids.NET, "full", ""),
        (ids.SILVERLIGHT, "wp", ids.PROFILE_WINDOWS_PHONE),
        (ids.SILVERLIGHT, "wp71", ids.PROFILE_WINDOWS_PHONE71),
    ),
    equivalent_frameworks=(
        (UAP, UAP10),
        (WIN, WIN8),
        (WIN8, NETCORE45),
        (NETCORE45, WINRT45),
        (NETCORE, NETCORE45),
        (WINRT, WINRT45),
        (WIN81, NETCORE451),
        (WP, WP7),
        (WP7, SL3_WP),
        (WP71, SL4_WP71),
        (WP8, SL8_WP),
        (WP81, SL81_WP),
        (WPA, WPA81),
        (DNX, DNX45),
        (DNXCORE, DNXCORE50),
        (DOTNET, DOTNET50),
        (ASPNET, ASPNET50),
        (ASPNETCORE, ASPNETCORE50),
        (DNX45, ASPNET50),
    ),
    equivalent_profiles=(
        (ids.NET, ids.PROFILE_CLIENT, ""),
        (ids.SILVERLIGHT, ids.PROFILE_WINDOWS_PHONE71, ids.PROFILE_WINDOWS_PHONE),
        (ids.WINDOWS_PHONE, ids.PROFILE_WINDOWS_PHONE71, ids.PROFILE_WINDOWS_PHONE),
    ),
    subset_frameworks=(
        (ids.DNX, ids.NET),
        (ids.DNX_CORE, ids.NET_PLATFORM),
    ),
    compatibility_mappings=(
        # UAP projects consume Windows Store, Windows Phone App and netcore50
        _one_way(_all_versions(ids.UAP), _up_to(WIN81)),
        _one_way(_all_versions(ids.UAP), _up_to(WPA81)),
        _one_way(_all_versions(ids.UAP), _exactly(NETCORE50)),
        _one_way(_all_versions(ids.WINDOWS), _up_to(WINRT45)),
        # DNX bridges; ASP.NET packages are reached through dnx45 == aspnet50
        _one_way(_all_versions(ids.DNX), _exactly(NATIVE)),
        _one_way(_all_versions(ids.DNX_CORE), _exactly(NATIVE)),
        _one_way(_all_versions(ids.DNX_CORE), _up_to(CORE50)),
        _one_way(_all_versions(ids.DNX_CORE), _up_to(ASPNETCORE50)),
        _one_way(_from(NET45), _up_to(CORE50)),
    )
    + tuple(
        _one_way(target, FrameworkRange(DOTNET, generation))
        for target, generation in _DOTNET_GENERATION_TARGETS
    ),
    framework_precedence=(
        ids.NET,
        ids.NET_CORE,
        ids.WINDOWS,
        ids.WINDOWS_PHONE_APP,
    ),
    equivalent_framework_precedence=(
        ids.WINDOWS,
        ids.NET_CORE,
        ids.WINRT,
        ids.WINDOWS_PHONE,
        ids.SILVERLIGHT,
        ids.DNX_CORE,
        ids.ASP_NET_CORE,
        ids.DNX,
        ids.ASP_NET,
    ),
    framework_rewrites=(
        (WIN, WIN8),
        (WP, WP7),
        (SL3_WP, WP7),
        (SL4_WP71, WP71),
        (SL8_WP, WP8),
        (SL81_WP, WP81),
        (WPA, WPA81),
        (DOTNET, DOTNET50),
        (DNXCORE, DNXCORE50),
    ),
    short_name_rewrites=((DOTNET50, DOTNET),),
)
