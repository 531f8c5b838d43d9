"""
Centralized constants for tfmcompat.

This module defines immutable values used across tfmcompat, including
framework identifiers, special sentinel names, version bounds, config
discovery names, and logging formats. All values are intended to be
treated as read-only.
"""

from typing import Final, Tuple

# ---------------------------------------------------------------------------
# Special frameworks
# ---------------------------------------------------------------------------

#: Framework that is compatible with every project.
ANY: Final[str] = "Any"

#: Content-only framework usable by every project.
AGNOSTIC: Final[str] = "Agnostic"

#: Framework that could not be identified.
UNSUPPORTED: Final[str] = "Unsupported"

# ---------------------------------------------------------------------------
# Framework identifiers
# ---------------------------------------------------------------------------

NET_PLATFORM: Final[str] = ".NETPlatform"
NET: Final[str] = ".NETFramework"
NET_CORE: Final[str] = ".NETCore"
WINRT: Final[str] = "WinRT"
NET_MICRO: Final[str] = ".NETMicroFramework"
PORTABLE: Final[str] = ".NETPortable"
WINDOWS_PHONE: Final[str] = "WindowsPhone"
WINDOWS: Final[str] = "Windows"
WINDOWS_PHONE_APP: Final[str] = "WindowsPhoneApp"
DNX: Final[str] = "DNX"
DNX_CORE: Final[str] = "DNXCore"
ASP_NET: Final[str] = "ASP.NET"
ASP_NET_CORE: Final[str] = "ASP.NETCore"
SILVERLIGHT: Final[str] = "Silverlight"
NATIVE: Final[str] = "native"
CORE: Final[str] = "Core"
UAP: Final[str] = "UAP"
MONO_ANDROID: Final[str] = "MonoAndroid"
MONO_TOUCH: Final[str] = "MonoTouch"
MONO_MAC: Final[str] = "MonoMac"
XAMARIN_IOS: Final[str] = "Xamarin.iOS"
XAMARIN_MAC: Final[str] = "Xamarin.Mac"
XAMARIN_PLAYSTATION3: Final[str] = "Xamarin.PlayStation3"
XAMARIN_PLAYSTATION4: Final[str] = "Xamarin.PlayStation4"
XAMARIN_PLAYSTATION_VITA: Final[str] = "Xamarin.PlayStationVita"
XAMARIN_WATCHOS: Final[str] = "Xamarin.WatchOS"
XAMARIN_TVOS: Final[str] = "Xamarin.TVOS"
XAMARIN_XBOX360: Final[str] = "Xamarin.Xbox360"
XAMARIN_XBOXONE: Final[str] = "Xamarin.XboxOne"

# ---------------------------------------------------------------------------
# Framework profiles
# ---------------------------------------------------------------------------

PROFILE_CLIENT: Final[str] = "Client"
PROFILE_COMPACT_FRAMEWORK: Final[str] = "CompactFramework"
PROFILE_WINDOWS_PHONE: Final[str] = "WindowsPhone"
PROFILE_WINDOWS_PHONE71: Final[str] = "WindowsPhone71"

#: Prefix of numbered portable profiles (``Profile7``).
PORTABLE_PROFILE_PREFIX: Final[str] = "Profile"

# ---------------------------------------------------------------------------
# Versions
# ---------------------------------------------------------------------------

#: Number of release components kept on every framework version.
VERSION_COMPONENTS: Final[int] = 4

#: Release tuple of the empty framework version (``0.0.0.0``).
EMPTY_RELEASE: Final[Tuple[int, ...]] = (0, 0, 0, 0)

#: Largest value of a single version component.
MAX_VERSION_COMPONENT: Final[int] = 2147483647

#: Identifiers whose short folder version may be a single digit (``win8``).
SINGLE_DIGIT_VERSION_IDENTIFIERS: Final[Tuple[str, ...]] = (
    WINDOWS,
    WINDOWS_PHONE,
    SILVERLIGHT,
)

#: Identifiers whose short folder version is always dotted (``dotnet5.4``).
DOTTED_VERSION_IDENTIFIERS: Final[Tuple[str, ...]] = (NET_PLATFORM,)

# ---------------------------------------------------------------------------
# Configuration discovery
# ---------------------------------------------------------------------------

#: Dedicated configuration file name.
CONFIG_FILE_NAME: Final[str] = "tfmcompat.toml"

#: Table name used in both ``tfmcompat.toml`` and ``[tool.*]``.
CONFIG_SECTION: Final[str] = "tfmcompat"

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
