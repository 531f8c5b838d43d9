"""Framework token parser and short folder name writer.

Understands the two spellings of a target framework:

- Short folder names: ``net45``, ``net40-client``, ``win81``, ``sl4-wp71``,
  ``portable-net45+win8+wpa81``, ``portable-Profile7``. Percent-escaped
  names (``portable-net45%2Bwin8``) are unescaped first. The special
  names ``any``, ``agnostic`` and ``unsupported`` map to the sentinel
  frameworks, and bare legacy version folders (``45``, ``4.0``, ``35``)
  mean ``.NETFramework``.
- Long framework names: ``.NETFramework,Version=v4.5,Profile=Client``,
  ``.NETPortable,Version=v0.0,Profile=Profile7``.

Identifiers unknown to the name tables parse to the ``Unsupported``
sentinel. Malformed tokens raise :exc:`~tfmcompat.exceptions.ParseError`.

Typical usage::

    from tfmcompat.core.parser import FrameworkParser

    parser = FrameworkParser()
    framework = parser.parse("portable-win8+net45")
    parser.to_short_folder_name(framework)   # 'portable-net45+win8'
    framework.framework_name                 # '.NETPortable,Version=v0.0,Profile=Profile7'
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Tuple
from urllib.parse import unquote

from packaging.version import Version

from tfmcompat.constants import (
    AGNOSTIC,
    ANY,
    NET,
    PORTABLE,
    PORTABLE_PROFILE_PREFIX,
    UNSUPPORTED,
)
from tfmcompat.core.name_provider import FrameworkNameProvider, get_default_name_provider
from tfmcompat.exceptions import ParseError
from tfmcompat.models.framework import (
    AGNOSTIC_FRAMEWORK,
    ANY_FRAMEWORK,
    UNSUPPORTED_FRAMEWORK,
    FrameworkIdentity,
)
from tfmcompat.models.portable import PortableProfile
from tfmcompat.utils.logger import get_logger
from tfmcompat.utils.version_utils import (
    EMPTY_VERSION,
    make_version,
    parse_display_version,
    parse_version_shorthand,
)

# identifier (letters and dots), version (digits and dots), optional -profile
_FOLDER_PATTERN = re.compile(
    r"^(?P<identifier>[A-Za-z.]+)(?P<version>[0-9.]*)(?:-(?P<profile>[A-Za-z0-9.+\-]+))?$"
)

_LONG_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z.][A-Za-z0-9.]*$")

_PROFILE_NUMBER_PATTERN = re.compile(
    rf"^{PORTABLE_PROFILE_PREFIX}(?P<number>\d+)$", re.IGNORECASE
)

_SPECIAL_FRAMEWORKS: Dict[str, FrameworkIdentity] = {
    ANY.lower(): ANY_FRAMEWORK,
    AGNOSTIC.lower(): AGNOSTIC_FRAMEWORK,
    UNSUPPORTED.lower(): UNSUPPORTED_FRAMEWORK,
}

# Folders named after a bare .NETFramework version
_DEPRECATED_FRAMEWORKS: Dict[str, Tuple[int, ...]] = {
    "45": (4, 5),
    "4.5": (4, 5),
    "40": (4, 0),
    "4.0": (4, 0),
    "4": (4, 0),
    "35": (3, 5),
    "3.5": (3, 5),
    "20": (2, 0),
    "2.0": (2, 0),
    "2": (2, 0),
}


class FrameworkParser:
    """Convert framework tokens to :class:`FrameworkIdentity` and back.

    The parser holds no state besides its name provider; one instance can
    be shared between threads.

    Args:
        name_provider: Mapping tables to resolve names against. Defaults to
            the process-wide built-in provider.
    """

    def __init__(self, name_provider: Optional[FrameworkNameProvider] = None) -> None:
        self.name_provider = name_provider or get_default_name_provider()
        self.logger = get_logger("parser")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, token: str) -> FrameworkIdentity:
        """Parse a short folder name or a long framework name.

        Tokens containing a comma are read as long framework names,
        everything else as folder names.

        Args:
            token: Framework token, e.g. ``"net45"`` or
                ``".NETFramework,Version=v4.5"``.

        Returns:
            The canonical :class:`FrameworkIdentity`.

        Raises:
            ParseError: The token is empty or malformed, or names an
                unknown portable profile.

        Example::

            >>> parser.parse("net4.5") == parser.parse(".NETFramework,Version=v4.5")
            True
        """
        if not isinstance(token, str):
            raise ParseError(
                f"Framework token must be a string, got {type(token).__name__}",
                reason="syntax",
            )

        stripped = token.strip()
        if not stripped:
            raise ParseError("Framework token is empty", token=token, reason="empty")

        if "," in stripped:
            framework = self.parse_framework_name(stripped)
        else:
            framework = self.parse_folder(stripped)

        self.logger.debug("Parsed %r as %s", token, framework)
        return framework

    def parse_folder(self, folder_name: str) -> FrameworkIdentity:
        """Parse a short folder name such as ``net40-client`` or ``portable-net45+win8``.

        Raises:
            ParseError: The name is malformed or names an unknown portable
                profile.
        """
        folder = folder_name.strip()
        if "%" in folder:
            folder = unquote(folder)

        special = _SPECIAL_FRAMEWORKS.get(folder.lower())
        if special is not None:
            return special

        match = _FOLDER_PATTERN.match(folder)
        if match is None:
            deprecated = _DEPRECATED_FRAMEWORKS.get(folder)
            if deprecated is not None:
                return FrameworkIdentity(NET, make_version(*deprecated))
            raise ParseError(
                f"Invalid framework folder name: {folder_name!r}",
                token=folder_name,
                reason="syntax",
            )

        identifier = self.name_provider.get_identifier(match.group("identifier"))
        if identifier is None:
            self.logger.debug("Unknown framework identifier in %r", folder_name)
            return UNSUPPORTED_FRAMEWORK

        version = parse_version_shorthand(match.group("version"))
        if version is None:
            raise ParseError(
                f"Invalid framework version in {folder_name!r}",
                token=folder_name,
                reason="version",
            )

        profile = match.group("profile") or ""

        if identifier == PORTABLE:
            return self._portable_framework(version, self._parse_portable_list(profile, folder_name))

        return self.name_provider.rewrite(
            FrameworkIdentity(identifier, version, self._canonical_profile(identifier, profile))
        )

    def parse_framework_name(self, framework_name: str) -> FrameworkIdentity:
        """Parse a long name like ``.NETFramework,Version=v4.0,Profile=Client``.

        ``Version`` and ``Profile`` may appear in either order. ``Version``
        accepts a leading ``v`` and a bare major version (``v4``); it may
        also be written as a bare second component (``Silverlight,v4.0``).
        A missing version means v0.0.

        Raises:
            ParseError: The name is malformed, has duplicate or unknown
                components, or names an unknown portable profile.
        """
        parts = [part.strip() for part in framework_name.split(",")]
        head = parts[0]

        special = _SPECIAL_FRAMEWORKS.get(head.lower())
        if special is not None:
            return special

        if not _LONG_IDENTIFIER_PATTERN.match(head):
            raise ParseError(
                f"Invalid framework identifier in {framework_name!r}",
                token=framework_name,
                reason="syntax",
            )

        version: Optional[Version] = None
        profile: Optional[str] = None

        for index, part in enumerate(parts[1:], start=1):
            key, separator, value = part.partition("=")
            key = key.strip().lower()
            value = value.strip()

            if not separator and index == 1 and part[:1] in ("v", "V"):
                key, value = "version", part

            if key == "version" and version is None:
                version = parse_display_version(value)
                if version is None:
                    raise ParseError(
                        f"Invalid framework version in {framework_name!r}",
                        token=framework_name,
                        reason="version",
                    )
            elif key == "profile" and profile is None:
                if not value:
                    raise ParseError(
                        f"Empty profile in {framework_name!r}",
                        token=framework_name,
                        reason="profile",
                    )
                profile = value
            else:
                raise ParseError(
                    f"Unexpected component {part!r} in {framework_name!r}",
                    token=framework_name,
                    reason="syntax",
                )

        identifier = self.name_provider.get_identifier(head)
        if identifier is None:
            self.logger.debug("Unknown framework identifier in %r", framework_name)
            return UNSUPPORTED_FRAMEWORK

        version = version if version is not None else EMPTY_VERSION
        profile = profile or ""

        if identifier == PORTABLE:
            if "-" in profile:
                raise ParseError(
                    f"Portable profile cannot contain '-': {framework_name!r}",
                    token=framework_name,
                    reason="portable",
                )
            return self._portable_framework(version, self._parse_portable_list(profile, framework_name))

        return self.name_provider.rewrite(
            FrameworkIdentity(identifier, version, self._canonical_profile(identifier, profile))
        )

    def to_short_folder_name(self, framework: FrameworkIdentity) -> str:
        """Render *framework* as a lower-case short folder name.

        Parsing the result yields *framework* again for every parsed
        framework. Portable frameworks list their required frameworks in
        alphabetical order.

        Example::

            >>> parser.to_short_folder_name(parser.parse(".NETFramework,Version=v4.0,Profile=Client"))
            'net40-client'
        """
        if not framework.is_specific:
            return framework.identifier.lower()

        framework = self.name_provider.short_name_rewrite(framework)

        short = self.name_provider.get_short_identifier(framework.identifier)
        if short is None:
            short = "".join(ch for ch in framework.identifier if ch.isalnum())

        name = short
        if not framework.all_framework_versions:
            name += self.name_provider.get_version_string(framework.identifier, framework.version)

        if framework.is_pcl:
            portable = self.resolve_portable_profile(framework)
            if portable is not None:
                members = sorted(
                    (self.to_short_folder_name(f) for f in portable.required_frameworks),
                    key=str.lower,
                )
                name += "-" + "+".join(members)
            elif framework.profile:
                name += "-" + framework.profile
        elif framework.profile:
            short_profile = self.name_provider.get_short_profile(
                framework.identifier, framework.profile
            )
            if short_profile is None:
                short_profile = framework.profile
            if short_profile:
                name += "-" + short_profile

        return name.lower()

    def resolve_portable_profile(self, framework: FrameworkIdentity) -> Optional[PortableProfile]:
        """Return the component frameworks of a portable framework.

        Parsed frameworks carry their profile already; hand-built ones are
        resolved from their profile name. Returns ``None`` for non-portable
        frameworks and unresolvable profiles.
        """
        if not framework.is_pcl:
            return None
        if framework.portable_profile is not None:
            return framework.portable_profile
        if not framework.profile:
            return None
        try:
            return self._parse_portable_list(framework.profile, framework.profile)
        except ParseError:
            return None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _canonical_profile(self, identifier: str, profile: str) -> str:
        """Map ``client``/``full``/``wp71`` style profiles to their long names."""
        if not profile:
            return ""
        mapped = self.name_provider.get_profile(identifier, profile)
        return profile if mapped is None else mapped

    def _parse_portable_list(self, profile: str, token: str) -> PortableProfile:
        """Resolve ``Profile7`` or ``net45+win8`` to a :class:`PortableProfile`."""
        if not profile:
            raise ParseError(
                f"Portable framework without a profile: {token!r}",
                token=token,
                reason="portable",
            )

        number_match = _PROFILE_NUMBER_PATTERN.match(profile)
        if number_match is not None:
            number = int(number_match.group("number"))
            resolved = self.name_provider.get_portable_profile(number)
            if resolved is None:
                raise ParseError(
                    f"Unknown portable profile {profile!r}",
                    token=token,
                    reason="portable",
                )
            return resolved

        frameworks: List[FrameworkIdentity] = []
        for part in profile.split("+"):
            framework = self.parse_folder(part) if part else None
            if framework is None or framework.is_pcl:
                raise ParseError(
                    f"Invalid portable framework {part!r} in {token!r}",
                    token=token,
                    reason="portable",
                )
            frameworks.append(framework)

        number = self.name_provider.get_portable_profile_number(frameworks)
        if number is not None:
            resolved = self.name_provider.get_portable_profile(number)
            if resolved is not None:
                return resolved

        # Equivalent spellings (win8, netcore45) count once
        unique = self.name_provider.remove_duplicate_frameworks(frameworks)
        return PortableProfile(frameworks=frozenset(unique))

    def _portable_framework(self, version: Version, portable: PortableProfile) -> FrameworkIdentity:
        name = portable.name
        if name is None:
            name = "+".join(
                sorted(
                    (self.to_short_folder_name(f) for f in portable.frameworks),
                    key=str.lower,
                )
            )
        return FrameworkIdentity(PORTABLE, version, name, portable_profile=portable)


# ---------------------------------------------------------------------------
# Module-level helpers over the built-in tables
# ---------------------------------------------------------------------------


def parse(token: str) -> FrameworkIdentity:
    """Parse *token* with the built-in tables. See :meth:`FrameworkParser.parse`."""
    return FrameworkParser().parse(token)


def parse_folder(folder_name: str) -> FrameworkIdentity:
    return FrameworkParser().parse_folder(folder_name)


def parse_framework_name(framework_name: str) -> FrameworkIdentity:
    return FrameworkParser().parse_framework_name(framework_name)


def to_short_folder_name(framework: FrameworkIdentity) -> str:
    """Short folder name of *framework*. See :meth:`FrameworkParser.to_short_folder_name`."""
    return FrameworkParser().to_short_folder_name(framework)
