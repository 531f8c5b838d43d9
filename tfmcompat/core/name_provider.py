"""
Indexed, read-only view over framework mapping tables.

:class:`FrameworkNameProvider` is the only component that reads
:class:`~tfmcompat.core.mappings.FrameworkMappings` and
:class:`~tfmcompat.core.portable_mappings.PortableFrameworkMappings`. It is
built once from one or more mapping sources (later sources extend earlier
ones) and never changes afterwards, so it can be shared freely between
threads.

Typical usage::

    provider = get_default_name_provider()
    provider.get_identifier("net")          # '.NETFramework'
    provider.get_portable_profile(7)        # PortableProfile(... number=7)
"""

from __future__ import annotations

import itertools
import threading
from typing import (
    Dict,
    FrozenSet,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Set,
    Tuple,
)

from packaging.version import Version

from tfmcompat.core.mappings import DEFAULT_FRAMEWORK_MAPPINGS, FrameworkMappings
from tfmcompat.core.portable_mappings import (
    DEFAULT_PORTABLE_MAPPINGS,
    PortableFrameworkMappings,
)
from tfmcompat.models.framework import FrameworkIdentity
from tfmcompat.models.portable import PortableProfile
from tfmcompat.models.ranges import FrameworkRange, OneWayCompatibilityMapping
from tfmcompat.utils.logger import get_logger
from tfmcompat.utils.version_utils import format_short_version

logger = get_logger("name_provider")

_default_provider: Optional["FrameworkNameProvider"] = None
_lock = threading.Lock()


class FrameworkNameProvider:
    """Lookups for framework names, profiles, equivalences and precedence.

    All ``get_*`` lookups are case-insensitive and return ``None`` (or an
    empty collection) when nothing is mapped.

    Args:
        mappings: Framework mapping sources, applied in order.
        portable_mappings: Portable profile sources, applied in order.
    """

    def __init__(
        self,
        mappings: Sequence[FrameworkMappings],
        portable_mappings: Sequence[PortableFrameworkMappings] = (),
    ) -> None:
        self._identifier_synonyms: Dict[str, str] = {}
        self._identifier_short_to_long: Dict[str, str] = {}
        self._identifier_long_to_short: Dict[str, str] = {}
        self._identifiers: Dict[str, str] = {}
        self._profile_short_to_long: Dict[Tuple[str, str], str] = {}
        self._profile_long_to_short: Dict[Tuple[str, str], str] = {}
        self._equivalent_frameworks: Dict[FrameworkIdentity, Set[FrameworkIdentity]] = {}
        self._equivalent_profiles: Dict[Tuple[str, str], Set[str]] = {}
        self._subset_frameworks: Dict[str, List[str]] = {}
        self._compatibility_mappings: Dict[str, List[OneWayCompatibilityMapping]] = {}
        self._precedence: List[str] = []
        self._equivalent_precedence: List[str] = []
        self._rewrites: Dict[FrameworkIdentity, FrameworkIdentity] = {}
        self._short_name_rewrites: Dict[FrameworkIdentity, FrameworkIdentity] = {}
        self._portable_frameworks: Dict[int, FrozenSet[FrameworkIdentity]] = {}
        self._portable_optional: Dict[int, FrozenSet[FrameworkIdentity]] = {}
        self._portable_permutations: Dict[int, List[FrozenSet[FrameworkIdentity]]] = {}

        for mapping in mappings:
            self._add_mappings(mapping)
        for portable in portable_mappings:
            self._add_portable_mappings(portable)

        # Equivalences are complete at this point
        for number, required in self._portable_frameworks.items():
            self._portable_permutations[number] = list(self._equivalent_permutations(required))

        logger.debug(
            "Name provider ready: %d identifiers, %d equivalences, "
            "%d compatibility mappings, %d portable profiles",
            len(self._identifiers),
            len(self._equivalent_frameworks),
            sum(len(entries) for entries in self._compatibility_mappings.values()),
            len(self._portable_frameworks),
        )

    # ------------------------------------------------------------------
    # Table loading
    # ------------------------------------------------------------------

    def _add_mappings(self, mapping: FrameworkMappings) -> None:
        for short, identifier in mapping.identifier_short_names:
            self._register_identifier(identifier)
            self._identifier_short_to_long[short.lower()] = identifier
            self._identifier_long_to_short.setdefault(identifier.lower(), short)

        for alias, identifier in mapping.identifier_synonyms:
            self._register_identifier(identifier)
            self._identifier_synonyms[alias.lower()] = identifier

        for identifier, short, profile in mapping.profile_short_names:
            key = identifier.lower()
            self._profile_short_to_long[(key, short.lower())] = profile
            self._profile_long_to_short.setdefault((key, profile.lower()), short)

        for first, second in mapping.equivalent_frameworks:
            self._equivalent_frameworks.setdefault(first, set()).add(second)
            self._equivalent_frameworks.setdefault(second, set()).add(first)

        for identifier, first, second in mapping.equivalent_profiles:
            key = identifier.lower()
            self._equivalent_profiles.setdefault((key, first.lower()), set()).add(second)
            self._equivalent_profiles.setdefault((key, second.lower()), set()).add(first)

        for identifier, subset in mapping.subset_frameworks:
            subsets = self._subset_frameworks.setdefault(identifier.lower(), [])
            if subset not in subsets:
                subsets.append(subset)

        for entry in mapping.compatibility_mappings:
            key = entry.target_range.identifier.lower()
            self._compatibility_mappings.setdefault(key, []).append(entry)

        for identifier in mapping.framework_precedence:
            if identifier.lower() not in self._precedence:
                self._precedence.append(identifier.lower())

        for identifier in mapping.equivalent_framework_precedence:
            if identifier.lower() not in self._equivalent_precedence:
                self._equivalent_precedence.append(identifier.lower())

        for source, target in mapping.framework_rewrites:
            self._rewrites[source] = target

        for source, target in mapping.short_name_rewrites:
            self._short_name_rewrites[source] = target

    def _add_portable_mappings(self, portable: PortableFrameworkMappings) -> None:
        for number, frameworks in portable.profile_frameworks:
            self._portable_frameworks[number] = frozenset(frameworks)
        for number, frameworks in portable.profile_optional_frameworks:
            existing = self._portable_optional.get(number, frozenset())
            self._portable_optional[number] = existing | frozenset(frameworks)

    def _register_identifier(self, identifier: str) -> None:
        self._identifiers.setdefault(identifier.lower(), identifier)

    # ------------------------------------------------------------------
    # Names
    # ------------------------------------------------------------------

    def get_identifier(self, name: str) -> Optional[str]:
        """Resolve a synonym, short name or long name to its identifier.

        Example::

            >>> provider.get_identifier("NETFramework")
            '.NETFramework'
            >>> provider.get_identifier("wpa")
            'WindowsPhoneApp'
        """
        key = name.lower()
        if key in self._identifier_synonyms:
            return self._identifier_synonyms[key]
        if key in self._identifier_short_to_long:
            return self._identifier_short_to_long[key]
        return self._identifiers.get(key)

    def get_short_identifier(self, identifier: str) -> Optional[str]:
        return self._identifier_long_to_short.get(identifier.lower())

    def get_profile(self, identifier: str, short_profile: str) -> Optional[str]:
        """Resolve a short profile (``client``, ``wp71``) for *identifier*."""
        return self._profile_short_to_long.get((identifier.lower(), short_profile.lower()))

    def get_short_profile(self, identifier: str, profile: str) -> Optional[str]:
        return self._profile_long_to_short.get((identifier.lower(), profile.lower()))

    def get_version_string(self, identifier: str, version: Version) -> str:
        """Version as spelled in short folder names (``45``, ``10.0``)."""
        return format_short_version(identifier, version)

    def rewrite(self, framework: FrameworkIdentity) -> FrameworkIdentity:
        """Canonical alias of a freshly parsed framework."""
        return self._rewrites.get(framework, framework)

    def short_name_rewrite(self, framework: FrameworkIdentity) -> FrameworkIdentity:
        """Framework whose short name should be printed for *framework*."""
        return self._short_name_rewrites.get(framework, framework)

    def is_known_identifier(self, identifier: str) -> bool:
        return identifier.lower() in self._identifiers

    # ------------------------------------------------------------------
    # Equivalence
    # ------------------------------------------------------------------

    def get_equivalent_frameworks(self, framework: FrameworkIdentity) -> Set[FrameworkIdentity]:
        """Directly equivalent frameworks, profile aliases included.

        Only one step of the equivalence table is followed; *framework*
        itself is not part of the result.
        """
        result: Set[FrameworkIdentity] = set(self._equivalent_frameworks.get(framework, ()))

        for base in [framework, *result]:
            profiles = self._equivalent_profiles.get(
                (base.identifier.lower(), base.profile.lower()), ()
            )
            for profile in profiles:
                result.add(base.with_profile(profile))

        result.discard(framework)
        return result

    def get_equivalent_frameworks_in_range(
        self, framework_range: FrameworkRange
    ) -> Set[FrameworkIdentity]:
        """Frameworks equivalent to any table entry inside *framework_range*."""
        result: Set[FrameworkIdentity] = set()
        for framework, equivalents in self._equivalent_frameworks.items():
            if framework_range.satisfies(framework):
                result.update(equivalents)
        return result

    def get_all_equivalent_frameworks(self, framework: FrameworkIdentity) -> Set[FrameworkIdentity]:
        """Transitive closure of :meth:`get_equivalent_frameworks`, *framework* included."""
        seen: Set[FrameworkIdentity] = {framework}
        pending = [framework]
        while pending:
            current = pending.pop()
            for equivalent in self.get_equivalent_frameworks(current):
                if equivalent not in seen:
                    seen.add(equivalent)
                    pending.append(equivalent)
        return seen

    # ------------------------------------------------------------------
    # Compatibility
    # ------------------------------------------------------------------

    def get_compatibility_mappings(self, framework: FrameworkIdentity) -> List[FrameworkRange]:
        """Supported ranges of every one-way mapping whose target holds *framework*."""
        entries = self._compatibility_mappings.get(framework.identifier.lower(), ())
        return [
            entry.supported_range
            for entry in entries
            if entry.target_range.satisfies(framework)
        ]

    def get_subset_frameworks(self, identifier: str) -> Tuple[str, ...]:
        return tuple(self._subset_frameworks.get(identifier.lower(), ()))

    # ------------------------------------------------------------------
    # Precedence
    # ------------------------------------------------------------------

    def precedence_rank(self, framework: FrameworkIdentity) -> int:
        """Position in the precedence list; unlisted frameworks rank last."""
        return _rank(self._precedence, framework)

    def equivalent_precedence_rank(self, framework: FrameworkIdentity) -> int:
        """Position in the equivalence precedence list; unlisted rank last."""
        return _rank(self._equivalent_precedence, framework)

    # ------------------------------------------------------------------
    # Portable profiles
    # ------------------------------------------------------------------

    def get_portable_optional_frameworks(self, number: int) -> FrozenSet[FrameworkIdentity]:
        return self._portable_optional.get(number, frozenset())

    def get_portable_profile(self, number: int) -> Optional[PortableProfile]:
        """Build the :class:`PortableProfile` for a profile number."""
        required = self._portable_frameworks.get(number)
        if required is None:
            return None
        optional = self.get_portable_optional_frameworks(number)
        return PortableProfile(
            frameworks=required | optional,
            optional_frameworks=optional,
            number=number,
        )

    def get_portable_profile_number(
        self, frameworks: Iterable[FrameworkIdentity]
    ) -> Optional[int]:
        """Find the profile number targeting exactly *frameworks*.

        Optional placeholders of a candidate profile and duplicate
        equivalents (``win+win8``) are ignored, and every equivalent
        spelling of the profile's frameworks is tried.
        """
        supported = self.remove_duplicate_frameworks(frameworks)

        for number, required in self._portable_frameworks.items():
            if len(required) > len(supported):
                continue

            optional = self.get_portable_optional_frameworks(number)
            reduced = {
                framework
                for framework in supported
                if not any(_is_optional_match(framework, o) for o in optional)
            }

            if reduced in self._portable_permutations[number]:
                return number

        return None

    def remove_duplicate_frameworks(
        self, frameworks: Iterable[FrameworkIdentity]
    ) -> List[FrameworkIdentity]:
        """Drop frameworks equivalent to an earlier one, keeping input order."""
        result: List[FrameworkIdentity] = []
        existing: Set[FrameworkIdentity] = set()
        for framework in frameworks:
            if framework in existing:
                continue
            result.append(framework)
            existing.update(self.get_all_equivalent_frameworks(framework))
        return result

    def _equivalent_permutations(
        self, frameworks: FrozenSet[FrameworkIdentity]
    ) -> Iterator[FrozenSet[FrameworkIdentity]]:
        choices = [
            [framework, *sorted(self.get_equivalent_frameworks(framework), key=_sort_key)]
            for framework in sorted(frameworks, key=_sort_key)
        ]
        for combination in itertools.product(*choices):
            yield frozenset(combination)


def _is_optional_match(framework: FrameworkIdentity, optional: FrameworkIdentity) -> bool:
    return (
        framework.same_identifier(optional)
        and framework.profile.lower() == optional.profile.lower()
        and framework.version >= optional.version
    )


def _rank(order: List[str], framework: FrameworkIdentity) -> int:
    try:
        return order.index(framework.identifier.lower())
    except ValueError:
        return len(order)


def _sort_key(framework: FrameworkIdentity):
    return framework.sort_key()


def get_default_name_provider() -> FrameworkNameProvider:
    """Return the process-wide provider over the built-in tables.

    Created on first use; later calls return the same instance.
    """
    global _default_provider

    if _default_provider is None:
        with _lock:
            if _default_provider is None:
                _default_provider = FrameworkNameProvider(
                    [DEFAULT_FRAMEWORK_MAPPINGS],
                    [DEFAULT_PORTABLE_MAPPINGS],
                )
    return _default_provider
