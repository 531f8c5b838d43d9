"""
Nearest-match selection and framework set reduction.

Everything here is built on :meth:`CompatibilityProvider.is_compatible`
plus the precedence lists of the name provider:

- :meth:`FrameworkReducer.get_nearest` picks the single best asset
  framework for a project.
- :meth:`FrameworkReducer.reduce_upwards` keeps the highest frameworks of
  a set, :meth:`FrameworkReducer.reduce_downwards` the lowest.
- :meth:`FrameworkReducer.reduce` groups a set into families of comparable
  frameworks.
- :meth:`FrameworkReducer.reduce_equivalent` collapses equivalent
  frameworks (``win8``/``netcore45``) onto the preferred spelling.

Inputs are never mutated; every method returns new lists.
"""

from __future__ import annotations

from typing import Callable, Dict, FrozenSet, Iterable, List, Optional, Tuple

from tfmcompat.core.compatibility import CompatibilityProvider
from tfmcompat.core.name_provider import FrameworkNameProvider, get_default_name_provider
from tfmcompat.models.framework import FrameworkIdentity
from tfmcompat.utils.logger import get_logger

Consumes = Callable[[FrameworkIdentity, FrameworkIdentity], bool]


class FrameworkReducer:
    """Ranking and reduction over candidate frameworks.

    Args:
        name_provider: Mapping tables. Defaults to the provider of
            *compatibility_provider*, or the built-in provider.
        compatibility_provider: Compatibility checks to build on.
    """

    def __init__(
        self,
        name_provider: Optional[FrameworkNameProvider] = None,
        compatibility_provider: Optional[CompatibilityProvider] = None,
    ) -> None:
        if name_provider is None:
            if compatibility_provider is not None:
                name_provider = compatibility_provider.name_provider
            else:
                name_provider = get_default_name_provider()
        self.name_provider = name_provider
        self.compatibility = compatibility_provider or CompatibilityProvider(name_provider)
        self.logger = get_logger("reducer")

    # ------------------------------------------------------------------
    # Nearest match
    # ------------------------------------------------------------------

    def get_nearest(
        self,
        framework: FrameworkIdentity,
        candidates: Iterable[FrameworkIdentity],
    ) -> Optional[FrameworkIdentity]:
        """Return the candidate that best fits a project targeting *framework*.

        Candidates the project cannot consume are never returned. Among the
        rest the pipeline prefers, in order: an exact match, the highest
        compatible versions, the project's own identifier, non-portable over
        portable frameworks, portable profiles chosen by the project's own
        platforms, non-package-based frameworks, the project's profile, then
        unprofiled frameworks, and finally the precedence table.

        Args:
            framework: The consuming project's framework.
            candidates: Frameworks of the available assets.

        Returns:
            The nearest candidate, or ``None`` when nothing is compatible.

        Example::

            >>> candidates = [parse(t) for t in ("net35", "net40", "net45", "net453")]
            >>> to_short_folder_name(reducer.get_nearest(parse("net451"), candidates))
            'net45'
        """
        possible = _distinct(candidates)

        # Unsupported candidates only count when nothing else is offered
        supported = [candidate for candidate in possible if not candidate.is_unsupported]
        if supported:
            possible = supported

        for candidate in possible:
            if candidate == framework:
                return candidate

        compatible = [
            candidate
            for candidate in possible
            if self.compatibility.is_compatible(framework, candidate)
        ]
        if not compatible:
            self.logger.debug("No compatible framework for %s", framework)
            return None

        specific = [candidate for candidate in compatible if candidate.is_specific]
        if specific:
            compatible = specific

        reduced = self.reduce_upwards(compatible)

        if len(reduced) > 1:
            same_identifier = [f for f in reduced if f.same_identifier(framework)]
            if same_identifier:
                reduced = same_identifier

        if len(reduced) > 1:
            pcls = [f for f in reduced if f.is_pcl]
            if pcls and len(pcls) < len(reduced):
                reduced = [f for f in reduced if not f.is_pcl]
            elif pcls:
                if framework.is_pcl:
                    reduced = self._get_nearest_pcl_to_pcl(framework, reduced)
                else:
                    reduced = self._get_nearest_non_pcl_to_pcl(framework, reduced)
                if len(reduced) > 1:
                    reduced = [self._get_best_pcl(reduced)]

        if len(reduced) > 1 and not framework.is_package_based:
            package_based = [f for f in reduced if f.is_package_based]
            if package_based and len(package_based) < len(reduced):
                reduced = [f for f in reduced if not f.is_package_based]

        if len(reduced) > 1 and not any(f.is_pcl for f in reduced):
            if framework.has_profile:
                same_profile = [
                    f
                    for f in reduced
                    if f.same_identifier(framework)
                    and f.profile.lower() == framework.profile.lower()
                ]
                if same_profile:
                    reduced = same_profile

            if len(reduced) > 1:
                unprofiled = [f for f in reduced if not f.has_profile]
                if unprofiled and len(unprofiled) < len(reduced):
                    reduced = unprofiled

        nearest = self._order_by_precedence(reduced)[0]
        self.logger.debug(
            "Nearest framework for %s is %s (%d compatible)",
            framework,
            nearest,
            len(compatible),
        )
        return nearest

    # ------------------------------------------------------------------
    # Reduction
    # ------------------------------------------------------------------

    def reduce_upwards(self, frameworks: Iterable[FrameworkIdentity]) -> List[FrameworkIdentity]:
        """Drop every framework that another member of the set can consume.

        What remains are the highest frameworks: ``[net35, net40, net45]``
        reduces to ``[net45]``. Mutually compatible frameworks of different
        identifiers or profiles are all kept.
        """
        return self._reduce_core(frameworks, self.compatibility.is_compatible)

    def reduce_downwards(self, frameworks: Iterable[FrameworkIdentity]) -> List[FrameworkIdentity]:
        """Drop every framework that can consume another member of the set."""
        return self._reduce_core(
            frameworks, lambda x, y: self.compatibility.is_compatible(y, x)
        )

    def reduce(self, frameworks: Iterable[FrameworkIdentity]) -> List[List[FrameworkIdentity]]:
        """Partition *frameworks* into groups of comparable frameworks.

        Two frameworks share a group when a chain of compatibility checks
        (in either direction) connects them. Each group lists its most
        capable member first: the one consuming the most other members,
        then by precedence and version. Groups are ordered by the
        precedence of their first member; ``Any``, ``Agnostic`` and
        ``Unsupported`` each form a trailing group of their own.

        Example::

            >>> groups = reducer.reduce([parse("wp7"), parse("net40"), parse("net45")])
            >>> [[to_short_folder_name(f) for f in group] for group in groups]
            [['net45', 'net40'], ['wp7']]
        """
        distinct = _distinct(frameworks)
        specific = [f for f in distinct if f.is_specific]
        others = [f for f in distinct if not f.is_specific]

        compatible_pairs = {
            (x, y): self.compatibility.is_compatible(x, y)
            for x in specific
            for y in specific
            if x != y
        }

        groups: List[List[FrameworkIdentity]] = []
        assigned: Dict[FrameworkIdentity, int] = {}
        for framework in specific:
            if framework in assigned:
                continue
            component = [framework]
            assigned[framework] = len(groups)
            index = 0
            while index < len(component):
                current = component[index]
                index += 1
                for other in specific:
                    if other in assigned:
                        continue
                    if compatible_pairs[(current, other)] or compatible_pairs[(other, current)]:
                        assigned[other] = len(groups)
                        component.append(other)
            groups.append(component)

        ordered_groups: List[List[FrameworkIdentity]] = []
        for group in groups:
            consumed = {
                f: sum(1 for other in group if other != f and compatible_pairs[(f, other)])
                for f in group
            }
            by_version = sorted(group, key=lambda f: f.sort_key(), reverse=True)
            by_version.sort(
                key=lambda f: (-consumed[f], self.name_provider.precedence_rank(f))
            )
            ordered_groups.append(by_version)

        ordered_groups.sort(
            key=lambda group: (
                self.name_provider.precedence_rank(group[0]),
                group[0].identifier.lower(),
            )
        )
        ordered_groups.extend([f] for f in others)
        return ordered_groups

    def reduce_equivalent(self, frameworks: Iterable[FrameworkIdentity]) -> List[FrameworkIdentity]:
        """Keep one preferred framework out of every set of equivalents.

        ``[netcore45, win8, winrt45]`` reduces to ``[win8]``.
        """
        ordered = sorted(_distinct(frameworks), key=lambda f: f.sort_key(), reverse=True)
        ordered.sort(key=self.name_provider.equivalent_precedence_rank)

        seen = set()
        result: List[FrameworkIdentity] = []
        for framework in ordered:
            if framework in seen:
                continue
            result.append(framework)
            seen.update(self.name_provider.get_all_equivalent_frameworks(framework))
        return result

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _reduce_core(
        self, frameworks: Iterable[FrameworkIdentity], consumes: Consumes
    ) -> List[FrameworkIdentity]:
        distinct = _distinct(frameworks)
        result: List[FrameworkIdentity] = []

        for x in distinct:
            dominated = False
            for y in distinct:
                if x == y or not consumes(y, x):
                    continue
                if not consumes(x, y):
                    dominated = True
                elif (
                    x.same_identifier(y)
                    and x.profile.lower() == y.profile.lower()
                    and x.version < y.version
                ):
                    dominated = True
                if dominated:
                    break
            if not dominated:
                result.append(x)

        result.sort(key=lambda f: (f.identifier.lower(), f.framework_name.lower()))
        return result

    def _order_by_precedence(self, frameworks: List[FrameworkIdentity]) -> List[FrameworkIdentity]:
        ordered = sorted(frameworks, key=lambda f: f.sort_key(), reverse=True)
        ordered.sort(key=self.name_provider.precedence_rank)
        return ordered

    def _explode(
        self, framework: FrameworkIdentity, include_optional: bool = True
    ) -> FrozenSet[FrameworkIdentity]:
        return self.compatibility.explode(framework, include_optional)

    def _explode_all(
        self, pcls: List[FrameworkIdentity]
    ) -> Tuple[Dict[FrameworkIdentity, FrozenSet[FrameworkIdentity]], List[FrameworkIdentity]]:
        members = {pcl: self._explode(pcl) for pcl in pcls}
        all_members = _distinct(
            member
            for pcl in pcls
            for member in sorted(members[pcl], key=lambda f: f.sort_key())
        )
        return members, all_members

    def _get_nearest_pcl_to_pcl(
        self, framework: FrameworkIdentity, pcls: List[FrameworkIdentity]
    ) -> List[FrameworkIdentity]:
        """Let each platform of the project PCL narrow the candidate PCLs."""
        votes = self.reduce_equivalent(self._explode(framework, include_optional=False))
        votes.sort(
            key=lambda f: (self.name_provider.precedence_rank(f), f.identifier.lower())
        )

        members, all_members = self._explode_all(pcls)

        remaining = list(pcls)
        for vote in votes:
            nearest = self.get_nearest(vote, all_members)
            if nearest is None:
                continue
            matching = [pcl for pcl in remaining if nearest in members[pcl]]
            if matching:
                remaining = matching
        return remaining

    def _get_nearest_non_pcl_to_pcl(
        self, framework: FrameworkIdentity, pcls: List[FrameworkIdentity]
    ) -> List[FrameworkIdentity]:
        """Keep the PCLs containing the member nearest to *framework*."""
        members, all_members = self._explode_all(pcls)
        nearest = self.get_nearest(framework, all_members)
        matching = [pcl for pcl in pcls if nearest in members[pcl]]
        return matching or pcls

    def _get_best_pcl(self, pcls: List[FrameworkIdentity]) -> FrameworkIdentity:
        """Pick one PCL out of several equally near ones.

        Optional placeholders are ignored throughout. The PCL with the
        fewest platforms wins, then the one with the most known platforms,
        then the one targeting higher versions of the platforms both share,
        and finally the lowest profile name.
        """
        best = pcls[0]
        for considering in pcls[1:]:
            if self._is_better_pcl(best, considering):
                best = considering
        return best

    def _is_better_pcl(self, current: FrameworkIdentity, considering: FrameworkIdentity) -> bool:
        current_members = self._explode(current, include_optional=False)
        considering_members = self._explode(considering, include_optional=False)

        if len(considering_members) != len(current_members):
            return len(considering_members) < len(current_members)

        current_known = self._count_known(current_members)
        considering_known = self._count_known(considering_members)
        if considering_known != current_known:
            return considering_known > current_known

        higher = 0
        for member in considering_members:
            for other in current_members:
                if member.same_identifier(other) and member.profile.lower() == other.profile.lower():
                    if member.version > other.version:
                        higher += 1
                    elif member.version < other.version:
                        higher -= 1
        if higher != 0:
            return higher > 0

        return considering.profile.lower() < current.profile.lower()

    def _count_known(self, members: FrozenSet[FrameworkIdentity]) -> int:
        return sum(
            1 for member in members if self.name_provider.is_known_identifier(member.identifier)
        )


def _distinct(frameworks: Iterable[FrameworkIdentity]) -> List[FrameworkIdentity]:
    """Drop duplicates, keeping input order."""
    seen = set()
    result: List[FrameworkIdentity] = []
    for framework in frameworks:
        if framework not in seen:
            seen.add(framework)
            result.append(framework)
    return result


# ---------------------------------------------------------------------------
# Module-level helpers over the built-in tables
# ---------------------------------------------------------------------------


def get_nearest(
    framework: FrameworkIdentity, candidates: Iterable[FrameworkIdentity]
) -> Optional[FrameworkIdentity]:
    """Nearest candidate for *framework*. See :meth:`FrameworkReducer.get_nearest`."""
    return FrameworkReducer().get_nearest(framework, candidates)


def reduce(frameworks: Iterable[FrameworkIdentity]) -> List[List[FrameworkIdentity]]:
    return FrameworkReducer().reduce(frameworks)


def reduce_upwards(frameworks: Iterable[FrameworkIdentity]) -> List[FrameworkIdentity]:
    return FrameworkReducer().reduce_upwards(frameworks)


def reduce_downwards(frameworks: Iterable[FrameworkIdentity]) -> List[FrameworkIdentity]:
    return FrameworkReducer().reduce_downwards(frameworks)


def reduce_equivalent(frameworks: Iterable[FrameworkIdentity]) -> List[FrameworkIdentity]:
    return FrameworkReducer().reduce_equivalent(frameworks)
