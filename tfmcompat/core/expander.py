"""
Framework expansion.

Expanding a framework lists the frameworks a project targeting it can
also consume: table equivalents, profile aliases, subset frameworks and the
upper bound of every one-way compatibility range that applies to it.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Set

from tfmcompat.core.name_provider import FrameworkNameProvider, get_default_name_provider
from tfmcompat.models.framework import FrameworkIdentity
from tfmcompat.models.ranges import FrameworkRange
from tfmcompat.utils.version_utils import EMPTY_VERSION


class FrameworkExpander:
    """Walks the mapping graph of a name provider.

    Args:
        name_provider: Tables to expand against. Defaults to the built-in
            provider.
    """

    def __init__(self, name_provider: Optional[FrameworkNameProvider] = None) -> None:
        self.name_provider = name_provider or get_default_name_provider()

    def expand(self, framework: FrameworkIdentity) -> Iterator[FrameworkIdentity]:
        """Lazily yield the frameworks one step away from *framework*.

        Each call starts a fresh generator. *framework* itself and
        duplicates are never yielded. Terminal frameworks such as ``sl5``
        or ``native`` yield nothing. ``netcore45`` is not terminal: it
        yields its equivalents ``win8``, ``winrt45`` and ``netcore`` plus
        ``dotnet5.2``.
        """
        seen: Set[FrameworkIdentity] = {framework}
        for expansion in self._expand_internal(framework):
            if expansion not in seen:
                seen.add(expansion)
                yield expansion

    def expand_all(self, framework: FrameworkIdentity) -> List[FrameworkIdentity]:
        """Every framework reachable from *framework*, in discovery order.

        The walk keeps a visited set, so cycles in the tables terminate.
        """
        visited: Set[FrameworkIdentity] = {framework}
        result: List[FrameworkIdentity] = []
        pending = [framework]

        while pending:
            current = pending.pop(0)
            for expansion in self.expand(current):
                if expansion not in visited:
                    visited.add(expansion)
                    result.append(expansion)
                    pending.append(expansion)

        return result

    def _expand_internal(self, framework: FrameworkIdentity) -> Iterator[FrameworkIdentity]:
        if not framework.is_specific:
            return

        provider = self.name_provider

        yield from provider.get_equivalent_frameworks(framework)

        # Lower versions of the same framework share their equivalents
        lower_versions = FrameworkRange(framework.with_version(EMPTY_VERSION), framework)
        yield from provider.get_equivalent_frameworks_in_range(lower_versions)

        if not framework.has_profile:
            for subset in provider.get_subset_frameworks(framework.identifier):
                yield FrameworkIdentity(subset, framework.version)

        for supported in provider.get_compatibility_mappings(framework):
            yield supported.max_framework


def expand(framework: FrameworkIdentity) -> List[FrameworkIdentity]:
    """One-step expansion of *framework* against the built-in tables."""
    return list(FrameworkExpander().expand(framework))
