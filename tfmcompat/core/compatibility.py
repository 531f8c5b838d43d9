"""
Project/package framework compatibility.

:class:`CompatibilityProvider` answers one question: can a project that
targets ``project`` consume an asset built for ``package``? The direction
matters; ``is_compatible(net45, net40)`` holds, the reverse does not.
"""

from __future__ import annotations

from typing import FrozenSet, List, Optional

from tfmcompat.core.expander import FrameworkExpander
from tfmcompat.core.name_provider import FrameworkNameProvider, get_default_name_provider
from tfmcompat.core.parser import FrameworkParser
from tfmcompat.models.framework import FrameworkIdentity


class CompatibilityProvider:
    """Pairwise compatibility over a name provider's tables.

    The provider keeps no cache and no other mutable state.

    Args:
        name_provider: Mapping tables. Defaults to the built-in provider.
    """

    def __init__(self, name_provider: Optional[FrameworkNameProvider] = None) -> None:
        self.name_provider = name_provider or get_default_name_provider()
        self.expander = FrameworkExpander(self.name_provider)
        self.parser = FrameworkParser(self.name_provider)

    def is_compatible(self, project: FrameworkIdentity, package: FrameworkIdentity) -> bool:
        """Return True if a *project* framework may consume a *package* framework.

        Rules, first match wins:

        1. An ``Any`` package fits every project.
        2. An ``Unsupported`` project only takes ``Unsupported`` packages,
           and an ``Unsupported`` package fits no other project.
        3. Equal frameworks are compatible.
        4. An ``Any`` project takes everything, an ``Agnostic`` package fits
           everything; other non-specific pairs are incompatible.
        5. Portable frameworks are compared member by member.
        6. Otherwise *package* must match *project* or one of its
           expansions by identifier and profile, at an equal or lower
           version.

        Example::

            >>> provider.is_compatible(parse("net45"), parse("net40-client"))
            True
            >>> provider.is_compatible(parse("net40"), parse("net45"))
            False
        """
        if package.is_any:
            return True

        if project.is_unsupported:
            return package.is_unsupported

        if package.is_unsupported:
            return False

        if project == package:
            return True

        if project.is_any or package.is_agnostic:
            return True

        if not project.is_specific or not package.is_specific:
            return False

        if project.is_pcl or package.is_pcl:
            return self._is_pcl_compatible(project, package)

        return self._is_compatible_with_target(project, package)

    def explode(
        self, framework: FrameworkIdentity, include_optional: bool
    ) -> FrozenSet[FrameworkIdentity]:
        """Member frameworks of a portable framework, else the framework itself.

        Unresolvable portable frameworks have no members.
        """
        if not framework.is_pcl:
            return frozenset([framework])
        portable = self.parser.resolve_portable_profile(framework)
        if portable is None:
            return frozenset()
        if include_optional:
            return portable.frameworks
        return portable.required_frameworks

    def get_compatible(
        self, project: FrameworkIdentity, candidates: List[FrameworkIdentity]
    ) -> List[FrameworkIdentity]:
        """Candidates *project* can consume, in input order."""
        return [candidate for candidate in candidates if self.is_compatible(project, candidate)]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _is_pcl_compatible(self, project: FrameworkIdentity, package: FrameworkIdentity) -> bool:
        if project.is_pcl and not package.is_pcl:
            return False

        project_frameworks = self.explode(project, include_optional=False)
        package_frameworks = self.explode(package, include_optional=True)

        if not project_frameworks or not package_frameworks:
            return False

        # Every platform the project runs on needs a package member
        return all(
            any(
                self.is_compatible(project_framework, package_framework)
                for package_framework in package_frameworks
            )
            for project_framework in project_frameworks
        )

    def _is_compatible_with_target(
        self, project: FrameworkIdentity, package: FrameworkIdentity
    ) -> bool:
        candidates = [project, *self.expander.expand_all(project)]
        return any(
            candidate.same_identifier(package)
            and package.version <= candidate.version
            and candidate.profile.lower() == package.profile.lower()
            for candidate in candidates
        )


def is_compatible(project: FrameworkIdentity, package: FrameworkIdentity) -> bool:
    """Compatibility check against the built-in tables."""
    return CompatibilityProvider().is_compatible(project, package)
