"""
Framework ranges and one-way compatibility mappings.
"""

from __future__ import annotations

from dataclasses import dataclass

from tfmcompat.models.framework import FrameworkIdentity


@dataclass(frozen=True)
class FrameworkRange:
    """A version range over a single identifier and profile.

    Attributes:
        min_framework: Lower bound.
        max_framework: Upper bound.
        include_min: Whether the lower bound itself is in the range.
        include_max: Whether the upper bound itself is in the range.
    """

    min_framework: FrameworkIdentity
    max_framework: FrameworkIdentity
    include_min: bool = True
    include_max: bool = True

    def __post_init__(self) -> None:
        if not self._same_except_version(self.min_framework, self.max_framework):
            raise ValueError(
                "Range bounds must share an identifier and profile: "
                f"{self.min_framework} / {self.max_framework}"
            )

    @property
    def identifier(self) -> str:
        return self.min_framework.identifier

    @property
    def profile(self) -> str:
        return self.min_framework.profile

    def satisfies(self, framework: FrameworkIdentity) -> bool:
        """Return True if *framework* falls inside the range."""
        if not self._same_except_version(self.min_framework, framework):
            return False

        if self.include_min:
            above_min = self.min_framework.version <= framework.version
        else:
            above_min = self.min_framework.version < framework.version

        if self.include_max:
            below_max = framework.version <= self.max_framework.version
        else:
            below_max = framework.version < self.max_framework.version

        return above_min and below_max

    @staticmethod
    def _same_except_version(x: FrameworkIdentity, y: FrameworkIdentity) -> bool:
        return x.same_identifier(y) and x.profile.lower() == y.profile.lower()

    def __str__(self) -> str:
        left = "[" if self.include_min else "("
        right = "]" if self.include_max else ")"
        return f"{left}{self.min_framework}, {self.max_framework}{right}"


@dataclass(frozen=True)
class OneWayCompatibilityMapping:
    """Projects in ``target_range`` may consume packages in ``supported_range``."""

    target_range: FrameworkRange
    supported_range: FrameworkRange
