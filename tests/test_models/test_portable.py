"""Unit tests for tfmcompat.models.portable."""

from __future__ import annotations

import pytest

from tfmcompat.models.framework import FrameworkIdentity
from tfmcompat.models.portable import PortableProfile

NET45 = FrameworkIdentity(".NETFramework", "4.5")
WIN8 = FrameworkIdentity("Windows", "8.0")
MONO_ANDROID = FrameworkIdentity("MonoAndroid")


@pytest.mark.unit
class TestPortableProfile:
    """Tests for PortableProfile."""

    def test_required_excludes_optional(self) -> None:
        """Test optional placeholders are not required."""
        profile = PortableProfile(
            frameworks=frozenset([NET45, WIN8, MONO_ANDROID]),
            optional_frameworks=frozenset([MONO_ANDROID]),
            number=7,
        )

        assert profile.required_frameworks == frozenset([NET45, WIN8])

    def test_name_for_numbered_profile(self) -> None:
        """Test numbered profiles are named ProfileNNN."""
        profile = PortableProfile(frameworks=frozenset([NET45, WIN8]), number=7)

        assert profile.name == "Profile7"

    def test_name_for_unnumbered_profile(self) -> None:
        """Test framework lists without a number have no name."""
        assert PortableProfile(frameworks=frozenset([NET45])).name is None

    def test_optional_must_be_member(self) -> None:
        """Test optional frameworks outside the profile are rejected."""
        with pytest.raises(ValueError):
            PortableProfile(
                frameworks=frozenset([NET45]),
                optional_frameworks=frozenset([MONO_ANDROID]),
            )

    def test_is_hashable(self) -> None:
        """Test profiles can be used as set members."""
        a = PortableProfile(frameworks=frozenset([NET45, WIN8]), number=7)
        b = PortableProfile(frameworks=frozenset([WIN8, NET45]), number=7)

        assert {a, b} == {a}
