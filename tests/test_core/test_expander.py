"""Unit tests for tfmcompat.core.expander."""

from __future__ import annotations

import pytest

from tfmcompat.core.expander import FrameworkExpander, expand
from tfmcompat.core.mappings import FrameworkMappings
from tfmcompat.core.name_provider import FrameworkNameProvider
from tfmcompat.core.parser import parse
from tfmcompat.models.framework import ANY_FRAMEWORK, FrameworkIdentity


@pytest.fixture
def expander() -> FrameworkExpander:
    return FrameworkExpander()


@pytest.mark.unit
class TestExpand:
    """Tests for one-step expansion."""

    def test_equivalents(self, expander: FrameworkExpander) -> None:
        """Test win8 expands to its table equivalents."""
        expanded = list(expander.expand(parse("win8")))

        assert parse("netcore45") in expanded
        assert FrameworkIdentity("Windows", "0.0") in expanded

    def test_compatibility_range_maximum(self, expander: FrameworkExpander) -> None:
        """Test one-way mappings yield the top of their range."""
        expanded = list(expander.expand(parse("win8")))

        assert FrameworkIdentity("WinRT", "4.5") in expanded

    def test_excludes_self_and_duplicates(self, expander: FrameworkExpander) -> None:
        """Test the framework itself and duplicates are never yielded."""
        framework = parse("win81")
        expanded = list(expander.expand(framework))

        assert framework not in expanded
        assert len(expanded) == len(set(expanded))

    def test_profile_alias(self, expander: FrameworkExpander) -> None:
        """Test unprofiled .NETFramework expands to its client profile."""
        assert parse("net40-client") in list(expander.expand(parse("net40")))

    def test_subset(self, expander: FrameworkExpander) -> None:
        """Test DNX expands to the same .NETFramework version."""
        assert parse("net451") in list(expander.expand(parse("dnx451")))

    def test_terminal_frameworks(self, expander: FrameworkExpander) -> None:
        """Test frameworks without outgoing edges expand to nothing."""
        assert list(expander.expand(parse("sl5"))) == []
        assert list(expander.expand(parse("native"))) == []

    def test_netcore45_not_terminal(self, expander: FrameworkExpander) -> None:
        """Test netcore45 expands to the frameworks it shares with win8."""
        expanded = list(expander.expand(parse("netcore45")))

        assert parse("win8") in expanded
        assert FrameworkIdentity("WinRT", "4.5") in expanded
        assert parse("dotnet5.2") in expanded

    def test_no_full_profile(self, expander: FrameworkExpander) -> None:
        """Test .NETFramework never expands to a Full profile."""
        expanded = expander.expand_all(parse("net45"))

        assert parse("net45-client") in expanded
        assert all(framework.profile.lower() != "full" for framework in expanded)

    def test_sentinels_expand_to_nothing(self, expander: FrameworkExpander) -> None:
        """Test Any has no expansions."""
        assert list(expander.expand(ANY_FRAMEWORK)) == []

    def test_lazy_and_fresh(self, expander: FrameworkExpander) -> None:
        """Test each call returns a new lazy iterator."""
        framework = parse("win8")
        first = expander.expand(framework)
        second = expander.expand(framework)

        assert iter(first) is first
        assert first is not second
        assert list(first) == list(second)

    def test_module_function(self) -> None:
        """Test the module-level helper returns a list."""
        assert parse("netcore45") in expand(parse("win8"))


@pytest.mark.unit
class TestExpandAll:
    """Tests for the transitive closure."""

    def test_transitive(self, expander: FrameworkExpander) -> None:
        """Test win81 reaches netcore45 and winrt45 through several hops."""
        closure = expander.expand_all(parse("win81"))

        assert parse("netcore45") in closure
        assert FrameworkIdentity("WinRT", "4.5") in closure
        assert parse("win81") not in closure

    def test_bridges(self, expander: FrameworkExpander) -> None:
        """Test DNXCore reaches native but never DNX."""
        closure = expander.expand_all(parse("dnxcore50"))

        assert parse("native") in closure
        assert all(framework.identifier != "DNX" for framework in closure)

    def test_cycles_terminate(self) -> None:
        """Test a cyclic equivalence table is walked once."""
        alpha = FrameworkIdentity("Alpha", "1.0")
        beta = FrameworkIdentity("Beta", "1.0")
        gamma = FrameworkIdentity("Gamma", "1.0")
        provider = FrameworkNameProvider(
            [
                FrameworkMappings(
                    identifier_short_names=(("alpha", "Alpha"), ("beta", "Beta"), ("gamma", "Gamma")),
                    equivalent_frameworks=((alpha, beta), (beta, gamma), (gamma, alpha)),
                )
            ]
        )

        closure = FrameworkExpander(provider).expand_all(alpha)

        assert sorted(closure, key=lambda f: f.sort_key()) == [beta, gamma]
