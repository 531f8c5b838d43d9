"""Unit tests for tfmcompat.core.parser.

Test Coverage:
- Short folder names and long framework names
- Version shorthand, legacy aliases and profile canonicalization
- Portable profiles by number and by framework list
- Special tokens, deprecated folders and percent escapes
- Parse errors
- Short folder name output
"""

from __future__ import annotations

import pytest

from tfmcompat.core.parser import (
    FrameworkParser,
    parse,
    parse_folder,
    parse_framework_name,
    to_short_folder_name,
)
from tfmcompat.exceptions import ParseError
from tfmcompat.models.framework import (
    AGNOSTIC_FRAMEWORK,
    ANY_FRAMEWORK,
    UNSUPPORTED_FRAMEWORK,
    FrameworkIdentity,
)
from tfmcompat.utils.version_utils import make_version


@pytest.mark.unit
class TestParseShortNames:
    """Tests for short folder names."""

    def test_simple(self) -> None:
        """Test a plain short name."""
        framework = parse("net45")

        assert framework.identifier == ".NETFramework"
        assert framework.version == make_version(4, 5)
        assert framework.profile == ""

    def test_version_shorthand_equivalent(self) -> None:
        """Test every spelling of 4.5 parses to one framework."""
        expected = parse("net45")

        assert parse("net4.5") == expected
        assert parse("net4.5.0") == expected
        assert parse("net450") == expected
        assert parse(".NETFramework45") == expected
        assert parse("NET45") == expected

    def test_client_profile(self) -> None:
        """Test the client profile is canonicalized."""
        framework = parse("net40-client")

        assert framework.profile == "Client"
        assert framework.framework_name == ".NETFramework,Version=v4.0,Profile=Client"

    def test_full_profile_is_unprofiled(self) -> None:
        """Test -full means no profile."""
        assert parse("net45-full") == parse("net45")

    def test_unknown_profile_kept(self) -> None:
        """Test profiles without a short name are kept as written."""
        assert parse("net35-custom").profile == "custom"

    def test_no_version(self) -> None:
        """Test a bare identifier covers all versions."""
        framework = parse("net")

        assert framework.all_framework_versions
        assert framework.identifier == ".NETFramework"

    def test_multi_digit_dotted(self) -> None:
        """Test dotted versions above nine."""
        assert parse("uap10.0") == FrameworkIdentity("UAP", "10.0")

    def test_third_party_identifier(self) -> None:
        """Test Xamarin identifiers are known."""
        assert parse("monoandroid10").identifier == "MonoAndroid"
        assert parse("xamarinios").identifier == "Xamarin.iOS"


@pytest.mark.unit
class TestLegacyAliases:
    """Tests for platform aliases rewritten at parse time."""

    def test_windows_phone_seven(self) -> None:
        """Test the Windows Phone 7 spellings."""
        expected = parse("wp7")

        assert parse("wp") == expected
        assert parse("wp70") == expected
        assert parse("sl3-wp") == expected
        assert expected == FrameworkIdentity("WindowsPhone", "7.0")

    def test_windows_phone_seven_one(self) -> None:
        """Test sl4-wp71 is Windows Phone 7.1."""
        assert parse("sl4-wp71") == parse("wp71")
        assert parse("wp71") != parse("wp7")

    def test_windows_phone_eight(self) -> None:
        """Test the Windows Phone 8 spellings."""
        expected = parse("wp8")

        assert parse("wp80") == expected
        assert parse("windowsphone8") == expected
        assert parse("windowsphone80") == expected
        assert parse("sl8-wp") == expected

    def test_windows_store(self) -> None:
        """Test win is Windows 8."""
        assert parse("win") == parse("win8")

    def test_windows_phone_app(self) -> None:
        """Test wpa is Windows Phone App 8.1."""
        assert parse("wpa") == parse("wpa81")

    def test_dotnet(self) -> None:
        """Test bare dotnet is dotnet5.0."""
        assert parse("dotnet") == FrameworkIdentity(".NETPlatform", "5.0")
        assert parse("dotnet5.4") == FrameworkIdentity(".NETPlatform", "5.4")

    def test_silverlight_phone_profile_without_rewrite(self) -> None:
        """Test Silverlight phone versions without an alias keep their profile."""
        framework = parse("sl5-wp")

        assert framework.identifier == "Silverlight"
        assert framework.profile == "WindowsPhone"


@pytest.mark.unit
class TestParseLongNames:
    """Tests for long framework names."""

    def test_simple(self) -> None:
        """Test the long form matches the short form."""
        assert parse(".NETFramework,Version=v4.5") == parse("net45")

    def test_profile(self) -> None:
        """Test Profile= is read."""
        assert parse(".NETFramework,Version=v4.0,Profile=Client") == parse("net40-client")

    def test_components_in_any_order(self) -> None:
        """Test Profile may precede Version."""
        assert parse(".NETFramework,Profile=Client,Version=v4.0") == parse("net40-client")

    def test_full_profile(self) -> None:
        """Test Profile=Full means no profile."""
        assert parse(".NETFramework,Version=v4.5,Profile=Full") == parse("net45")

    def test_bare_major_version(self) -> None:
        """Test Version=v4 is 4.0."""
        assert parse(".NETFramework,Version=v4") == parse("net40")

    def test_bare_version_component(self) -> None:
        """Test the second component may be a bare version."""
        assert parse("Silverlight,v4.0") == parse("sl4")

    def test_missing_version(self) -> None:
        """Test a missing version defaults to 0.0."""
        assert parse(".NETFramework,Profile=Client") == FrameworkIdentity(".NETFramework", "0.0", "Client")

    def test_whitespace(self) -> None:
        """Test whitespace around components is ignored."""
        assert parse(" .NETFramework, Version=v4.5 ") == parse("net45")

    def test_synonym_identifier(self) -> None:
        """Test identifier synonyms are accepted."""
        assert parse("NETCore,Version=v4.5") == parse("netcore45")

    def test_aliases_rewritten(self) -> None:
        """Test long forms are rewritten like short ones."""
        assert parse("Silverlight,Version=v3.0,Profile=WindowsPhone") == parse("wp7")

    def test_direct_method(self) -> None:
        """Test parse_framework_name without the dispatch."""
        assert parse_framework_name("Windows,Version=v8.1") == parse_folder("win81")


@pytest.mark.unit
class TestParsePortable:
    """Tests for portable frameworks."""

    def test_list_resolves_to_number(self) -> None:
        """Test a framework list resolves to its profile number."""
        framework = parse("portable-net45+win8")

        assert framework.is_pcl
        assert framework.profile == "Profile7"
        assert framework.portable_profile is not None
        assert framework.portable_profile.number == 7

    def test_list_order_irrelevant(self) -> None:
        """Test member order does not matter."""
        assert parse("portable-win8+net45") == parse("portable-net45+win8")

    def test_long_form_matches_list(self) -> None:
        """Test the long form resolves to the same profile."""
        assert parse(".NETPortable,Version=v0.0,Profile=Profile7") == parse("portable-net45+win8")

    def test_profile_number_folder(self) -> None:
        """Test portable-ProfileNNN folders."""
        assert parse("portable-Profile259") == parse("portable-net45+win8+wpa81+wp8")

    def test_placeholders_ignored(self) -> None:
        """Test Xamarin placeholders in the list do not change the profile."""
        framework = parse("portable-net45+win8+monoandroid10+monotouch10")

        assert framework.profile == "Profile7"

    def test_unnumbered_list(self) -> None:
        """Test lists without a profile number keep their members."""
        framework = parse("portable-sl3+net45")

        assert framework.profile == "net45+sl3"
        assert framework.portable_profile is not None
        assert framework.portable_profile.number is None
        assert framework.portable_profile.frameworks == frozenset(
            [parse("net45"), parse("sl3")]
        )

    def test_unnumbered_list_drops_equivalents(self) -> None:
        """Test equivalent spellings in an unnumbered list count once."""
        framework = parse("portable-win8+netcore45+wp8")

        assert framework == parse("portable-win8+wp8")
        assert framework.profile == "win8+wp8"
        assert framework.portable_profile is not None
        assert len(framework.portable_profile.frameworks) == 2

    def test_percent_escaped(self) -> None:
        """Test escaped plus signs are unescaped."""
        assert parse("portable-net45%2Bwin8") == parse("portable-net45+win8")

    def test_optional_members(self) -> None:
        """Test numbered profiles carry their placeholders."""
        portable = parse("portable-net45+win8").portable_profile

        assert portable is not None
        assert FrameworkIdentity("MonoTouch") in portable.optional_frameworks

    def test_resolve_hand_built(self) -> None:
        """Test hand-built portable identities resolve through the table."""
        parser = FrameworkParser()

        resolved = parser.resolve_portable_profile(FrameworkIdentity(".NETPortable", profile="Profile7"))

        assert resolved is not None
        assert resolved.number == 7
        assert parser.resolve_portable_profile(parse("net45")) is None
        assert parser.resolve_portable_profile(FrameworkIdentity(".NETPortable", profile="Profile9999")) is None


@pytest.mark.unit
class TestParseSpecialTokens:
    """Tests for sentinels, deprecated folders and unknown identifiers."""

    def test_sentinels(self) -> None:
        """Test the special framework names."""
        assert parse("any") is ANY_FRAMEWORK
        assert parse("Agnostic") is AGNOSTIC_FRAMEWORK
        assert parse("unsupported") is UNSUPPORTED_FRAMEWORK

    def test_deprecated_version_folders(self) -> None:
        """Test bare version folders mean .NETFramework."""
        assert parse("45") == parse("net45")
        assert parse("4.0") == parse("net40")
        assert parse("4") == parse("net40")
        assert parse("35") == parse("net35")
        assert parse("2.0") == parse("net20")

    def test_unknown_identifier(self) -> None:
        """Test unknown identifiers are Unsupported."""
        assert parse("nfcore45") == UNSUPPORTED_FRAMEWORK
        assert parse("Foo,Version=v1.0") == UNSUPPORTED_FRAMEWORK


@pytest.mark.unit
class TestParseErrors:
    """Tests for malformed tokens."""

    def test_empty(self) -> None:
        """Test empty tokens are rejected."""
        with pytest.raises(ParseError) as exc_info:
            parse("")

        assert exc_info.value.reason == "empty"

        with pytest.raises(ParseError):
            parse("   ")

    def test_not_a_string(self) -> None:
        """Test non-string tokens are rejected."""
        with pytest.raises(ParseError):
            parse(None)  # type: ignore[arg-type]

    def test_bad_short_version(self) -> None:
        """Test a dangling dot is an invalid version."""
        with pytest.raises(ParseError) as exc_info:
            parse("net4.5.")

        assert exc_info.value.reason == "version"
        assert exc_info.value.token == "net4.5."

    def test_bad_syntax(self) -> None:
        """Test tokens matching no grammar."""
        for token in ("net45-", "net 45", "45!"):
            with pytest.raises(ParseError):
                parse(token)

    def test_unknown_profile_number(self) -> None:
        """Test unknown portable profile numbers."""
        with pytest.raises(ParseError) as exc_info:
            parse("portable-Profile9999")

        assert exc_info.value.reason == "portable"

        with pytest.raises(ParseError):
            parse(".NETPortable,Version=v0.0,Profile=Profile9999")

    def test_portable_without_profile(self) -> None:
        """Test portable needs a framework list."""
        with pytest.raises(ParseError):
            parse("portable")

    def test_long_portable_profile_with_dash(self) -> None:
        """Test long-form portable profiles cannot contain a dash."""
        with pytest.raises(ParseError):
            parse(".NETPortable,Version=v0.0,Profile=net45-win8")

    def test_long_form_bad_version(self) -> None:
        """Test invalid Version= values."""
        with pytest.raises(ParseError) as exc_info:
            parse(".NETFramework,Version=vabc")

        assert exc_info.value.reason == "version"

    def test_long_form_empty_profile(self) -> None:
        """Test an empty Profile= value."""
        with pytest.raises(ParseError) as exc_info:
            parse(".NETFramework,Version=v4.5,Profile=")

        assert exc_info.value.reason == "profile"

    def test_long_form_duplicate_component(self) -> None:
        """Test components may appear once."""
        with pytest.raises(ParseError):
            parse(".NETFramework,Version=v4.5,Version=v4.0")

    def test_long_form_unknown_component(self) -> None:
        """Test unknown components are rejected."""
        with pytest.raises(ParseError):
            parse(".NETFramework,Version=v4.5,Culture=neutral")

    def test_long_form_bad_identifier(self) -> None:
        """Test a missing identifier is rejected."""
        with pytest.raises(ParseError):
            parse(",Version=v4.5")


@pytest.mark.unit
class TestToShortFolderName:
    """Tests for short folder name output."""

    def test_simple(self) -> None:
        """Test plain frameworks."""
        assert to_short_folder_name(parse(".NETFramework,Version=v4.5")) == "net45"
        assert to_short_folder_name(parse("net451")) == "net451"
        assert to_short_folder_name(parse("win81")) == "win81"
        assert to_short_folder_name(parse("wpa81")) == "wpa81"

    def test_single_digit_windows(self) -> None:
        """Test Windows 8 is printed with one digit."""
        assert to_short_folder_name(parse("win")) == "win8"

    def test_profile(self) -> None:
        """Test short profiles are appended."""
        assert to_short_folder_name(parse(".NETFramework,Version=v4.0,Profile=Client")) == "net40-client"
        assert to_short_folder_name(parse("net45-cf")) == "net45-cf"
        assert to_short_folder_name(parse("sl5-wp")) == "sl5-wp"

    def test_aliases_print_canonical(self) -> None:
        """Test legacy aliases print their canonical short name."""
        assert to_short_folder_name(parse("sl3-wp")) == "wp7"
        assert to_short_folder_name(parse("sl4-wp71")) == "wp71"

    def test_dotted_versions(self) -> None:
        """Test dotted output for large and dotnet versions."""
        assert to_short_folder_name(parse("uap10.0")) == "uap10.0"
        assert to_short_folder_name(parse("dotnet5.4")) == "dotnet5.4"

    def test_dotnet(self) -> None:
        """Test dotnet5.0 prints as dotnet."""
        assert to_short_folder_name(parse("dotnet")) == "dotnet"
        assert to_short_folder_name(parse("dotnet5.0")) == "dotnet"

    def test_no_version(self) -> None:
        """Test unversioned frameworks print no version."""
        assert to_short_folder_name(parse("net")) == "net"

    def test_portable_sorted(self) -> None:
        """Test portable members print alphabetically."""
        assert to_short_folder_name(parse("portable-win8+net45")) == "portable-net45+win8"
        assert to_short_folder_name(parse("portable-Profile259")) == "portable-net45+win8+wp8+wpa81"

    def test_portable_unnumbered(self) -> None:
        """Test unnumbered portable lists."""
        assert to_short_folder_name(parse("portable-sl3+net45")) == "portable-net45+sl3"

    def test_sentinels(self) -> None:
        """Test sentinels print their lower-case name."""
        assert to_short_folder_name(ANY_FRAMEWORK) == "any"
        assert to_short_folder_name(UNSUPPORTED_FRAMEWORK) == "unsupported"

    def test_left_inverse(self) -> None:
        """Test printing then parsing gives back the parsed framework."""
        tokens = [
            "net45",
            "net40-client",
            "net35-custom",
            "win",
            "wp",
            "sl4-wp71",
            "sl5-wp",
            "uap10.0",
            "dotnet",
            "dnxcore50",
            "aspnet50",
            "monoandroid10",
            "portable-net45+win8+wpa81+wp8",
            "portable-net45+sl3",
            ".NETPortable,Version=v0.0,Profile=Profile136",
            "nfcore45",
            "agnostic",
        ]

        for token in tokens:
            framework = parse(token)
            assert parse(to_short_folder_name(framework)) == framework, token
