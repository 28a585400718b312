"""Tests for ParsedVersion, version_compare, Version and VersionRange."""

from __future__ import annotations

import pytest

from strictversions.core import ParsedVersion, Version, VersionRange, version_compare
from strictversions.exceptions import MalformedVersionError


class TestParsedVersion:
    """Tests for strict three-part parsing."""

    def test_plain_version(self) -> None:
        """``16.0.1`` parses into its numeric components."""
        parsed = ParsedVersion.parse("16.0.1")
        assert (parsed.major, parsed.minor, parsed.patch) == (16, 0, 1)
        assert parsed.qualifier is None

    def test_qualifier_is_split_off(self) -> None:
        """A ``-qualifier`` suffix is kept separately."""
        parsed = ParsedVersion.parse("1.2.3-beta01")
        assert parsed.patch == 3
        assert parsed.qualifier == "beta01"
        assert str(parsed) == "1.2.3-beta01"

    def test_whitespace_is_trimmed(self) -> None:
        """Leading and trailing whitespace is ignored."""
        assert ParsedVersion.parse("  2.4.0\n") == ParsedVersion(2, 4, 0)

    @pytest.mark.parametrize("raw", ["1.0", "1.0.0.0", "", "1", "a.b.c", "1.x.0", "1.0.-1"])
    def test_malformed_versions_raise(self, raw: str) -> None:
        """Anything but three numeric parts raises MalformedVersionError."""
        with pytest.raises(MalformedVersionError):
            ParsedVersion.parse(raw)

    def test_no_silent_default(self) -> None:
        """A qualifier-only patch is not read as zero."""
        with pytest.raises(MalformedVersionError):
            ParsedVersion.parse("1.0.-rc1")


class TestVersionCompare:
    """Tests for component-wise dotted comparison."""

    def test_equal(self) -> None:
        assert version_compare("1.2.3", "1.2.3") == 0

    def test_numeric_not_lexical(self) -> None:
        """``10`` sorts above ``9`` even though it is lexically lower."""
        assert version_compare("1.10.0", "1.9.0") == 1
        assert version_compare("1.9.0", "1.10.0") == -1

    def test_shorter_prefix_sorts_lower(self) -> None:
        """``1.0`` sorts below ``1.0.0``."""
        assert version_compare("1.0", "1.0.0") == -1
        assert version_compare("1.0.0", "1.0") == 1

    def test_non_numeric_difference_raises(self) -> None:
        with pytest.raises(MalformedVersionError):
            version_compare("1.a", "1.b")


class TestVersionRange:
    """Tests for Version and the degenerate exact-literal VersionRange."""

    def test_version_trims_qualifier(self) -> None:
        version = Version.from_string("1.2.3-alpha")
        assert version is not None
        assert version.raw == "1.2.3-alpha"
        assert version.trimmed == "1.2.3"

    def test_version_from_none(self) -> None:
        assert Version.from_string(None) is None

    def test_exact_literal_becomes_closed_range(self) -> None:
        """``[10.3.234]`` parses to the closed range [10.3.234,10.3.234]."""
        parsed = VersionRange.from_string("[10.3.234]")
        assert parsed is not None
        assert parsed.start_inclusive and parsed.end_inclusive
        assert parsed.to_version_string() == "[10.3.234,10.3.234]"

    @pytest.mark.parametrize("text", ["[1]", "[1.2]", "[1.2.3-rc1]"])
    def test_exact_literal_forms(self, text: str) -> None:
        assert VersionRange.from_string(text) is not None

    @pytest.mark.parametrize("text", ["1.0.0", "[1.0,2.0]", "(1.0,2.0)", "[a]", "[]"])
    def test_non_literals_return_none(self, text: str) -> None:
        assert VersionRange.from_string(text) is None

    def test_contains_respects_bounds(self) -> None:
        """Inclusive and exclusive bounds are honoured."""
        start = Version("1.0", "1.0")
        end = Version("2.0", "2.0")
        closed = VersionRange(True, True, start, end)
        half_open = VersionRange(True, False, start, end)
        assert closed.contains(Version("2.0", "2.0"))
        assert not half_open.contains(Version("2.0", "2.0"))
        assert closed.contains(Version("1.5", "1.5"))
        assert not closed.contains(Version("2.1", "2.1"))
        assert not VersionRange(False, True, start, end).contains(Version("1.0", "1.0"))
        assert half_open.to_version_string() == "[1.0,2.0)"
