"""Version strings: strict three-part parsing, trimmed versions and ranges.

Two independent views of a version string live here:

- :class:`ParsedVersion` is the strict numeric reading used by SemVer-style
  evaluation. It requires exactly ``major.minor.patch`` and fails loudly on
  anything else.
- :class:`Version` and :class:`VersionRange` work on dotted strings of any
  length, comparing them component-wise. ``VersionRange.from_string`` only
  recognises the bracketed exact literal (``[1.2.3]``); interval parsing is
  not implemented.

References
----------
.. [SemVer] Preston-Werner, T. (2013). "Semantic Versioning 2.0.0."
   https://semver.org/
.. [Maven-Ranges] Apache Maven. "Dependency Version Requirement
   Specification." https://maven.apache.org/pom.html#dependency-version-requirement-specification
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from strictversions.exceptions import MalformedVersionError

_NUMERIC_RE = re.compile(r"^\d+$")


# ---------------------------------------------------------------------------
# ParsedVersion: strict major.minor.patch[-qualifier]
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ParsedVersion:
    """A three-part numeric version with an optional qualifier.

    Attributes:
        major: Major version component.
        minor: Minor version component.
        patch: Patch version component.
        qualifier: Text after the first ``-`` in the patch component
            (e.g., "alpha1" for "1.0.0-alpha1"), or None.
    """

    major: int
    minor: int
    patch: int
    qualifier: str | None = None

    @classmethod
    def parse(cls, version: str) -> ParsedVersion:
        """Parse a ``major.minor.patch[-qualifier]`` string.

        Surrounding whitespace is ignored. The qualifier is split off the
        patch component before numeric parsing.

        Args:
            version: Raw version string (e.g., "16.0.1", "1.2.3-beta").

        Returns:
            The parsed version.

        Raises:
            MalformedVersionError: If the string does not have exactly three
                dot-separated parts or a part is not a non-negative integer.
        """
        text = version.strip()
        parts = text.split(".")
        if len(parts) != 3:
            raise MalformedVersionError(
                f"Version string didn't have 3 parts divided by periods: {version!r}"
            )
        major_str, minor_str, patch_str = parts
        qualifier: str | None = None
        dash = patch_str.find("-")
        if dash != -1:
            qualifier = patch_str[dash + 1:] or None
            patch_str = patch_str[:dash]

        for part in (major_str, minor_str, patch_str):
            if not _NUMERIC_RE.match(part):
                raise MalformedVersionError(
                    f"Version component {part!r} is not numeric in {version!r}"
                )
        return cls(
            major=int(major_str),
            minor=int(minor_str),
            patch=int(patch_str),
            qualifier=qualifier,
        )

    def __str__(self) -> str:
        base = f"{self.major}.{self.minor}.{self.patch}"
        return f"{base}-{self.qualifier}" if self.qualifier else base


# ---------------------------------------------------------------------------
# Dotted-string comparison
# ---------------------------------------------------------------------------


def version_compare(left: str, right: str) -> int:
    """Compare two dotted version strings component by component.

    Components are compared as integers at the first position where the
    strings differ. When one sequence is a prefix of the other, the shorter
    sorts lower (``1.0 < 1.0.0``).

    Args:
        left: Dotted version string.
        right: Dotted version string.

    Returns:
        -1, 0 or 1 as ``left`` sorts below, equal to or above ``right``.

    Raises:
        MalformedVersionError: If the first differing components are not
            integers.
    """
    lvals = left.split(".")
    rvals = right.split(".")
    i = 0
    while i < len(lvals) and i < len(rvals) and lvals[i] == rvals[i]:
        i += 1
    if i < len(lvals) and i < len(rvals):
        try:
            diff = int(lvals[i]) - int(rvals[i])
        except ValueError as exc:
            raise MalformedVersionError(
                f"Cannot compare versions {left!r} and {right!r}"
            ) from exc
        return (diff > 0) - (diff < 0)
    diff = len(lvals) - len(rvals)
    return (diff > 0) - (diff < 0)


# ---------------------------------------------------------------------------
# Version and VersionRange
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Version:
    """A raw version string and its qualifier-free prefix.

    Attributes:
        raw: The version as written.
        trimmed: ``raw`` up to (not including) the first ``-``.
    """

    raw: str
    trimmed: str

    @classmethod
    def from_string(cls, version: str | None) -> Version | None:
        """Build a ``Version``; None passes through as None."""
        if version is None:
            return None
        return cls(raw=version, trimmed=version.split("-")[0])


# Matches the bracketed exact literal: "[1]", "[10.3.234]", "[1.2.3-a]".
# Group 1 is the version text between the brackets.
_EXACT_LITERAL_RE = re.compile(r"^\[((?:\d+\.)*\d+(?:-\w+)*)\]$")


@dataclass(frozen=True)
class VersionRange:
    """An interval of versions with inclusive or exclusive bounds.

    Attributes:
        start_inclusive: Whether ``start`` itself is in the range.
        end_inclusive: Whether ``end`` itself is in the range.
        start: Lower bound.
        end: Upper bound.
    """

    start_inclusive: bool
    end_inclusive: bool
    start: Version
    end: Version

    def to_version_string(self) -> str:
        """Render in bracket notation, e.g. ``[1.0,2.0)``."""
        opening = "[" if self.start_inclusive else "("
        closing = "]" if self.end_inclusive else ")"
        return f"{opening}{self.start.trimmed},{self.end.trimmed}{closing}"

    def contains(self, version: Version) -> bool:
        """Return True if ``version`` lies within this range.

        Comparison uses trimmed strings, so qualifiers are ignored.
        """
        lower = version_compare(self.start.trimmed, version.trimmed)
        if lower > 0 or (lower == 0 and not self.start_inclusive):
            return False
        upper = version_compare(self.end.trimmed, version.trimmed)
        if upper < 0 or (upper == 0 and not self.end_inclusive):
            return False
        return True

    @classmethod
    def from_string(cls, text: str) -> VersionRange | None:
        """Parse a bracketed exact literal into a degenerate closed range.

        Only ``[X]``-style literals are recognised; true intervals such as
        ``[1.0,2.0)`` return None.

        Args:
            text: Constraint text.

        Returns:
            ``[X,X]`` for an exact literal, otherwise None.
        """
        match = _EXACT_LITERAL_RE.match(text)
        if not match:
            return None
        version = Version.from_string(match.group(1))
        if version is None:
            return None
        return cls(True, True, version, version)
