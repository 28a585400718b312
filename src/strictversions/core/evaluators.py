"""Version evaluators: decide whether a resolved version honours a constraint.

An evaluator is chosen once per dependency edge from the declared constraint
string and then applied to the version the build system actually resolved.
Evaluators are a closed set of kinds, carried by value:

- ``EXACT`` for bracketed exact literals such as ``[16.0.0]``. The resolved
  version must equal the bracketed text byte for byte.
- ``RANGE`` for interval notation such as ``[1.0,2.0)``. Interval semantics
  are not implemented; range constraints are always compatible.
- ``PERMISSIVE`` for everything else. Always compatible.
- ``SEMVER`` requires the same major version and at least the declared minor
  version. It can be constructed explicitly but :func:`select_evaluator`
  never returns it; strict matching currently falls back to ``PERMISSIVE``.

Selection never raises. A constraint that cannot be understood degrades to
``PERMISSIVE`` so a single odd declaration cannot abort a consistency pass.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from strictversions.core.versions import ParsedVersion
from strictversions.exceptions import InvalidEvaluatorError, MalformedVersionError

_RANGE_MARKERS = (",", "(", ")")


class EvaluatorKind(Enum):
    """The strategy an evaluator applies."""

    EXACT = "exact"
    RANGE = "range"
    PERMISSIVE = "permissive"
    SEMVER = "semver"


@dataclass(frozen=True)
class VersionEvaluator:
    """A reusable compatibility predicate for one declared constraint.

    Attributes:
        kind: The strategy applied by :meth:`is_compatible`.
        constraint: The declared constraint exactly as authored.
        expected: For ``EXACT``, the bracket-stripped version that must match.
        baseline: For ``SEMVER``, the parsed declared version.
    """

    kind: EvaluatorKind
    constraint: str
    expected: str | None = None
    baseline: ParsedVersion | None = None

    def __post_init__(self) -> None:
        if self.kind is EvaluatorKind.SEMVER and self.baseline is None:
            raise InvalidEvaluatorError("SEMVER evaluators require a parsed baseline version")
        if self.kind is EvaluatorKind.EXACT and self.expected is None:
            raise InvalidEvaluatorError("EXACT evaluators require an expected version")

    # -- Constructors -------------------------------------------------------

    @classmethod
    def exact(cls, constraint: str) -> VersionEvaluator:
        """Exact match against the text between the outer brackets."""
        return cls(EvaluatorKind.EXACT, constraint, expected=constraint[1:-1])

    @classmethod
    def range_stub(cls, constraint: str) -> VersionEvaluator:
        """Interval constraint; accepts every version for now."""
        return cls(EvaluatorKind.RANGE, constraint)

    @classmethod
    def permissive(cls, constraint: str) -> VersionEvaluator:
        """Accepts every version."""
        return cls(EvaluatorKind.PERMISSIVE, constraint)

    @classmethod
    def semver(cls, constraint: str) -> VersionEvaluator:
        """Same-major, minor-at-least evaluation of a three-part version.

        Raises:
            MalformedVersionError: If ``constraint`` is not a three-part
                numeric version.
        """
        return cls(
            EvaluatorKind.SEMVER, constraint, baseline=ParsedVersion.parse(constraint)
        )

    # -- Evaluation ---------------------------------------------------------

    def is_compatible(self, version: str) -> bool:
        """Return True if ``version`` satisfies this evaluator's constraint.

        A resolved version that is not a valid three-part version is
        incompatible under ``SEMVER``. The other kinds never parse.
        """
        if self.kind is EvaluatorKind.EXACT:
            return version == self.expected
        if self.kind is EvaluatorKind.SEMVER and self.baseline is not None:
            try:
                resolved = ParsedVersion.parse(version)
            except MalformedVersionError:
                return False
            return (
                resolved.major == self.baseline.major
                and resolved.minor >= self.baseline.minor
            )
        # RANGE and PERMISSIVE
        return True

    @property
    def display_constraint(self) -> str:
        """The constraint as shown in diagnostics.

        Exact literals are shown without their brackets.
        """
        if self.kind is EvaluatorKind.EXACT and self.expected is not None:
            return self.expected
        return self.constraint

    def __repr__(self) -> str:
        return f"VersionEvaluator({self.kind.value}, {self.constraint!r})"


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------


def is_range_constraint(constraint: str) -> bool:
    """Return True if ``constraint`` uses interval notation."""
    return any(marker in constraint for marker in _RANGE_MARKERS)


def is_exact_constraint(constraint: str) -> bool:
    """Return True if ``constraint`` is a bracketed exact literal like ``[1.0.0]``."""
    return (
        len(constraint) >= 2
        and constraint.startswith("[")
        and constraint.endswith("]")
        and "," not in constraint
    )


def select_evaluator(constraint: str, strict_matching: bool = False) -> VersionEvaluator:
    """Choose the evaluator for a declared constraint.

    Interval notation is checked first so ``[1.0,2.0]`` is a range rather
    than an exact literal. Exact literals are honoured whatever the value of
    ``strict_matching``.

    Args:
        constraint: The declared constraint string as authored.
        strict_matching: Whether strict matching is enabled for the group of
            the constrained artifact.

    Returns:
        The selected evaluator. Never raises.
    """
    if is_range_constraint(constraint):
        return VersionEvaluator.range_stub(constraint)
    if is_exact_constraint(constraint):
        return VersionEvaluator.exact(constraint)
    if strict_matching:
        # TODO: decide whether strict groups should get VersionEvaluator.semver
        # once qualifier handling exists; until then they stay permissive.
        return VersionEvaluator.permissive(constraint)
    return VersionEvaluator.permissive(constraint)
