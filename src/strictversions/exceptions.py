"""strictversions exception hierarchy.

All public exceptions inherit from StrictVersionsError, giving callers a single
base class to catch when they want to handle any strictversions failure
without swallowing unrelated errors.

A failed compatibility test is *not* an exception. Constraint violations are
ordinary results carried by ``CheckReport``; only hosts that want
build-abort semantics opt into ``ConsistencyError``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from strictversions.core.checker import CheckReport


class StrictVersionsError(Exception):
    """Base exception for all strictversions errors."""


class MalformedReferenceError(StrictVersionsError, ValueError):
    """Raised when a coordinate reference string cannot be parsed.

    Covers references with fewer colon-delimited segments than the target
    type needs (``group:artifact`` or ``group:artifact:version``) and
    references with empty group or artifact segments.
    """


class MalformedVersionError(StrictVersionsError, ValueError):
    """Raised when a version string is not three numeric components.

    Only the strict numeric parser raises this. Exact-match and permissive
    evaluation work on raw strings and never parse.
    """


class InvalidEvaluatorError(StrictVersionsError, ValueError):
    """Raised when a ``VersionEvaluator`` is built without the data its kind needs.

    ``EXACT`` evaluators need the bracket-stripped expected version and
    ``SEMVER`` evaluators need a parsed baseline.
    """


class ConfigError(StrictVersionsError):
    """Raised for invalid checker configuration or resolved-graph files.

    Covers unreadable files, malformed YAML/JSON, unknown keys, and values
    of the wrong type.
    """


class ConsistencyError(StrictVersionsError):
    """Raised on request when a consistency check found violations.

    Attributes:
        report: The ``CheckReport`` that failed.
    """

    def __init__(self, message: str, report: CheckReport) -> None:
        super().__init__(message)
        self.report = report
