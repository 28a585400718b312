"""Consistency checking of a resolved dependency graph.

The checker ingests edges a build system has already resolved. Each edge
names the declaring artifact version, the constrained artifact, the
constraint as declared, and the version the resolver actually chose for the
constrained artifact. Every edge is registered and then tested against its
own resolved version; constraints are never compared with each other.

A failed test is a :class:`Violation`, collected into a :class:`CheckReport`.
Violations are data, not exceptions: the caller decides whether a failing
report aborts the build, is logged, or is ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, NamedTuple, Union

from strictversions.core.coordinates import Artifact, ArtifactVersion
from strictversions.core.dependency import Dependency
from strictversions.core.evaluators import EvaluatorKind
from strictversions.core.registry import DependencyRegistry
from strictversions.core.settings import CheckerConfig
from strictversions.exceptions import ConsistencyError

logger = logging.getLogger(__name__)

ArtifactVersionLike = Union[ArtifactVersion, str]
ArtifactLike = Union[Artifact, str]


class ResolvedEdge(NamedTuple):
    """One resolved edge of a build's dependency graph.

    Coordinates may be given as model objects or as reference strings
    (``group:artifact:version`` and ``group:artifact``).
    """

    declaring: ArtifactVersionLike
    target: ArtifactLike
    declared_constraint: str
    resolved_version: str


def _as_artifact_version(value: ArtifactVersionLike) -> ArtifactVersion:
    if isinstance(value, ArtifactVersion):
        return value
    return ArtifactVersion.from_ref(value)


def _as_artifact(value: ArtifactLike) -> Artifact:
    if isinstance(value, Artifact):
        return value
    return Artifact.from_ref(value)


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Violation:
    """A dependency edge whose constraint the resolved version fails.

    Attributes:
        dependency: The violated edge.
        resolved_version: The version the build resolved for the target.
    """

    dependency: Dependency
    resolved_version: str

    @property
    def kind(self) -> EvaluatorKind:
        """The evaluator that rejected the resolved version."""
        return self.dependency.kind

    @property
    def display_string(self) -> str:
        return self.dependency.display_string

    @property
    def detail(self) -> str:
        """Display string plus the resolved version and rejecting evaluator."""
        return (
            f"{self.display_string}, but {self.dependency.to_artifact.artifact_id} "
            f"version was {self.resolved_version} ({self.kind.value} match)"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "from": self.dependency.from_artifact_version.ref,
            "to": self.dependency.to_artifact.ref,
            "declared_constraint": self.dependency.declared_constraint,
            "resolved_version": self.resolved_version,
            "evaluator": self.kind.value,
            "display": self.display_string,
        }


@dataclass
class CheckReport:
    """Outcome of one consistency check.

    Attributes:
        violations: Failed edges in input order, without deduplication.
        checked: Number of edges tested.
    """

    violations: list[Violation] = field(default_factory=list)
    checked: int = 0

    @property
    def passed(self) -> bool:
        """True when every checked constraint was satisfied."""
        return not self.violations

    @property
    def messages(self) -> list[str]:
        """Display strings of all violations, in input order."""
        return [violation.display_string for violation in self.violations]

    def raise_for_violations(self) -> None:
        """Raise ``ConsistencyError`` if the report has violations."""
        if self.violations:
            raise ConsistencyError(
                f"{len(self.violations)} dependency constraint(s) violated: "
                + "; ".join(self.messages),
                report=self,
            )

    def to_dict(self) -> dict[str, Any]:
        return {
            "passed": self.passed,
            "checked": self.checked,
            "violations": [violation.to_dict() for violation in self.violations],
        }


# ---------------------------------------------------------------------------
# ConsistencyChecker
# ---------------------------------------------------------------------------


class ConsistencyChecker:
    """Validate resolved versions against every declared constraint.

    Example::

        checker = ConsistencyChecker()
        report = checker.check([
            ("g:a:1.0.0", "g:b", "[1.0.0]", "1.0.1"),
        ])
        report.messages  # ["g:a:1.0.0 -> g:b@1.0.0"]

    Args:
        config: Checker configuration; decides which groups get strict
            matching. Defaults to ``CheckerConfig()``.
        registry: Registry that accumulates edges. A fresh one is created
            when omitted; pass a shared registry to aggregate edges across
            several checks.
    """

    def __init__(
        self,
        config: CheckerConfig | None = None,
        registry: DependencyRegistry | None = None,
    ) -> None:
        self.config = config or CheckerConfig()
        self.registry = registry if registry is not None else DependencyRegistry()

    def build_edge(
        self,
        declaring: ArtifactVersionLike,
        target: ArtifactLike,
        declared_constraint: str,
    ) -> Dependency:
        """Build a ``Dependency`` with strict matching per the configured policy.

        Raises:
            MalformedReferenceError: If a coordinate reference is malformed.
        """
        to_artifact = _as_artifact(target)
        return Dependency(
            from_artifact_version=_as_artifact_version(declaring),
            to_artifact=to_artifact,
            declared_constraint=declared_constraint,
            strict=self.config.policy.is_strict(to_artifact.group_id),
        )

    def check(self, edges: Iterable[ResolvedEdge | tuple]) -> CheckReport:
        """Register and test every resolved edge in a single pass.

        Args:
            edges: ``(declaring, target, declared_constraint,
                resolved_version)`` tuples, one per resolved edge.

        Returns:
            The report of the pass.

        Raises:
            MalformedReferenceError: If a tuple carries a malformed
                coordinate. Constraint strings never raise.
        """
        report = CheckReport()
        for declaring, target, declared_constraint, resolved_version in edges:
            edge = self.build_edge(declaring, target, declared_constraint)
            self.registry.add_edge(edge)
            report.checked += 1
            if not edge.is_version_compatible(resolved_version):
                self._record(report, edge, resolved_version)
        self._log_summary(report)
        return report

    def check_resolution(
        self,
        declared: Iterable[Dependency | tuple],
        resolved: Iterable[ArtifactVersionLike],
    ) -> CheckReport:
        """Check declared edges against a separately resolved version set.

        This is the two-phase form: edges are registered as they are
        declared, then the edges that apply to the resolved versions are
        tested against the version chosen for their target.

        Args:
            declared: ``Dependency`` objects, ``(declaring, target,
                declared_constraint)`` tuples, or ``ResolvedEdge`` tuples whose
                resolved version is ignored.
            resolved: The artifact versions the build resolved. When an
                artifact appears more than once, the last version wins.

        Returns:
            The report of the pass.
        """
        for item in declared:
            edge = item if isinstance(item, Dependency) else self.build_edge(*item[:3])
            self.registry.add_edge(edge)

        chosen: dict[Artifact, ArtifactVersion] = {}
        for value in resolved:
            version = _as_artifact_version(value)
            chosen[version.artifact] = version

        report = CheckReport()
        if not chosen:
            return report
        for edge in self.registry.active_dependencies(chosen.values()):
            resolved_version = chosen[edge.to_artifact].version
            report.checked += 1
            if not edge.is_version_compatible(resolved_version):
                self._record(report, edge, resolved_version)
        self._log_summary(report)
        return report

    def check_mapping(
        self,
        declared: Iterable[Dependency | tuple],
        resolved: Mapping[ArtifactLike, str],
    ) -> CheckReport:
        """Like :meth:`check_resolution`, with resolved versions keyed by artifact."""
        versions = []
        for artifact, version in resolved.items():
            target = _as_artifact(artifact)
            versions.append(
                ArtifactVersion(target.group_id, target.artifact_id, version)
            )
        return self.check_resolution(declared, versions)

    @staticmethod
    def _record(report: CheckReport, edge: Dependency, resolved_version: str) -> None:
        violation = Violation(dependency=edge, resolved_version=resolved_version)
        report.violations.append(violation)
        logger.warning("Dependency resolved to an incompatible version: %s", violation.detail)

    @staticmethod
    def _log_summary(report: CheckReport) -> None:
        if report.passed:
            logger.info("All %d dependency constraints satisfied", report.checked)
        else:
            logger.info(
                "%d of %d dependency constraints violated",
                len(report.violations),
                report.checked,
            )
