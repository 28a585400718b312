"""Tests for ConsistencyChecker and CheckReport.

Includes the end-to-end scenarios: a single exact declaration that holds or
breaks, and two declarations on one artifact where the resolver can honour
only one.
"""

from __future__ import annotations

import logging

import pytest

from strictversions.core import (
    Artifact,
    ArtifactVersion,
    CheckerConfig,
    ConsistencyChecker,
    Dependency,
    DependencyRegistry,
    EvaluatorKind,
    ResolvedEdge,
)
from strictversions.exceptions import ConsistencyError, MalformedReferenceError


class TestCheck:
    """Tests for the single-pass ``check`` over resolved edges."""

    def test_exact_constraint_satisfied(self, checker: ConsistencyChecker) -> None:
        report = checker.check([("g:a:1.0.0", "g:b", "[1.0.0]", "1.0.0")])
        assert report.passed is True
        assert report.messages == []
        assert report.checked == 1

    def test_exact_constraint_violated(self, checker: ConsistencyChecker) -> None:
        report = checker.check([("g:a:1.0.0", "g:b", "[1.0.0]", "1.0.1")])
        assert report.passed is False
        assert report.messages == ["g:a:1.0.0 -> g:b@1.0.0"]
        assert report.violations[0].kind is EvaluatorKind.EXACT
        assert report.violations[0].resolved_version == "1.0.1"

    def test_competing_exact_constraints(self, checker: ConsistencyChecker) -> None:
        """Only the constraint the resolver did not honour is reported."""
        report = checker.check([
            ("g:a:1.0.0", "g:c", "[1.0.0]", "2.0.0"),
            ("g:b:1.0.0", "g:c", "[2.0.0]", "2.0.0"),
        ])
        assert report.messages == ["g:a:1.0.0 -> g:c@1.0.0"]
        assert len(checker.registry.get_edges(Artifact("g", "c"))) == 2

    def test_accepts_model_objects_and_named_tuples(
        self, checker: ConsistencyChecker, lib_a_100: ArtifactVersion, lib_b: Artifact
    ) -> None:
        edge = ResolvedEdge(lib_a_100, lib_b, "[1.0.0]", "2.0.0")
        report = checker.check([edge])
        assert report.violations[0].dependency.to_artifact == lib_b

    def test_violations_keep_input_order_without_dedup(
        self, checker: ConsistencyChecker
    ) -> None:
        report = checker.check([
            ("g:z:1.0.0", "g:b", "[1.0.0]", "3.0.0"),
            ("g:y:1.0.0", "g:b", "1.0.0", "3.0.0"),
            ("g:a:1.0.0", "g:b", "[2.0.0]", "3.0.0"),
            ("g:z:1.0.0", "g:b", "[1.0.0]", "3.0.0"),
        ])
        assert report.messages == [
            "g:z:1.0.0 -> g:b@1.0.0",
            "g:a:1.0.0 -> g:b@2.0.0",
            "g:z:1.0.0 -> g:b@1.0.0",
        ]
        assert report.checked == 4

    def test_ranges_and_garbage_never_fail(self, checker: ConsistencyChecker) -> None:
        report = checker.check([
            ("g:a:1.0.0", "g:b", "[1.0,10.0]", "20.0"),
            ("g:a:1.0.0", "g:c", "(1.0,10.0)", "20.0"),
            ("g:a:1.0.0", "g:d", "not a version", ""),
        ])
        assert report.passed

    def test_malformed_coordinate_propagates(self, checker: ConsistencyChecker) -> None:
        with pytest.raises(MalformedReferenceError):
            checker.check([("g:a", "g:b", "[1.0.0]", "1.0.0")])

    def test_strictness_follows_config(self) -> None:
        checker = ConsistencyChecker(CheckerConfig(strict_groups=("g",)))
        edge = checker.build_edge("x:a:1.0.0", "g:b", "1.0.0")
        assert edge.strict is True
        assert checker.build_edge("x:a:1.0.0", "h:b", "1.0.0").strict is False

    def test_shared_registry_accumulates(self) -> None:
        registry = DependencyRegistry()
        ConsistencyChecker(registry=registry).check([("g:a:1", "g:b", "1", "1")])
        ConsistencyChecker(registry=registry).check([("g:c:1", "g:b", "1", "1")])
        assert len(registry.get_edges(Artifact("g", "b"))) == 2

    def test_violation_logged_as_warning(
        self, checker: ConsistencyChecker, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="strictversions"):
            checker.check([("g:a:1.0.0", "g:b", "[1.0.0]", "1.0.1")])
        assert "g:a:1.0.0 -> g:b@1.0.0" in caplog.text


class TestCheckResolution:
    """Tests for the two-phase declared/resolved form."""

    def test_active_edges_checked_against_chosen_version(
        self, checker: ConsistencyChecker
    ) -> None:
        report = checker.check_resolution(
            declared=[
                ("g:a:1.0.0", "g:b", "[1.0.0]"),
                ("g:a:2.0.0", "g:b", "[2.0.0]"),
                ("g:c:1.0.0", "g:b", "[1.5.0]"),
            ],
            resolved=["g:a:1.0.0", "g:b:2.0.0"],
        )
        # Only g:a:1.0.0 was resolved, so only its declaration applies.
        assert report.checked == 1
        assert report.messages == ["g:a:1.0.0 -> g:b@1.0.0"]

    def test_accepts_dependency_objects(self, checker: ConsistencyChecker) -> None:
        dep = Dependency(ArtifactVersion.from_ref("g:a:1"), Artifact("g", "b"), "[1]")
        report = checker.check_resolution([dep], [ArtifactVersion.from_ref("g:a:1"), "g:b:1"])
        assert report.passed and report.checked == 1

    def test_accepts_resolved_edges_ignoring_their_version(
        self, checker: ConsistencyChecker
    ) -> None:
        """The version chosen for the target comes from ``resolved`` only."""
        edge = ResolvedEdge("g:a:1.0.0", "g:b", "[1.0.0]", "1.0.0")
        report = checker.check_resolution([edge], ["g:a:1.0.0", "g:b:1.0.1"])
        assert report.checked == 1
        assert report.messages == ["g:a:1.0.0 -> g:b@1.0.0"]

    def test_no_resolved_versions_is_a_no_op(self, checker: ConsistencyChecker) -> None:
        report = checker.check_resolution([("g:a:1", "g:b", "[1]")], [])
        assert report.passed and report.checked == 0

    def test_check_mapping(self, checker: ConsistencyChecker) -> None:
        report = checker.check_mapping(
            [("g:a:1.0.0", "g:b", "[1.0.0]")],
            {"g:a": "1.0.0", Artifact("g", "b"): "1.2.0"},
        )
        assert report.messages == ["g:a:1.0.0 -> g:b@1.0.0"]


class TestCheckReport:
    """Tests for report helpers."""

    def test_raise_for_violations(self, checker: ConsistencyChecker) -> None:
        report = checker.check([("g:a:1.0.0", "g:b", "[1.0.0]", "1.0.1")])
        with pytest.raises(ConsistencyError) as excinfo:
            report.raise_for_violations()
        assert excinfo.value.report is report
        assert "g:a:1.0.0 -> g:b@1.0.0" in str(excinfo.value)

    def test_passing_report_does_not_raise(self, checker: ConsistencyChecker) -> None:
        checker.check([]).raise_for_violations()

    def test_to_dict(self, checker: ConsistencyChecker) -> None:
        report = checker.check([("g:a:1.0.0", "g:b", "[1.0.0]", "1.0.1")])
        data = report.to_dict()
        assert data["passed"] is False
        assert data["checked"] == 1
        assert data["violations"][0] == {
            "from": "g:a:1.0.0",
            "to": "g:b",
            "declared_constraint": "[1.0.0]",
            "resolved_version": "1.0.1",
            "evaluator": "exact",
            "display": "g:a:1.0.0 -> g:b@1.0.0",
        }

    def test_violation_detail(self, checker: ConsistencyChecker) -> None:
        report = checker.check([("g:a:1.0.0", "g:b", "[1.0.0]", "1.0.1")])
        assert report.violations[0].detail == (
            "g:a:1.0.0 -> g:b@1.0.0, but b version was 1.0.1 (exact match)"
        )
