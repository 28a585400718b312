"""Core model and checking engine for dependency-version consistency.

All public names are re-exported here so callers can write
``from strictversions.core import ConsistencyChecker``.

Components, leaf first:

- ``coordinates``: ``Artifact`` and ``ArtifactVersion`` reference types.
- ``versions``: ``ParsedVersion``, ``Version``, ``VersionRange``.
- ``evaluators``: ``VersionEvaluator`` strategies and ``select_evaluator``.
- ``dependency``: the ``Dependency`` edge and ``DependencyNode`` paths.
- ``registry``: the thread-safe ``DependencyRegistry``.
- ``checker``: ``ConsistencyChecker`` and its ``CheckReport``.
- ``report``: failure messages and path rendering.
- ``settings``: ``CheckerConfig`` and the ``StrictMatchPolicy``.
"""

from strictversions.core.coordinates import Artifact, ArtifactVersion
from strictversions.core.versions import (
    ParsedVersion,
    Version,
    VersionRange,
    version_compare,
)
from strictversions.core.evaluators import (
    EvaluatorKind,
    VersionEvaluator,
    select_evaluator,
)
from strictversions.core.dependency import Dependency, DependencyNode
from strictversions.core.registry import DependencyRegistry
from strictversions.core.checker import (
    CheckReport,
    ConsistencyChecker,
    ResolvedEdge,
    Violation,
)
from strictversions.core.report import (
    PROJECT_GROUP,
    failure_message,
    render_path,
    simplify_group_ids,
)
from strictversions.core.settings import CheckerConfig, StrictMatchPolicy

__all__ = [
    "Artifact",
    "ArtifactVersion",
    "ParsedVersion",
    "Version",
    "VersionRange",
    "version_compare",
    "EvaluatorKind",
    "VersionEvaluator",
    "select_evaluator",
    "Dependency",
    "DependencyNode",
    "DependencyRegistry",
    "CheckReport",
    "ConsistencyChecker",
    "ResolvedEdge",
    "Violation",
    "PROJECT_GROUP",
    "failure_message",
    "render_path",
    "simplify_group_ids",
    "CheckerConfig",
    "StrictMatchPolicy",
]
