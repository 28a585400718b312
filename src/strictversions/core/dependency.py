"""Dependency edges: a declared version constraint from one artifact on another.

A :class:`Dependency` records that ``from_artifact_version`` declared a
dependency on ``to_artifact`` with ``declared_constraint`` (for example
``[16.0.0]``). The evaluator for the constraint is selected once, when the
edge is built, and reused for every compatibility test.

A :class:`DependencyNode` links edges into a path, from the edge nearest the
constrained artifact up towards the root that introduced it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from strictversions.core.coordinates import Artifact, ArtifactVersion
from strictversions.core.evaluators import (
    EvaluatorKind,
    VersionEvaluator,
    select_evaluator,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dependency:
    """A directed edge from a specific artifact version to an artifact.

    Equality and hashing use the three coordinates of the declaration; the
    evaluator is derived state.

    Attributes:
        from_artifact_version: The declaring artifact at its version.
        to_artifact: The constrained artifact.
        declared_constraint: The version constraint exactly as authored.
        strict: Whether strict matching was enabled for the target's group
            when the edge was built.
        evaluator: The evaluator selected for ``declared_constraint``.
    """

    from_artifact_version: ArtifactVersion
    to_artifact: Artifact
    declared_constraint: str
    strict: bool = field(default=False, compare=False)
    evaluator: VersionEvaluator = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "evaluator", select_evaluator(self.declared_constraint, self.strict)
        )

    @classmethod
    def from_artifact_versions(
        cls,
        from_artifact_version: ArtifactVersion,
        to_artifact_version: ArtifactVersion,
        strict: bool = False,
    ) -> Dependency:
        """Build an edge from two versioned coordinates.

        The version of ``to_artifact_version`` is taken as the declared
        constraint, so ``g:b:[1.0.0]`` becomes a constraint of ``[1.0.0]``
        on ``g:b``.
        """
        return cls(
            from_artifact_version=from_artifact_version,
            to_artifact=to_artifact_version.artifact,
            declared_constraint=to_artifact_version.version,
            strict=strict,
        )

    @property
    def kind(self) -> EvaluatorKind:
        """The kind of evaluator guarding this edge."""
        return self.evaluator.kind

    def is_version_compatible(self, version: str) -> bool:
        """Return True if ``version`` of the target satisfies this edge."""
        if self.evaluator.is_compatible(version):
            return True
        logger.debug(
            "Failed comparing %s with %s using %s evaluator",
            self.declared_constraint,
            version,
            self.evaluator.kind.value,
        )
        return False

    @property
    def display_string(self) -> str:
        """``<from> -> <to>@<constraint>`` for diagnostics."""
        return (
            f"{self.from_artifact_version.ref} -> "
            f"{self.to_artifact.ref}@{self.evaluator.display_constraint}"
        )

    def __str__(self) -> str:
        return self.display_string


@dataclass(frozen=True)
class DependencyNode:
    """One hop in a dependency path.

    Attributes:
        dependency: The edge at this hop.
        child: The hop nearer the constrained artifact, or None at the
            bottom of the path.
    """

    dependency: Dependency
    child: DependencyNode | None = None

    def chain(self) -> list[Dependency]:
        """Edges from this hop down to the bottom of the path."""
        edges: list[Dependency] = []
        node: DependencyNode | None = self
        while node is not None:
            edges.append(node.dependency)
            node = node.child
        return edges

    @property
    def depth(self) -> int:
        """Number of hops from this node to the bottom of the path."""
        return len(self.chain())
