"""Thread-safe registry of dependency edges, indexed by constrained artifact.

The registry is the aggregation point of a consistency check: every declared
constraint on an artifact accumulates in that artifact's bucket, whatever
order the edges arrive in and whichever thread reports them.

Concurrency model
-----------------
A single ``threading.Lock`` guards the backing mapping. The lock is held only
to look up or create a bucket and append to it, or to copy a bucket. Readers
always receive an owned copy, so iterating a result can never observe, or be
invalidated by, a later :meth:`DependencyRegistry.add_edge`.

Evaluators are built when a :class:`~strictversions.core.dependency.Dependency`
is constructed, before it reaches the registry, so no evaluation ever runs
under the lock.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from strictversions.core.coordinates import Artifact, ArtifactVersion
from strictversions.core.dependency import Dependency, DependencyNode

logger = logging.getLogger(__name__)


class DependencyRegistry:
    """Mapping from a target ``Artifact`` to the edges constraining it.

    Multiple edges to the same target from different declaring artifacts are
    expected; they are what a consistency check compares against the
    resolved version.

    Thread safety: :meth:`add_edge` and every read method may be called from
    any thread without external synchronization.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._edges: dict[Artifact, list[Dependency]] = {}

    # -- Mutation -----------------------------------------------------------

    def add_edge(self, edge: Dependency) -> None:
        """Record an edge under its target artifact.

        Args:
            edge: The ``Dependency`` to add.
        """
        with self._lock:
            bucket = self._edges.get(edge.to_artifact)
            if bucket is None:
                bucket = []
                self._edges[edge.to_artifact] = bucket
            bucket.append(edge)
        logger.debug("Registered dependency %s", edge)

    # -- Snapshot reads -----------------------------------------------------

    def get_edges(self, target: Artifact) -> set[Dependency]:
        """Return a snapshot of the edges constraining ``target``.

        Args:
            target: The constrained artifact.

        Returns:
            A new set; empty if nothing constrains ``target``.
        """
        with self._lock:
            bucket = self._edges.get(target)
            if bucket is None:
                return set()
            return set(bucket)

    def targets(self) -> set[Artifact]:
        """Return a snapshot of every artifact with at least one edge."""
        with self._lock:
            return set(self._edges)

    def _snapshot(self) -> dict[Artifact, list[Dependency]]:
        with self._lock:
            return {artifact: list(bucket) for artifact, bucket in self._edges.items()}

    def __len__(self) -> int:
        with self._lock:
            return sum(len(bucket) for bucket in self._edges.values())

    # -- Graph queries ------------------------------------------------------

    def active_dependencies(
        self, resolved_versions: Iterable[ArtifactVersion]
    ) -> list[Dependency]:
        """Return the edges that apply to a resolved set of artifact versions.

        An edge applies when its declaring artifact version was resolved and
        its target artifact was resolved at some version.

        Args:
            resolved_versions: The artifact versions a build resolved.

        Returns:
            Applicable edges, grouped by target in registration order.
        """
        versions = set(resolved_versions)
        artifacts = {version.artifact for version in versions}
        active: list[Dependency] = []
        for target, bucket in self._snapshot().items():
            if target not in artifacts:
                continue
            for edge in bucket:
                if edge.from_artifact_version in versions:
                    active.append(edge)
        return active

    def dependencies_touching(self, artifacts: Iterable[Artifact]) -> list[Dependency]:
        """Return edges whose declaring or target artifact is in ``artifacts``."""
        wanted = set(artifacts)
        touching: list[Dependency] = []
        for target, bucket in self._snapshot().items():
            for edge in bucket:
                if target in wanted or edge.from_artifact_version.artifact in wanted:
                    touching.append(edge)
        return touching

    def paths_to(self, artifact: Artifact) -> list[DependencyNode]:
        """Return every known path leading to any version of ``artifact``.

        Each returned node is the top of a path; following ``child`` links
        walks down to the edge that constrains ``artifact``. A path is
        extended upwards only through edges compatible with the declaring
        version one hop below, and stops at a root (an artifact nothing else
        declares) or when it would revisit an artifact already on the path.

        Args:
            artifact: The constrained artifact.

        Returns:
            Top nodes of all paths, in discovery order.
        """
        edges = self._snapshot()
        paths: list[DependencyNode] = []
        for edge in edges.get(artifact, []):
            self._extend_path(
                edges,
                DependencyNode(edge),
                {artifact, edge.from_artifact_version.artifact},
                paths,
            )
        return paths

    @staticmethod
    def _extend_path(
        edges: dict[Artifact, list[Dependency]],
        node: DependencyNode,
        seen: set[Artifact],
        paths: list[DependencyNode],
    ) -> None:
        declarer = node.dependency.from_artifact_version
        parents = [
            edge
            for edge in edges.get(declarer.artifact, [])
            if edge.from_artifact_version.artifact not in seen
            and edge.is_version_compatible(declarer.version)
        ]
        if not parents:
            paths.append(node)
            return
        for parent in parents:
            DependencyRegistry._extend_path(
                edges,
                DependencyNode(parent, child=node),
                seen | {parent.from_artifact_version.artifact},
                paths,
            )
