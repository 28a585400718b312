"""Artifact coordinates: version-independent identities and versioned references.

Coordinates use the colon-delimited reference notation common to Maven and
Gradle build files:

- ``group:artifact`` identifies an :class:`Artifact`.
- ``group:artifact:version`` identifies an :class:`ArtifactVersion`.

Segments beyond the ones a type needs are ignored, so a classifier or
packaging suffix (``g:a:1.0:sources``) parses to the same value as the bare
reference.
"""

from __future__ import annotations

from dataclasses import dataclass

from strictversions.exceptions import MalformedReferenceError

_SEPARATOR = ":"


def _split_ref(reference: str, required: int) -> list[str] | None:
    """Split a reference into segments, or None if too few are present."""
    parts = reference.split(_SEPARATOR)
    if len(parts) < required:
        return None
    return parts


# ---------------------------------------------------------------------------
# Artifact: version-independent identity
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Artifact:
    """A library identity without a version.

    Attributes:
        group_id: Organisational namespace (e.g., "com.google.firebase").
        artifact_id: Library name within the group (e.g., "firebase-common").
    """

    group_id: str
    artifact_id: str

    def __post_init__(self) -> None:
        if not self.group_id or not self.artifact_id:
            raise MalformedReferenceError(
                f"Artifact requires a group and an artifact id, got "
                f"{self.group_id!r}:{self.artifact_id!r}"
            )

    @property
    def ref(self) -> str:
        """Canonical ``group:artifact`` reference."""
        return f"{self.group_id}:{self.artifact_id}"

    @classmethod
    def from_ref(cls, reference: str) -> Artifact:
        """Parse a ``group:artifact`` reference.

        Args:
            reference: Colon-delimited reference. Extra segments are ignored.

        Returns:
            The parsed ``Artifact``.

        Raises:
            MalformedReferenceError: If fewer than two segments are present
                or either segment is empty.
        """
        parts = _split_ref(reference, 2)
        if parts is None:
            raise MalformedReferenceError(f"Invalid artifact reference: {reference!r}")
        return cls(group_id=parts[0], artifact_id=parts[1])

    def __str__(self) -> str:
        return self.ref


# ---------------------------------------------------------------------------
# ArtifactVersion: identity plus a raw version string
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ArtifactVersion:
    """A library identity at a specific version.

    The version is kept as the raw string from the reference. It may be a
    plain version (``1.2.3``), an exact-match literal (``[1.2.3]``) or a
    range; interpretation is left to the version evaluators.
    """

    group_id: str
    artifact_id: str
    version: str

    def __post_init__(self) -> None:
        if not self.group_id or not self.artifact_id:
            raise MalformedReferenceError(
                f"Artifact version requires a group and an artifact id, got "
                f"{self.group_id!r}:{self.artifact_id!r}"
            )
        if not self.version:
            raise MalformedReferenceError(
                f"Artifact version {self.group_id}:{self.artifact_id} has an empty version"
            )

    @property
    def artifact(self) -> Artifact:
        """The version-independent ``Artifact`` for this coordinate."""
        return Artifact(group_id=self.group_id, artifact_id=self.artifact_id)

    @property
    def ref(self) -> str:
        """Canonical ``group:artifact:version`` reference."""
        return f"{self.group_id}:{self.artifact_id}:{self.version}"

    @classmethod
    def from_ref(cls, reference: str) -> ArtifactVersion:
        """Parse a ``group:artifact:version`` reference.

        Args:
            reference: Colon-delimited reference. Segments beyond the third
                are ignored.

        Returns:
            The parsed ``ArtifactVersion``.

        Raises:
            MalformedReferenceError: If fewer than three segments are present
                or any of the first three is empty.
        """
        parts = _split_ref(reference, 3)
        if parts is None:
            raise MalformedReferenceError(
                f"Invalid artifact version reference: {reference!r}"
            )
        return cls(group_id=parts[0], artifact_id=parts[1], version=parts[2])

    @classmethod
    def from_ref_or_none(cls, reference: str) -> ArtifactVersion | None:
        """Like :meth:`from_ref`, but return None instead of raising."""
        try:
            return cls.from_ref(reference)
        except MalformedReferenceError:
            return None

    def __str__(self) -> str:
        return self.ref
