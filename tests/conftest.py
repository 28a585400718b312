"""Shared fixtures for strictversions tests."""

from __future__ import annotations

import pytest

from strictversions.core import Artifact, ArtifactVersion, ConsistencyChecker


@pytest.fixture
def lib_a_100() -> ArtifactVersion:
    """Declaring artifact ``g:a:1.0.0``."""
    return ArtifactVersion.from_ref("g:a:1.0.0")


@pytest.fixture
def lib_b() -> Artifact:
    """Constrained artifact ``g:b``."""
    return Artifact.from_ref("g:b")


@pytest.fixture
def checker() -> ConsistencyChecker:
    """A checker with the default configuration and a fresh registry."""
    return ConsistencyChecker()
