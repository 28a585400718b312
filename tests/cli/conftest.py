"""Shared fixtures for CLI tests.

Provides resolved-graph files (consistent, violating, unreadable) and a
configuration file, all written to a temporary directory.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture
def consistent_graph(tmp_path: Path) -> Path:
    """A graph whose every exact constraint was honoured by the resolver."""
    path = tmp_path / "consistent.yaml"
    path.write_text(
        "edges:\n"
        "  - from: com.example:app-lib:1.0.0\n"
        "    to: com.google.firebase:firebase-common\n"
        "    constraint: \"[16.0.0]\"\n"
        "    resolved: \"16.0.0\"\n"
        "  - from: com.example:app-lib:1.0.0\n"
        "    to: com.squareup:okhttp:[3.0,4.0)\n"
        "    resolved: \"3.12.0\"\n"
    )
    return path


@pytest.fixture
def violating_graph(tmp_path: Path) -> Path:
    """A graph where two libraries pin different versions of one artifact."""
    path = tmp_path / "violating.json"
    path.write_text(json.dumps({"edges": [
        {
            "from": "gradle.project:app-compile:0.0.0",
            "to": "com.example:app-lib",
            "constraint": "1.0.0",
            "resolved": "1.0.0",
        },
        {
            "from": "com.example:app-lib:1.0.0",
            "to": "com.google.firebase:firebase-common:[16.0.0]",
            "resolved": "16.0.1",
        },
        {
            "from": "com.example:other-lib:2.0.0",
            "to": "com.google.firebase:firebase-common:[16.0.1]",
            "resolved": "16.0.1",
        },
    ]}))
    return path


@pytest.fixture
def broken_graph(tmp_path: Path) -> Path:
    """A graph file missing the ``edges`` list."""
    path = tmp_path / "broken.yaml"
    path.write_text("nodes: []\n")
    return path


@pytest.fixture
def lenient_config(tmp_path: Path) -> Path:
    """A configuration that reports violations without failing."""
    path = tmp_path / "strictversions.yaml"
    path.write_text(
        "project_name: demo-app\n"
        "fail_on_violation: false\n"
        "message_addendum: Align the firebase versions.\n"
    )
    return path


@pytest.fixture
def short_coordinate_graph(tmp_path: Path) -> Path:
    """A graph whose coordinates and constraints resemble rich markup and emoji codes."""
    path = tmp_path / "short.yaml"
    path.write_text(
        "edges:\n"
        "  - from: g:a:1.0.0\n"
        "    to: g:b\n"
        "    constraint: \"[1.0.0]\"\n"
        "    resolved: \"1.0.1\"\n"
        "  - from: g:a:1.0.0\n"
        "    to: g:c\n"
        "    constraint: \"[release]\"\n"
        "    resolved: \"1.0\"\n"
    )
    return path
