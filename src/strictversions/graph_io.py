"""Reading a resolved dependency graph from a YAML or JSON file.

The core never resolves dependencies; a host exports the graph its build
system resolved and the CLI feeds it to the checker. The file format is::

    edges:
      - from: com.example:app-lib:1.0.0
        to: com.google.firebase:firebase-common
        constraint: "[16.0.0]"
        resolved: 16.0.1
      - from: com.example:app-lib:1.0.0
        to: com.google.android.gms:play-services-base:[15.0.1]
        resolved: 15.0.1

When ``constraint`` is omitted, ``to`` must carry the constraint as the
version segment of a full ``group:artifact:constraint`` reference. Files
ending in ``.json`` are read as JSON; anything else as YAML.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from strictversions.core.checker import ResolvedEdge
from strictversions.core.coordinates import ArtifactVersion
from strictversions.exceptions import ConfigError

logger = logging.getLogger(__name__)

_REQUIRED_KEYS = ("from", "to", "resolved")


def _text(index: int, entry: dict, key: str) -> str:
    """Return a string field, rejecting numbers YAML may have coerced."""
    value = entry[key]
    if not isinstance(value, str):
        raise ConfigError(
            f"Edge #{index} field '{key}' must be a string; quote versions such as "
            "\"1.10\" so YAML does not read them as numbers"
        )
    return value


def _edge_from_entry(index: int, entry: Any) -> ResolvedEdge:
    """Convert one ``edges`` entry into a ``ResolvedEdge``.

    Raises:
        ConfigError: If the entry is not a mapping or lacks required keys.
        MalformedReferenceError: If ``to`` lacks a version segment while
            ``constraint`` is omitted.
    """
    if not isinstance(entry, dict):
        raise ConfigError(f"Edge #{index} must be a mapping")
    missing = [key for key in _REQUIRED_KEYS if key not in entry]
    if missing:
        raise ConfigError(f"Edge #{index} is missing: {', '.join(missing)}")

    target = _text(index, entry, "to")
    constraint = _text(index, entry, "constraint") if "constraint" in entry else None
    if constraint is None:
        declared = ArtifactVersion.from_ref(target)
        target = declared.artifact.ref
        constraint = declared.version
    return ResolvedEdge(
        declaring=_text(index, entry, "from"),
        target=target,
        declared_constraint=constraint,
        resolved_version=_text(index, entry, "resolved"),
    )


def parse_graph(data: Any) -> list[ResolvedEdge]:
    """Convert a parsed graph document into resolved edges.

    Args:
        data: The document, a mapping with an ``edges`` list.

    Returns:
        Edges in document order.

    Raises:
        ConfigError: If the document structure is invalid.
    """
    if not isinstance(data, dict) or not isinstance(data.get("edges"), list):
        raise ConfigError("Graph document must be a mapping with an 'edges' list")
    return [_edge_from_entry(i, entry) for i, entry in enumerate(data["edges"])]


def load_graph(path: Path | str) -> list[ResolvedEdge]:
    """Load resolved edges from a YAML or JSON file.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    graph_path = Path(path)
    try:
        text = graph_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read graph file {graph_path}: {exc}") from exc

    try:
        if graph_path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot parse graph file {graph_path}: {exc}") from exc

    edges = parse_graph(data)
    logger.info("Loaded %d resolved edges from %s", len(edges), graph_path)
    return edges
