"""Human-readable diagnostics for violated dependency constraints.

Builds the multi-line failure message shown when a resolved version breaks
an exact-version declaration, and renders the dependency paths that lead to
the affected artifact so a user can see which direct dependency pulled it in.

Artifacts declared directly by the project being built use the
:data:`PROJECT_GROUP` group id; paths starting there are rendered as
project (task/module) dependencies rather than library dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping

from strictversions.core.checker import Violation
from strictversions.core.dependency import DependencyNode

PROJECT_GROUP = "gradle.project"

_LINE_WIDTH = 120


def simplify_group_ids(text: str, abbreviations: Mapping[str, str]) -> str:
    """Replace long group ids in ``text`` with their abbreviations.

    Example: ``com.google.android.gms`` -> ``c.g.a.g``.
    """
    for group_id, short in abbreviations.items():
        text = text.replace(group_id, short)
    return text


def render_path(
    node: DependencyNode, abbreviations: Mapping[str, str] | None = None
) -> Iterator[str]:
    """Yield one indented line per hop of a dependency path, top first.

    Args:
        node: Top node of the path.
        abbreviations: Group ids to shorten; none are shortened when omitted.
    """
    abbreviations = abbreviations or {}
    for depth, dep in enumerate(node.chain(), start=1):
        prefix = "--" * depth + " "
        to_ref = simplify_group_ids(dep.to_artifact.ref, abbreviations)
        target = f"{to_ref}@{dep.declared_constraint}"
        declarer = dep.from_artifact_version
        if declarer.group_id == PROJECT_GROUP:
            from_ref = declarer.ref.replace(PROJECT_GROUP, "", 1)
            yield f"{prefix}{from_ref} task/module dep -> {target}"
        else:
            from_ref = simplify_group_ids(declarer.ref, abbreviations)
            yield f"{prefix}{from_ref} library depends -> {target}"


def _direct_dependency_line(node: DependencyNode) -> str:
    dep = node.dependency
    declarer = dep.from_artifact_version
    target = f"{dep.to_artifact.ref}@{dep.declared_constraint}"
    if declarer.group_id == PROJECT_GROUP:
        return f"-- Project '{declarer.artifact_id}' depends onto {target}"
    return f"-- '{declarer.ref}' depends onto {target}"


def wrap_lines(text: str, width: int = _LINE_WIDTH) -> str:
    """Break every line of ``text`` longer than ``width`` characters."""
    return re.sub(r".{%d}(?=.)" % width, lambda m: m.group(0) + "\n", text)


def failure_message(
    violation: Violation,
    project_name: str,
    paths: Iterable[DependencyNode] = (),
    addendum: str = "",
) -> str:
    """Compose the failure message for one violated constraint.

    Args:
        violation: The violated edge and the version actually resolved.
        project_name: Project named in the message.
        paths: Known paths to the affected artifact; the top of each path is
            listed once as a direct dependency.
        addendum: Optional text appended at the end.

    Returns:
        The message, wrapped at 120 characters per line.
    """
    dep = violation.dependency
    lines = [
        f"In project '{project_name}' a resolved library dependency depends on another "
        f"at an exact version (e.g. \"{dep.declared_constraint}\"), but isn't being "
        "resolved to that version. Behavior exhibited by the library will be unknown.",
        "",
        f"Dependency failing: {dep.display_string}, but {dep.to_artifact.artifact_id} "
        f"version was {violation.resolved_version}.",
    ]

    direct: list[str] = []
    for node in paths:
        line = _direct_dependency_line(node)
        if line not in direct:
            direct.append(line)
    if direct:
        lines.append("")
        lines.append(
            "The following dependencies are project dependencies that are direct or "
            "have transitive dependencies that lead to the artifact with the issue."
        )
        lines.extend(direct)

    lines.append("")
    lines.append(
        "Run the check with --verbose to see every known dependency path to the artifact."
    )
    if addendum.strip():
        lines.append(addendum.strip())
    return wrap_lines("\n".join(lines))
