"""Rich output formatting helpers for the strictversions CLI.

Provides consistent terminal output for check reports, violation details
and dependency path listings.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from strictversions.config import CheckerConfig
from strictversions.core.checker import CheckReport
from strictversions.core.coordinates import Artifact
from strictversions.core.dependency import DependencyNode
from strictversions.core.registry import DependencyRegistry
from strictversions.core.report import failure_message, render_path

logger = logging.getLogger(__name__)

console = Console(emoji=False)


def print_check_report(
    report: CheckReport, registry: DependencyRegistry, config: CheckerConfig
) -> None:
    """Print the verdict of a check, with details for each violation.

    Args:
        report: The check report.
        registry: Registry populated by the check, used for path lookups.
        config: Configuration supplying project name and message addendum.
    """
    if report.passed:
        console.print(
            Panel(
                f"[bold green]All {report.checked} dependency constraints satisfied[/bold green]",
                title="Dependency Check",
            )
        )
        return

    console.print(
        Panel(
            f"[bold red]{len(report.violations)} of {report.checked} "
            "dependency constraints violated[/bold red]",
            title="Dependency Check",
        )
    )

    table = Table(title="Violations", show_header=True, header_style="bold")
    table.add_column("Declared By", style="bold")
    table.add_column("Artifact")
    table.add_column("Constraint", justify="center")
    table.add_column("Resolved", justify="center")
    table.add_column("Evaluator", style="dim")
    for violation in report.violations:
        dep = violation.dependency
        table.add_row(
            Text(dep.from_artifact_version.ref),
            Text(dep.to_artifact.ref),
            Text(dep.declared_constraint),
            Text(violation.resolved_version, style="red"),
            Text(violation.kind.value),
        )
    console.print(table)

    for violation in report.violations:
        paths = registry.paths_to(violation.dependency.to_artifact)
        _log_paths(violation.dependency.to_artifact, paths, config.group_abbreviations)
        console.print(
            failure_message(
                violation,
                config.project_name,
                paths,
                config.message_addendum,
            ),
            markup=False,
            highlight=False,
        )
        console.print()


def _log_paths(
    artifact: Artifact, paths: list[DependencyNode], abbreviations: dict[str, str]
) -> None:
    """Log every known path to ``artifact`` at INFO level."""
    logger.info(
        "Displaying all currently known paths to any version of the dependency: %s",
        artifact.ref,
    )
    for node in paths:
        for line in render_path(node, abbreviations):
            logger.info(line)


def print_paths(
    artifact: Artifact, paths: list[DependencyNode], abbreviations: dict[str, str]
) -> None:
    """Print every known dependency path to ``artifact``.

    Args:
        artifact: The constrained artifact.
        paths: Top nodes of the paths, from ``DependencyRegistry.paths_to``.
        abbreviations: Group ids to shorten in the listing.
    """
    if not paths:
        console.print(f"[dim]No known dependency paths to {escape(artifact.ref)}.[/dim]")
        return

    console.print(Panel(f"[bold]{escape(artifact.ref)}[/bold]", title="Dependency Paths"))
    for node in paths:
        for line in render_path(node, abbreviations):
            console.print(line, markup=False, highlight=False)
        console.print()
    console.print(f"{len(paths)} path(s)")
