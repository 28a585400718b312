"""``strictversions check <graph>``: check resolved versions against constraints.

Loads a resolved dependency graph, registers every declared constraint, and
tests each one against the version the build resolved for its target.

Exit Codes:
    0: All constraints satisfied (or violations with --warn-only).
    1: One or more constraints violated.
    2: The graph or configuration file could not be read.
"""

from __future__ import annotations

import json
import sys

import click

from strictversions.config import CheckerConfig, load_config
from strictversions.core.checker import ConsistencyChecker
from strictversions.exceptions import StrictVersionsError
from strictversions.graph_io import load_graph


def _fail(message: str, output_format: str) -> None:
    """Report an input error in the requested format and exit with code 2."""
    if output_format == "json":
        click.echo(json.dumps({"error": message}))
    else:
        click.echo(f"Error: {message}")
    sys.exit(2)


@click.command("check")
@click.argument("graph", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML configuration file (strict groups, project name, ...).",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.option(
    "--warn-only",
    is_flag=True,
    default=False,
    help="Report violations but exit 0.",
)
def check_command(
    graph: str, config_path: str | None, output_format: str, warn_only: bool
) -> None:
    """Check the resolved dependency graph in GRAPH.

    GRAPH is a YAML or JSON file listing resolved edges. Exit code 0 when
    every constraint holds, 1 on violations, 2 on unreadable input.
    """
    try:
        config = load_config(config_path) if config_path else CheckerConfig()
        edges = load_graph(graph)
        checker = ConsistencyChecker(config)
        report = checker.check(edges)
    except StrictVersionsError as exc:
        _fail(str(exc), output_format)
        return

    if output_format == "json":
        click.echo(json.dumps(report.to_dict(), indent=2))
    else:
        from strictversions.cli.output import print_check_report
        print_check_report(report, checker.registry, config)

    if report.passed or warn_only or not config.fail_on_violation:
        sys.exit(0)
    sys.exit(1)
