"""``strictversions paths <graph> <artifact>``: show dependency paths to an artifact.

Lists every known path through the resolved graph that ends in a constraint
on ARTIFACT, top-level declarer first. Useful for finding which direct
dependency pulls in a conflicting version.

Exit Codes:
    0: Paths listed (possibly none).
    2: Invalid graph file or artifact reference.
"""

from __future__ import annotations

import sys

import click

from strictversions.config import CheckerConfig, load_config
from strictversions.core.checker import ConsistencyChecker
from strictversions.core.coordinates import Artifact
from strictversions.exceptions import StrictVersionsError
from strictversions.graph_io import load_graph


@click.command("paths")
@click.argument("graph", type=click.Path(exists=True, dir_okay=False))
@click.argument("artifact")
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML configuration file (group abbreviations, strict groups).",
)
def paths_command(graph: str, artifact: str, config_path: str | None) -> None:
    """Show every known dependency path in GRAPH leading to ARTIFACT.

    ARTIFACT is a ``group:artifact`` reference.
    """
    try:
        config = load_config(config_path) if config_path else CheckerConfig()
        target = Artifact.from_ref(artifact)
        checker = ConsistencyChecker(config)
        checker.check(load_graph(graph))
    except StrictVersionsError as exc:
        click.echo(f"Error: {exc}")
        sys.exit(2)

    from strictversions.cli.output import print_paths
    print_paths(target, checker.registry.paths_to(target), config.group_abbreviations)
