"""strictversions CLI: dependency-version consistency checks for resolved builds.

Entry point for the ``strictversions`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    check: Check a resolved dependency graph against declared constraints.
    paths: Show every known dependency path to an artifact.

Usage::

    strictversions check resolved-graph.yaml
    strictversions check resolved-graph.json --config strictversions.yaml
    strictversions -v check resolved-graph.yaml --warn-only
    strictversions paths resolved-graph.yaml com.google.firebase:firebase-common
"""

from __future__ import annotations

import logging

import click

from strictversions import __version__
from strictversions.cli.check import check_command
from strictversions.cli.paths_cmd import paths_command

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--verbose", "-v",
    count=True,
    help="Log progress (-v) or per-edge evaluation details (-vv).",
)
def cli(verbose: int) -> None:
    """strictversions: Catch incompatible library version combinations.

    Checks the versions a build system resolved against the exact-version
    constraints that libraries declare on each other.
    """
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.ERROR
    logging.basicConfig(level=level, format=_LOG_FORMAT)


cli.add_command(check_command)
cli.add_command(paths_command)
