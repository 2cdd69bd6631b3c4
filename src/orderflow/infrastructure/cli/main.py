"""Entry point for the orderflow command line."""

import click

from orderflow.infrastructure.cli.catalog_commands import catalog_show
from orderflow.infrastructure.cli.server_commands import serve


@click.group()
def cli() -> None:
    """orderflow — in-memory order processing service"""


@cli.group()
def catalog() -> None:
    """Inspect the seed catalog."""


# Register subcommands
cli.add_command(serve)
catalog.add_command(catalog_show)
