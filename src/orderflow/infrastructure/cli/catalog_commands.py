"""CLI commands for the product catalog."""

from __future__ import annotations

from pathlib import Path

import click

from orderflow.domain.exceptions import DomainException
from orderflow.infrastructure.bootstrap import build_container
from orderflow.infrastructure.persistence.catalog_seed import load_products


@click.command("show")
@click.option(
    "--catalog",
    "catalog_file",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="ORDERFLOW_CATALOG_FILE",
    default=None,
    help="JSON seed catalog (defaults to the built-in catalog).",
)
def catalog_show(catalog_file: Path | None) -> None:
    """List the products a server would start with."""
    try:
        container = build_container(products=load_products(catalog_file))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    products = container.list_products_handler().handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Category':<12} {'Price':>10} {'Available':>10}")
    click.echo("-" * 62)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<20} {p.category:<12} {'$' + format(p.price, '.2f'):>10} "
            f"{p.availability:>10}"
        )
