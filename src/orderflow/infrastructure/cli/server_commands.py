"""CLI command that runs the HTTP API."""

from __future__ import annotations

from pathlib import Path

import click
import uvicorn

from orderflow.domain.exceptions import DomainException
from orderflow.domain.service.pricing_service import DiscountMode
from orderflow.infrastructure.api.app import create_app
from orderflow.infrastructure.bootstrap import container_from_settings
from orderflow.infrastructure.config import Settings
from orderflow.infrastructure.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.command("serve")
@click.option("--host", default=None, help="Bind address (env: ORDERFLOW_HOST).")
@click.option("--port", default=None, type=int, help="Port (env: ORDERFLOW_PORT).")
@click.option(
    "--catalog",
    "catalog_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="JSON seed catalog (env: ORDERFLOW_CATALOG_FILE).",
)
@click.option(
    "--discount-mode",
    type=click.Choice([m.value for m in DiscountMode]),
    default=None,
    help="How the premium discount applies (env: ORDERFLOW_DISCOUNT_MODE).",
)
def serve(
    host: str | None,
    port: int | None,
    catalog_file: Path | None,
    discount_mode: str | None,
) -> None:
    """Start the order API server with a freshly seeded catalog."""
    try:
        settings = Settings.from_env().with_overrides(
            host=host,
            port=port,
            catalog_file=catalog_file,
            discount_mode=DiscountMode(discount_mode) if discount_mode else None,
        )
        container = container_from_settings(settings)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    configure_logging(settings.log_level, json_logs=settings.json_logs)
    logger.info(
        "server_starting",
        host=settings.host,
        port=settings.port,
        products=len(container.product_repo.list_all()),
        discount_mode=settings.discount_mode.value,
    )

    click.echo(f"Server listening on http://{settings.host}:{settings.port} ...")
    uvicorn.run(
        create_app(container),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        workers=1,  # catalog and ledger live in this process
    )
