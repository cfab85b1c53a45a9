import click
import uvicorn

from catalog.domain.exceptions import DomainException
from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from catalog.infrastructure.config import get_settings
from catalog.infrastructure.http.app import create_app
from catalog.infrastructure.logging_config import configure_logging


class _CatalogGroup(click.Group):
    """Turns domain exceptions (e.g. an unreachable database) into CLI errors."""

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except DomainException as exc:
            raise click.ClickException(str(exc))


@click.group(cls=_CatalogGroup)
def cli() -> None:
    """Catalog: Product Catalog Service"""
    configure_logging(get_settings().log_level)


@cli.group()
def product() -> None:
    """Manage products.

    Changes persist only with STORE_BACKEND=sql. The default in-memory
    store is rebuilt for every command.
    """


@cli.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True, help="Bind address.")
@click.option("--port", default=8000, show_default=True, type=int, help="Bind port.")
def serve(host: str, port: int) -> None:
    """Run the HTTP API."""
    uvicorn.run(create_app(get_settings()), host=host, port=port)


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
