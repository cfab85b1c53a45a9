"""CLI commands for the Product catalog."""

from __future__ import annotations

from decimal import Decimal

import click

from catalog.application.add_product import AddProductHandler
from catalog.application.dto import CreateProductRequest, UpdateProductRequest
from catalog.application.list_products import ListProductsHandler
from catalog.application.remove_product import RemoveProductHandler
from catalog.application.results import NotFound, ValidationFailed
from catalog.application.show_product import ShowProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.model.value_objects import Maybe
from catalog.infrastructure.bootstrap import product_repository
from catalog.infrastructure.config import get_settings


def _repo():
    settings = get_settings()
    if settings.store_backend == "memory":
        click.echo(
            "Warning: STORE_BACKEND=memory keeps products only for this command; "
            "set STORE_BACKEND=sql to persist them.",
            err=True,
        )
    return product_repository(settings)


def _fail(result: NotFound | ValidationFailed) -> click.ClickException:
    if isinstance(result, NotFound):
        return click.ClickException(f"Product with ID '{result.product_id}' not found")
    lines = [f"{field}: {msg}" for field, msgs in result.errors.items() for msg in msgs]
    return click.ClickException("Invalid product:\n  " + "\n  ".join(lines))


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = ListProductsHandler(_repo()).handle().value

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<30} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 56)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<30} {'$' + str(p.price):>10} {p.stock:>7}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_show(product_id: int) -> None:
    """Show a single product."""
    result = ShowProductHandler(_repo()).handle(product_id)
    if isinstance(result, NotFound):
        raise _fail(result)

    p = result.value
    click.echo(f"Product #{p.id}: {p.name}")
    click.echo(f"  Description: {p.description or '-'}")
    click.echo(f"  Price:       ${p.price}")
    click.echo(f"  Stock:       {p.stock}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, type=Decimal, help="Price (e.g. 15.00).")
@click.option("--stock", required=True, type=int, help="Units in stock.")
@click.option("--description", default=None, help="Optional description.")
def product_add(name: str, price: Decimal, stock: int, description: str | None) -> None:
    """Add a new product to the catalog."""
    request = CreateProductRequest(name=name, description=description, price=price, stock=stock)
    result = AddProductHandler(_repo()).handle(request)
    if isinstance(result, ValidationFailed):
        raise _fail(result)

    click.echo(f"Product #{result.value.id} '{result.value.name}' added at ${result.value.price}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.option("--price", default=None, type=Decimal, help="New price (e.g. 29.99).")
@click.option("--stock", default=None, type=int, help="New stock level.")
def product_update(
    product_id: int,
    name: str | None,
    description: str | None,
    price: Decimal | None,
    stock: int | None,
) -> None:
    """Update a product. Options left out keep their current value."""
    request = UpdateProductRequest(
        name=Maybe.from_optional(name),
        description=Maybe.from_optional(description),
        price=Maybe.from_optional(price),
        stock=Maybe.from_optional(stock),
    )
    result = UpdateProductHandler(_repo()).handle(product_id, request)
    if isinstance(result, (NotFound, ValidationFailed)):
        raise _fail(result)

    click.echo(f"Product #{product_id} updated")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_delete(product_id: int) -> None:
    """Remove a product from the catalog."""
    result = RemoveProductHandler(_repo()).handle(product_id)
    if isinstance(result, NotFound):
        raise _fail(result)

    click.echo(f"Product #{product_id} deleted")
