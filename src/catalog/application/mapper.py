"""Conversions between the Product entity and its DTOs."""

from __future__ import annotations

from dataclasses import replace

from catalog.application.dto import CreateProductRequest, ProductView, UpdateProductRequest
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import to_price


def to_view(product: Product) -> ProductView:
    return ProductView(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price,
        stock=product.stock,
    )


def to_entity(request: CreateProductRequest) -> Product:
    """Build a draft from an already validated request.

    Identity and timestamps stay unset; the store assigns them.
    """
    return Product(
        name=request.name,
        description=request.description,
        price=to_price(request.price),
        stock=request.stock,
    )


def merge_update(existing: Product, patch: UpdateProductRequest) -> Product:
    """Apply a patch on top of an existing product.

    Returns a new entity; ``existing`` is not modified. Only fields that
    are present in the patch change.
    """
    price = to_price(patch.price.value) if patch.price.present else existing.price
    return replace(
        existing,
        name=patch.name.or_else(existing.name),
        description=patch.description.or_else(existing.description),
        price=price,
        stock=patch.stock.or_else(existing.stock),
    )
