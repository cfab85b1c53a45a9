"""Field rules for product payloads.

Each function returns a mapping of field name to messages; an empty
mapping means the payload passed. Every rule is evaluated so the caller
sees all problems at once.
"""

from __future__ import annotations

from decimal import Decimal

from catalog.application.dto import CreateProductRequest, UpdateProductRequest
from catalog.domain.model.value_objects import to_price

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
# 15 significant digits: fits the Numeric(18, 2) column and survives JSON numbers.
PRICE_MAX = Decimal("9999999999999.99")
# Matches a 32-bit INTEGER column.
STOCK_MAX = 2**31 - 1

Errors = dict[str, list[str]]


def validate_create(request: CreateProductRequest) -> Errors:
    errors: Errors = {}

    if request.name is None or not request.name.strip():
        _add(errors, "name", "Product name is required")
    elif len(request.name) > NAME_MAX_LENGTH:
        _add(errors, "name", f"Product name must not exceed {NAME_MAX_LENGTH} characters")

    if request.description is not None:
        _check_description(errors, request.description)

    if request.price is None:
        _add(errors, "price", "Price is required")
    else:
        _check_price(errors, request.price)

    if request.stock is None:
        _add(errors, "stock", "Stock is required")
    else:
        _check_stock(errors, request.stock)

    return errors


def validate_update(request: UpdateProductRequest) -> Errors:
    """Same bounds as creation, applied only to the fields being changed."""
    errors: Errors = {}

    if request.name.present:
        name = request.name.value
        if not name.strip():
            _add(errors, "name", "Product name must not be empty")
        elif len(name) > NAME_MAX_LENGTH:
            _add(errors, "name", f"Product name must not exceed {NAME_MAX_LENGTH} characters")

    if request.description.present:
        _check_description(errors, request.description.value)

    if request.price.present:
        _check_price(errors, request.price.value)

    if request.stock.present:
        _check_stock(errors, request.stock.value)

    return errors


# --- Shared rules -------------------------------------------------------------


def _check_description(errors: Errors, description: str) -> None:
    if len(description) > DESCRIPTION_MAX_LENGTH:
        _add(
            errors,
            "description",
            f"Description must not exceed {DESCRIPTION_MAX_LENGTH} characters",
        )


def _check_price(errors: Errors, price: Decimal) -> None:
    amount = Decimal(str(price))
    if not amount.is_finite():
        _add(errors, "price", "Price must be a finite number")
    elif amount > PRICE_MAX:
        _add(errors, "price", f"Price must not exceed {PRICE_MAX}")
    # Prices are stored in whole cents, so 0.004 counts as zero.
    elif amount <= 0 or to_price(amount) <= 0:
        _add(errors, "price", "Price must be greater than 0")


def _check_stock(errors: Errors, stock: int) -> None:
    if stock < 0:
        _add(errors, "stock", "Stock cannot be negative")
    elif stock > STOCK_MAX:
        _add(errors, "stock", f"Stock must not exceed {STOCK_MAX}")


def _add(errors: Errors, field: str, message: str) -> None:
    errors.setdefault(field, []).append(message)
