"""Product entity.

Products have a simple lifecycle: created, edited in place, removed.
Identity and timestamps belong to the store; a Product without an id is a
draft that has not been persisted yet.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from catalog.domain.exceptions import ValidationError


@dataclass
class Product:
    """A product in the catalog.

    Kept as a mutable dataclass: the stores stamp ``id``, ``created_at``
    and ``updated_at`` onto it. The numeric invariants are checked on
    construction so an invalid product can never be built, even by code
    that bypasses the validation layer.
    """

    name: str
    price: Decimal
    stock: int
    description: str | None = None
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.price <= 0:
            raise ValidationError("Product price must be greater than zero")
        if self.stock < 0:
            raise ValidationError("Product stock cannot be negative")

    @property
    def is_draft(self) -> bool:
        return self.id is None
