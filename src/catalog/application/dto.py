"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI adapters and the application layer
without exposing the entity (and its bookkeeping timestamps) to the
outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from catalog.domain.model.value_objects import Maybe


@dataclass(frozen=True)
class CreateProductRequest:
    """Input: a new product.

    Required fields may still arrive as None from a sloppy client; the
    validation layer reports them together with every other failure.
    """

    name: str | None
    price: Decimal | None
    stock: int | None
    description: str | None = None


@dataclass(frozen=True)
class UpdateProductRequest:
    """Input: a partial update. Absent fields are left untouched."""

    name: Maybe[str] = field(default_factory=Maybe.absent)
    description: Maybe[str] = field(default_factory=Maybe.absent)
    price: Maybe[Decimal] = field(default_factory=Maybe.absent)
    stock: Maybe[int] = field(default_factory=Maybe.absent)


@dataclass(frozen=True)
class ProductView:
    """Output: a product as shown to clients."""

    id: int
    name: str
    description: str | None
    price: Decimal
    stock: int
