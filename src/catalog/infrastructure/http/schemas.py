"""Wire models for the products API.

Input models accept every field as optional so that rule checking stays
in the application layer, which reports all failing fields together.
Only type errors (text where a number belongs) are caught here.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, field_serializer

from catalog.application.dto import CreateProductRequest, ProductView, UpdateProductRequest
from catalog.domain.model.value_objects import CENT, Maybe


class ProductOut(BaseModel):
    id: int
    name: str
    description: str | None = None
    price: Decimal
    stock: int

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        # Exact: validated prices have at most 15 significant digits.
        return float(price.quantize(CENT))

    @classmethod
    def from_view(cls, view: ProductView) -> ProductOut:
        return cls(
            id=view.id,
            name=view.name,
            description=view.description,
            price=view.price,
            stock=view.stock,
        )


class ProductCreateIn(BaseModel):
    name: str | None = None
    description: str | None = None
    price: Decimal | None = None
    stock: int | None = None

    def to_request(self) -> CreateProductRequest:
        return CreateProductRequest(
            name=self.name,
            description=self.description,
            price=self.price,
            stock=self.stock,
        )


class ProductUpdateIn(BaseModel):
    """Partial update. Omitted keys and explicit nulls both mean "unchanged"."""

    name: str | None = None
    description: str | None = None
    price: Decimal | None = None
    stock: int | None = None

    def to_request(self) -> UpdateProductRequest:
        return UpdateProductRequest(
            name=Maybe.from_optional(self.name),
            description=Maybe.from_optional(self.description),
            price=Maybe.from_optional(self.price),
            stock=Maybe.from_optional(self.stock),
        )
