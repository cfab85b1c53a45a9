"""Database table for products.

Separate from the Product entity so the domain stays free of ORM
concerns; the SQL repository converts between the two.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import Column, DateTime, Numeric
from sqlmodel import Field, SQLModel


class ProductTable(SQLModel, table=True):
    __tablename__ = "products"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, nullable=False)
    description: str | None = Field(default=None, max_length=500)
    price: Decimal = Field(sa_column=Column(Numeric(18, 2), nullable=False))
    stock: int = Field(nullable=False)
    created_at: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime | None = Field(
        default=None, sa_column=Column(DateTime(timezone=True), nullable=True)
    )
