"""Relational implementation of ProductRepository (SQLModel/SQLAlchemy).

Every method runs in its own session and commits before returning, so
each call is a single implicit transaction. Driver and connection errors
are logged with the operation and id, then surfaced as
StoreUnavailableError; nothing is retried here.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from decimal import Decimal

from loguru import logger
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from catalog.domain.exceptions import StoreUnavailableError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import to_price
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.persistence.tables import ProductTable


class SqlProductRepository(ProductRepository):

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        logger.info("Retrieving all products from database")
        with self._session("list_all") as session:
            rows = session.exec(select(ProductTable).order_by(ProductTable.id)).all()
            return [_to_entity(row) for row in rows]

    def get_by_id(self, product_id: int) -> Product | None:
        logger.info("Retrieving product with ID: {} from database", product_id)
        with self._session("get_by_id", product_id) as session:
            row = session.get(ProductTable, product_id)
            return _to_entity(row) if row is not None else None

    def create(self, draft: Product) -> Product:
        logger.info("Creating product in database: {}", draft.name)
        with self._session("create") as session:
            row = ProductTable(
                name=draft.name,
                description=draft.description,
                price=draft.price,
                stock=draft.stock,
                created_at=datetime.now(timezone.utc),
                updated_at=None,
            )
            session.add(row)
            session.commit()
            session.refresh(row)
            created = _to_entity(row)

        logger.info("Product created with ID: {}", created.id)
        return created

    def update(self, product_id: int, product: Product) -> Product | None:
        logger.info("Updating product with ID: {} in database", product_id)
        with self._session("update", product_id) as session:
            row = session.get(ProductTable, product_id)
            if row is None:
                logger.warning("Product with ID: {} not found for update", product_id)
                return None

            row.name = product.name
            row.description = product.description
            row.price = product.price
            row.stock = product.stock
            row.updated_at = datetime.now(timezone.utc)
            session.add(row)
            session.commit()
            session.refresh(row)
            updated = _to_entity(row)

        logger.info("Product updated with ID: {}", product_id)
        return updated

    def delete(self, product_id: int) -> bool:
        logger.info("Deleting product with ID: {} from database", product_id)
        with self._session("delete", product_id) as session:
            row = session.get(ProductTable, product_id)
            if row is None:
                logger.warning("Product with ID: {} not found for deletion", product_id)
                return False

            session.delete(row)
            session.commit()

        logger.info("Product deleted with ID: {}", product_id)
        return True

    # --- Session helpers ------------------------------------------------------

    @contextmanager
    def _session(self, operation: str, product_id: int | None = None) -> Iterator[Session]:
        try:
            with Session(self._engine) as session:
                yield session
        except SQLAlchemyError as exc:
            logger.exception(
                "Database error during {} (product id: {})", operation, product_id
            )
            raise StoreUnavailableError(operation, product_id) from exc


def _to_entity(row: ProductTable) -> Product:
    return Product(
        id=row.id,
        name=row.name,
        description=row.description,
        price=to_price(Decimal(row.price)),
        stock=row.stock,
        created_at=_as_utc(row.created_at),
        updated_at=_as_utc(row.updated_at),
    )


def _as_utc(value: datetime | None) -> datetime | None:
    # SQLite hands timestamps back without tzinfo.
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
