"""In-process implementation of ProductRepository.

State lives in a dict for the lifetime of the process. All access goes
through one lock so concurrent requests cannot hand out the same id or
lose each other's writes.
"""

from __future__ import annotations

import threading
from dataclasses import replace
from datetime import datetime, timezone

from loguru import logger

from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self) -> None:
        self._store: dict[int, Product] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        logger.info("Retrieving all products")
        with self._lock:
            return [replace(p) for p in self._store.values()]

    def get_by_id(self, product_id: int) -> Product | None:
        logger.info("Retrieving product with ID: {}", product_id)
        with self._lock:
            product = self._store.get(product_id)
            return replace(product) if product is not None else None

    def create(self, draft: Product) -> Product:
        with self._lock:
            product = replace(
                draft,
                id=self._next_id,
                created_at=datetime.now(timezone.utc),
                updated_at=None,
            )
            self._store[product.id] = product
            self._next_id += 1

        logger.info("Created product with ID: {}", product.id)
        return replace(product)

    def update(self, product_id: int, product: Product) -> Product | None:
        with self._lock:
            existing = self._store.get(product_id)
            if existing is None:
                logger.warning("Product with ID: {} not found for update", product_id)
                return None

            existing.name = product.name
            existing.description = product.description
            existing.price = product.price
            existing.stock = product.stock
            existing.updated_at = datetime.now(timezone.utc)
            updated = replace(existing)

        logger.info("Updated product with ID: {}", product_id)
        return updated

    def delete(self, product_id: int) -> bool:
        with self._lock:
            removed = self._store.pop(product_id, None)

        if removed is None:
            logger.warning("Product with ID: {} not found for deletion", product_id)
            return False

        logger.info("Deleted product with ID: {}", product_id)
        return True
