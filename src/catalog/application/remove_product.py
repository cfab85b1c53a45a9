"""Application service: Remove Product use case."""

from __future__ import annotations

from loguru import logger

from catalog.application.results import NotFound, Success
from catalog.domain.repository.product_repository import ProductRepository


class RemoveProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> Success[None] | NotFound:
        logger.info("Deleting product with ID: {}", product_id)
        if not self._product_repo.delete(product_id):
            logger.warning("Product with ID: {} not found for deletion", product_id)
            return NotFound(product_id)

        logger.info("Product deleted with ID: {}", product_id)
        return Success(None)
