"""Application service: Show Product use case (query)."""

from __future__ import annotations

from loguru import logger

from catalog.application.dto import ProductView
from catalog.application.mapper import to_view
from catalog.application.results import NotFound, Success
from catalog.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> Success[ProductView] | NotFound:
        logger.info("Getting product with ID: {}", product_id)
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            return NotFound(product_id)
        return Success(to_view(product))
