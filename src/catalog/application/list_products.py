"""Application service: List Products use case (query)."""

from __future__ import annotations

from loguru import logger

from catalog.application.dto import ProductView
from catalog.application.mapper import to_view
from catalog.application.results import Success
from catalog.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> Success[list[ProductView]]:
        logger.info("Getting all products")
        return Success([to_view(p) for p in self._product_repo.list_all()])
