"""Application service: Add Product use case."""

from __future__ import annotations

from loguru import logger

from catalog.application.dto import CreateProductRequest, ProductView
from catalog.application.mapper import to_entity, to_view
from catalog.application.results import Success, ValidationFailed
from catalog.application.validation import validate_create
from catalog.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, request: CreateProductRequest) -> Success[ProductView] | ValidationFailed:
        """Add a new product to the catalog.

        Nothing is written when the request fails validation.
        """
        logger.info("Creating new product: {}", request.name)

        errors = validate_create(request)
        if errors:
            logger.info("Rejected new product, invalid fields: {}", sorted(errors))
            return ValidationFailed(errors)

        created = self._product_repo.create(to_entity(request))
        logger.info("Product created with ID: {}", created.id)
        return Success(to_view(created))
