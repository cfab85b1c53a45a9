"""Application service: Update Product use case."""

from __future__ import annotations

from loguru import logger

from catalog.application.dto import ProductView, UpdateProductRequest
from catalog.application.mapper import merge_update, to_view
from catalog.application.results import NotFound, Success, ValidationFailed
from catalog.application.validation import validate_update
from catalog.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self, product_id: int, request: UpdateProductRequest
    ) -> Success[ProductView] | NotFound | ValidationFailed:
        """Apply a partial update to a product.

        The payload is validated before the product is looked up, so a bad
        payload is reported as such even when the id does not exist.

        Lookup, merge and write are separate store calls, so two concurrent
        patches of the same product can each overwrite the other's fields
        (last write wins).
        """
        logger.info("Updating product with ID: {}", product_id)

        errors = validate_update(request)
        if errors:
            logger.info("Rejected update of product {}, invalid fields: {}", product_id, sorted(errors))
            return ValidationFailed(errors)

        existing = self._product_repo.get_by_id(product_id)
        if existing is None:
            logger.warning("Product with ID: {} not found", product_id)
            return NotFound(product_id)

        updated = self._product_repo.update(product_id, merge_update(existing, request))
        if updated is None:
            # Removed by another request between the lookup and the write.
            logger.warning("Product with ID: {} disappeared before update", product_id)
            return NotFound(product_id)

        logger.info("Product updated with ID: {}", product_id)
        return Success(to_view(updated))
