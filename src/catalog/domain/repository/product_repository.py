"""Abstract repository for the Product entity.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (in-memory, SQL) live in the
infrastructure layer and are chosen once, in the composition root.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def create(self, draft: Product) -> Product:
        """Persist a draft, assigning its id and creation time."""

    @abstractmethod
    def update(self, product_id: int, product: Product) -> Product | None:
        """Overwrite the mutable fields of a stored product.

        The product passed in is already merged; the store only copies its
        fields and stamps ``updated_at``. Returns None if the id is unknown.
        """

    @abstractmethod
    def delete(self, product_id: int) -> bool:
        """Remove a product. Returns False if there was nothing to remove."""
