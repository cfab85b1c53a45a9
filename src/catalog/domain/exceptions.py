"""Domain-level exceptions.

Expected outcomes (a missing product, a rejected payload) are returned as
result values by the application layer. Exceptions are reserved for broken
invariants and for infrastructure failures, and share DomainException as
a base so the CLI layer can catch them uniformly.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A product invariant was violated."""


class StoreUnavailableError(DomainException):
    """The durable store could not complete an operation."""

    def __init__(self, operation: str, product_id: int | None = None) -> None:
        self.operation = operation
        self.product_id = product_id
        target = f" for product {product_id}" if product_id is not None else ""
        super().__init__(f"Product store failed during '{operation}'{target}")
