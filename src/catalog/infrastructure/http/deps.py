"""FastAPI dependency implementations."""

from __future__ import annotations

from fastapi import Request

from catalog.domain.repository.product_repository import ProductRepository


def get_product_repo(request: Request) -> ProductRepository:
    """Get the product store built by the composition root."""
    return request.app.state.product_repo
