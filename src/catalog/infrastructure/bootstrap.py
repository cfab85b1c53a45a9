"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from loguru import logger

from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.config import Settings
from catalog.infrastructure.database import build_engine, init_db
from catalog.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from catalog.infrastructure.persistence.seed import seed_products
from catalog.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)


def product_repository(settings: Settings) -> ProductRepository:
    """Build the product store selected by ``settings.store_backend``.

    The SQL backend gets its schema created on the way; either backend is
    filled with the sample catalog when seeding is enabled.
    """
    if settings.store_backend == "sql":
        engine = build_engine(settings.database_url)
        init_db(engine)
        repo: ProductRepository = SqlProductRepository(engine)
    else:
        repo = InMemoryProductRepository()

    logger.info("Using '{}' product store", settings.store_backend)
    if settings.seed_sample_data:
        seed_products(repo)
    return repo
