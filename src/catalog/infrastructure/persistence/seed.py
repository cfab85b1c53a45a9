"""Sample catalog loaded into an empty store at startup."""

from __future__ import annotations

from decimal import Decimal

from loguru import logger

from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

SAMPLE_PRODUCTS: list[tuple[str, str, str, int]] = [
    ("Laptop", "High-performance laptop for developers", "1299.99", 15),
    ("Wireless Mouse", "Ergonomic wireless mouse", "29.99", 50),
    ("Mechanical Keyboard", "RGB mechanical keyboard with blue switches", "89.99", 30),
    ("27-inch Monitor", "4K UHD monitor with HDR support", "449.99", 20),
    ("USB-C Hub", "7-in-1 USB-C hub with HDMI and Ethernet", "49.99", 100),
    ("Webcam", "1080p HD webcam with auto-focus", "79.99", 45),
    ("Noise-Cancelling Headphones", "Premium wireless headphones with active noise cancellation", "299.99", 25),
    ("External SSD", "1TB portable SSD with USB 3.2", "129.99", 60),
    ("Gaming Chair", "Ergonomic gaming chair with lumbar support", "349.99", 12),
    ("Standing Desk", "Electric height-adjustable standing desk", "599.99", 8),
]


def seed_products(product_repo: ProductRepository) -> int:
    """Insert the sample catalog if the store is empty.

    Returns the number of products written.
    """
    if product_repo.list_all():
        logger.info("Product store already populated, skipping sample data")
        return 0

    for name, description, price, stock in SAMPLE_PRODUCTS:
        product_repo.create(
            Product(name=name, description=description, price=Decimal(price), stock=stock)
        )

    logger.info("Seeded {} sample products", len(SAMPLE_PRODUCTS))
    return len(SAMPLE_PRODUCTS)
