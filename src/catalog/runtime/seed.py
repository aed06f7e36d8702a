"""Sample products inserted into an empty catalog."""

from decimal import Decimal

from loguru import logger

from src.catalog.entities.product import Product, ProductRepository


def sample_products() -> list[Product]:
    return [
        Product(
            name="Caneta Azul",
            description="Clássica",
            price=Decimal("3.50"),
            stock=100,
            active=True,
        ),
        Product(name="Caderno 100fl", price=Decimal("15.90"), stock=50, active=True),
        Product(name="Mochila", price=Decimal("120.00"), stock=10, active=True),
    ]


def seed_products(repository: ProductRepository) -> int:
    """Insert the sample products when the store is empty.

    Returns the number of products inserted.
    """
    if repository.count() > 0:
        logger.debug("Catalog already populated; skipping seed")
        return 0

    products = sample_products()
    for product in products:
        repository.save(product)
    logger.info("Seeded catalog with {} sample products", len(products))
    return len(products)
