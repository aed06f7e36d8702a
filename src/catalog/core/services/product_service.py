"""Product query service."""

from loguru import logger

from src.catalog.core.models.pagination import Page, Pageable
from src.catalog.entities.product import Product, ProductRepository


class ProductService:
    """Business operations on products.

    Owns the single listing rule: an empty search term means no filter.
    Everything else passes straight through to the repository.
    """

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    def list_products(self, q: str | None, pageable: Pageable) -> Page[Product]:
        """List products, filtered by name when ``q`` holds a non-blank term."""
        term = q.strip() if q is not None else ""
        if not term:
            return self._repository.find_all(pageable)
        logger.debug("Searching products by name containing {!r}", term)
        return self._repository.search(term, pageable)

    def list_all(self) -> list[Product]:
        return self._repository.list_all()

    def save(self, product: Product) -> Product:
        return self._repository.save(product)

    def find_by_id(self, product_id: int) -> Product | None:
        return self._repository.find_by_id(product_id)

    def delete_by_id(self, product_id: int) -> None:
        self._repository.delete_by_id(product_id)
