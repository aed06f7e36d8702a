"""Entity package: Product."""

from .entity import Product
from .repository import ProductRepository
from .table import ProductTable
from .validation import ensure_valid, validate_product

__all__ = [
    "Product",
    "ProductRepository",
    "ProductTable",
    "ensure_valid",
    "validate_product",
]
