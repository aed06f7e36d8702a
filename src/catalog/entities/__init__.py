"""Entities organized by business concept.

Each entity package holds its domain model (entity.py), persistence model
(table.py), field rules (validation.py) and data access (repository.py).
"""

from .product import Product, ProductRepository, ProductTable

__all__ = ["Product", "ProductRepository", "ProductTable"]
