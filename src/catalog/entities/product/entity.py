"""Entity: Product."""

from decimal import Decimal
from typing import Any

from pydantic import Field

from src.catalog.entities._base import Entity


class Product(Entity):
    """Product entity representing an item in the catalog.

    Fields are deliberately permissive so that a rejected form submission can
    still be bound and shown back to the user; ``validate_product`` decides
    whether an instance may be persisted.
    """

    name: str = Field(default="", description="Product name")
    description: str | None = Field(default=None, description="Free-form description")
    price: Decimal | None = Field(default=None, description="Unit price")
    stock: int | None = Field(default=None, description="Units in stock")
    active: bool | None = Field(default=None, description="Whether the product is on sale")

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes, ignoring timestamps."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.description == other.description
            and self.price == other.price
            and self.stock == other.stock
            and self.active == other.active
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.name,
            self.description,
            self.price,
            self.stock,
            self.active,
        ))
