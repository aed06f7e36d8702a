"""Product database table model."""

from decimal import Decimal

from sqlmodel import Field

from src.catalog.entities._base import EntityTable


class ProductTable(EntityTable, table=True):
    """Database persistence model for products.

    Column limits mirror the validation rules so that the schema rejects
    anything that bypasses ``validate_product``.
    """

    __tablename__ = "products"

    name: str = Field(max_length=100, index=True)
    description: str | None = Field(default=None, max_length=500)
    price: Decimal = Field(max_digits=12, decimal_places=2)
    stock: int = Field(ge=0)
    active: bool = Field(default=True)
