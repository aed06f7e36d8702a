from datetime import datetime, timedelta
from decimal import Decimal

from src.catalog.entities.product import Product


class TickingClock:
    """Deterministic clock advancing a fixed step on every call."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)):
        self.now = start or datetime(2024, 1, 1, 12, 0, 0)
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        return current


def make_product(**overrides) -> Product:
    values = {
        "name": "Lápis",
        "description": None,
        "price": Decimal("1.00"),
        "stock": 5,
        "active": True,
    }
    values.update(overrides)
    return Product(**values)


def product_form(**overrides) -> dict[str, str]:
    """Url-encoded fields as the product form submits them."""
    data = {
        "id": "",
        "name": "Lápis",
        "description": "",
        "price": "1.00",
        "stock": "5",
        "active": "true",
        "_active": "on",
    }
    data.update(overrides)
    return {key: value for key, value in data.items() if value is not None}
