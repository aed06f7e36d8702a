"""Binding between the HTML product form and the Product entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from src.catalog.core.exceptions import FieldError
from src.catalog.entities.product import Product, validate_product

TRUE_VALUES = {"true", "on", "1", "yes"}
FALSE_VALUES = {"false", "off", "0", "no"}
# Ids outside a 64-bit integer primary key cannot exist
ID_MAX = 2**63 - 1


@dataclass
class ProductForm:
    """What the form template needs: raw values to echo back plus errors."""

    values: dict[str, str] = field(default_factory=dict)
    errors: list[FieldError] = field(default_factory=list)
    product: Product = field(default_factory=Product)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def is_update(self) -> bool:
        return self.product.id is not None

    def errors_for(self, field_name: str) -> list[str]:
        return [error.message for error in self.errors if error.field == field_name]

    @classmethod
    def empty(cls) -> ProductForm:
        return cls(values={"active": "true"}, product=Product(active=True))

    @classmethod
    def from_product(cls, product: Product) -> ProductForm:
        values = {
            "id": "" if product.id is None else str(product.id),
            "name": product.name,
            "description": product.description or "",
            "price": "" if product.price is None else str(product.price),
            "stock": "" if product.stock is None else str(product.stock),
            "active": "true" if product.active else "",
        }
        return cls(values=values, product=product)


def _parse_id(raw: str, errors: list[FieldError]) -> int | None:
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        value = None
    if value is None or abs(value) > ID_MAX:
        errors.append(FieldError("id", "Invalid product id"))
        return None
    return value


def _parse_price(raw: str, errors: list[FieldError]) -> Decimal | None:
    if not raw:
        return None
    try:
        value = Decimal(raw)
    except InvalidOperation:
        value = None
    if value is None or not value.is_finite():
        errors.append(FieldError("price", "Product price must be a number"))
        return None
    return value


def _parse_stock(raw: str, errors: list[FieldError]) -> int | None:
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        errors.append(FieldError("stock", "Product stock must be a whole number"))
        return None


def _parse_active(raw: str | None, marker: str | None, errors: list[FieldError]) -> bool | None:
    # An unchecked checkbox is not submitted; the hidden marker tells it apart
    # from a form that never had the field.
    if raw is None:
        return False if marker is not None else None
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    errors.append(FieldError("active", "Product status must be true or false"))
    return None


def bind_product_form(
    *,
    id: str | None = None,
    name: str | None = None,
    description: str | None = None,
    price: str | None = None,
    stock: str | None = None,
    active: str | None = None,
    active_marker: str | None = None,
) -> ProductForm:
    """Bind submitted strings to a Product and run every field rule.

    Unparseable values are reported once, as a conversion error, and are not
    reported again by the field rules.
    """
    values = {
        "id": (id or "").strip(),
        "name": name or "",
        "description": description or "",
        "price": (price or "").strip(),
        "stock": (stock or "").strip(),
        "active": (active or "").strip(),
    }

    conversion_errors: list[FieldError] = []
    product = Product(
        id=_parse_id(values["id"], conversion_errors),
        name=values["name"],
        description=values["description"] or None,
        price=_parse_price(values["price"], conversion_errors),
        stock=_parse_stock(values["stock"], conversion_errors),
        active=_parse_active(active, active_marker, conversion_errors),
    )
    if product.active is not None:
        values["active"] = "true" if product.active else ""

    unconvertible = {error.field for error in conversion_errors}
    rule_errors = [
        error for error in validate_product(product) if error.field not in unconvertible
    ]
    return ProductForm(
        values=values,
        errors=conversion_errors + rule_errors,
        product=product,
    )
