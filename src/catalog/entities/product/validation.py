"""Field rules checked before a product is created or updated."""

from decimal import Decimal

from src.catalog.core.exceptions import FieldError, ValidationError
from src.catalog.entities.product.entity import Product

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
PRICE_INTEGER_DIGITS = 10
PRICE_FRACTION_DIGITS = 2
# Largest value the stock column holds as a 32-bit integer
STOCK_MAX = 2_147_483_647


def price_digits(value: Decimal) -> tuple[int, int]:
    """Return ``(integer_digits, fraction_digits)`` of a finite decimal.

    Trailing zeros do not count, so ``Decimal("1.000")`` has one integer
    digit and no fraction digits while ``Decimal("3.501")`` has three
    fraction digits.
    """
    _, digits, exponent = value.normalize().as_tuple()
    fraction = max(0, -exponent)
    integer = max(0, len(digits) + exponent)
    return integer, fraction


def validate_product(product: Product) -> list[FieldError]:
    """Check every field rule and return the violations in field order."""
    errors: list[FieldError] = []

    if not product.name or not product.name.strip():
        errors.append(FieldError("name", "Product name is required"))
    if product.name and len(product.name) > NAME_MAX_LENGTH:
        errors.append(
            FieldError(
                "name",
                f"Product name must be at most {NAME_MAX_LENGTH} characters",
            )
        )

    if product.description is not None and len(product.description) > DESCRIPTION_MAX_LENGTH:
        errors.append(
            FieldError(
                "description",
                f"Product description must be at most {DESCRIPTION_MAX_LENGTH} characters",
            )
        )

    price = product.price
    if price is None:
        errors.append(FieldError("price", "Product price is required"))
    else:
        if price <= 0:
            errors.append(FieldError("price", "Product price must be greater than zero"))
        integer, fraction = price_digits(price)
        if integer > PRICE_INTEGER_DIGITS or fraction > PRICE_FRACTION_DIGITS:
            errors.append(
                FieldError(
                    "price",
                    f"Product price must have at most {PRICE_INTEGER_DIGITS} integer "
                    f"digits and {PRICE_FRACTION_DIGITS} decimals",
                )
            )

    if product.stock is None:
        errors.append(FieldError("stock", "Product stock is required"))
    elif product.stock < 0:
        errors.append(FieldError("stock", "Product stock cannot be negative"))
    elif product.stock > STOCK_MAX:
        errors.append(FieldError("stock", f"Product stock must be at most {STOCK_MAX}"))

    if product.active is None:
        errors.append(FieldError("active", "Product status is required"))

    return errors


def ensure_valid(product: Product) -> Product:
    """Raise ``ValidationError`` unless the product passes every rule."""
    errors = validate_product(product)
    if errors:
        raise ValidationError(errors)
    return product
