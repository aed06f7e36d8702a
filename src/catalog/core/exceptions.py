"""Catalog domain exceptions.

Raised by the entity and store layers; the HTTP handlers catch them and turn
them into form re-renders or redirects with a flash notice.
"""

from __future__ import annotations

from dataclasses import dataclass


class CatalogError(Exception):
    """Base class for catalog errors."""


@dataclass(frozen=True)
class FieldError:
    """A single violated rule on a single field."""

    field: str
    message: str


class ValidationError(CatalogError):
    """A submission violated one or more field rules and was not persisted."""

    def __init__(self, errors: list[FieldError]) -> None:
        self.errors = list(errors)
        super().__init__(
            "; ".join(f"{error.field}: {error.message}" for error in self.errors)
        )

    def by_field(self) -> dict[str, list[str]]:
        """Group messages by field name, preserving rule order."""
        grouped: dict[str, list[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped


class NotFoundError(CatalogError):
    """An id-based lookup or update targeted a record that does not exist."""

    def __init__(self, entity: str, entity_id: object) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")
