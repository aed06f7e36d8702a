"""Pagination and sorting models shared by the store, service and handlers."""

from __future__ import annotations

import math
from enum import StrEnum
from typing import Generic, TypeVar

from pydantic import BaseModel, Field, computed_field, field_validator

T = TypeVar("T")

# Columns a listing may be ordered by, keyed by every accepted spelling.
SORT_FIELDS: dict[str, str] = {
    "id": "id",
    "name": "name",
    "description": "description",
    "price": "price",
    "stock": "stock",
    "active": "active",
    "created_at": "created_at",
    "createdAt": "created_at",
    "updated_at": "updated_at",
    "updatedAt": "updated_at",
}


class SortDirection(StrEnum):
    """Sort direction of a listing."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: str) -> SortDirection:
        """Parse a direction case-insensitively."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown sort direction: {value!r}") from None


class Pageable(BaseModel):
    """Which slice of an ordered collection to fetch."""

    model_config = {"frozen": True}

    page: int = Field(default=0, ge=0, description="Zero-based page index")
    size: int = Field(default=10, gt=0, description="Maximum items per page")
    sort_field: str = Field(default="name", description="Column to order by")
    direction: SortDirection = Field(default=SortDirection.ASC)

    @field_validator("sort_field")
    @classmethod
    def _normalize_sort_field(cls, value: str) -> str:
        try:
            return SORT_FIELDS[value]
        except KeyError:
            raise ValueError(f"Unknown sort field: {value!r}") from None

    @field_validator("direction", mode="before")
    @classmethod
    def _parse_direction(cls, value: object) -> object:
        if isinstance(value, str) and not isinstance(value, SortDirection):
            return SortDirection.parse(value)
        return value

    @property
    def offset(self) -> int:
        return self.page * self.size


class Page(BaseModel, Generic[T]):
    """A bounded slice of a larger ordered collection plus total-count metadata."""

    items: list[T] = Field(default_factory=list)
    total_elements: int = Field(ge=0)
    page: int = Field(ge=0)
    size: int = Field(gt=0)

    @classmethod
    def of(cls, items: list[T], total_elements: int, pageable: Pageable) -> Page[T]:
        return cls(
            items=items,
            total_elements=total_elements,
            page=pageable.page,
            size=pageable.size,
        )

    @computed_field
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size)

    @computed_field
    @property
    def number_of_elements(self) -> int:
        return len(self.items)

    @property
    def is_first(self) -> bool:
        return self.page == 0

    @property
    def is_last(self) -> bool:
        return self.page + 1 >= self.total_pages

    @property
    def has_next(self) -> bool:
        return not self.is_last

    @property
    def has_previous(self) -> bool:
        return self.page > 0
