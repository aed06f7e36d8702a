from datetime import datetime

from pydantic import BaseModel
from pydantic import Field as PydanticField
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


class Entity(BaseModel):
    """Base entity class with a store-assigned identifier and timestamps.

    ``id``, ``created_at`` and ``updated_at`` stay ``None`` until the entity
    is first persisted; the store fills them in.
    """

    id: int | None = PydanticField(
        default=None, description="Unique identifier, assigned on first save"
    )
    created_at: datetime | None = PydanticField(default=None)
    updated_at: datetime | None = PydanticField(default=None)


class EntityTable(SQLModel, table=False):
    """Base table with an autoincrement primary key and lifecycle timestamps."""

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Unique identifier for the row",
    )
    # Naive UTC columns; the store stamps them from its clock
    created_at: datetime | None = Field(
        default=None, nullable=False, sa_type=DateTime(timezone=False)
    )
    updated_at: datetime | None = Field(
        default=None, nullable=False, sa_type=DateTime(timezone=False)
    )

    def mark_created(self, now: datetime) -> None:
        """Stamp a row that is about to be inserted."""
        self.created_at = now
        self.updated_at = now

    def mark_updated(self, now: datetime) -> None:
        """Stamp a row that is about to be rewritten; ``created_at`` is kept."""
        if self.updated_at is not None and now < self.updated_at:
            now = self.updated_at
        self.updated_at = now
