"""Product repository for data access operations."""

from collections.abc import Callable
from datetime import UTC, datetime

from loguru import logger
from sqlalchemy import ColumnElement, func
from sqlmodel import Session, col, select

from src.catalog.core.exceptions import NotFoundError
from src.catalog.core.models.pagination import Page, Pageable, SortDirection
from src.catalog.core.services.database.db_session import DbSessionService
from src.catalog.entities.product.entity import Product
from src.catalog.entities.product.table import ProductTable
from src.catalog.entities.product.validation import ensure_valid


def utcnow() -> datetime:
    """Naive UTC timestamp, the form SQLite hands back."""
    return datetime.now(UTC).replace(tzinfo=None)


class ProductRepository:
    """Repository for Product entity data access operations.

    One instance lives for the whole process; every call opens its own
    session scope on the shared engine.
    """

    def __init__(
        self,
        database_service: DbSessionService,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._db = database_service
        self._clock = clock

    def save(self, product: Product) -> Product:
        """Insert a new product or update the existing row with the same id."""
        ensure_valid(product)
        with self._db.session_scope() as session:
            if product.id is None:
                row = ProductTable(
                    **product.model_dump(exclude={"id", "created_at", "updated_at"})
                )
                row.mark_created(self._clock())
                session.add(row)
                session.flush()
                logger.info("Inserted product {} ({})", row.id, row.name)
            else:
                row = session.get(ProductTable, product.id)
                if row is None:
                    raise NotFoundError("Product", product.id)
                for key, value in product.model_dump(
                    exclude={"id", "created_at", "updated_at"}
                ).items():
                    setattr(row, key, value)
                row.mark_updated(self._clock())
                session.add(row)
                session.flush()
                logger.info("Updated product {} ({})", row.id, row.name)

            session.refresh(row)
            return Product.model_validate(row, from_attributes=True)

    def find_by_id(self, product_id: int) -> Product | None:
        """Get a product by id, or ``None`` when absent."""
        with self._db.session_scope() as session:
            row = session.get(ProductTable, product_id)
            if row is None:
                return None
            return Product.model_validate(row, from_attributes=True)

    def delete_by_id(self, product_id: int) -> None:
        """Delete a product by id; absent ids are ignored."""
        with self._db.session_scope() as session:
            row = session.get(ProductTable, product_id)
            if row is None:
                logger.debug("Delete of missing product {} ignored", product_id)
                return
            session.delete(row)
            logger.info("Deleted product {}", product_id)

    def count(self) -> int:
        """Total number of stored products."""
        with self._db.session_scope() as session:
            return session.exec(select(func.count()).select_from(ProductTable)).one()

    def find_all(self, pageable: Pageable) -> Page[Product]:
        """Get one page of all products."""
        with self._db.session_scope() as session:
            return self._page(session, None, pageable)

    def search(self, term: str, pageable: Pageable) -> Page[Product]:
        """Get one page of products whose name contains ``term``, ignoring case."""
        condition = func.lower(col(ProductTable.name)).contains(
            term.lower(), autoescape=True
        )
        with self._db.session_scope() as session:
            return self._page(session, condition, pageable)

    def list_all(self) -> list[Product]:
        """Every product ordered by name."""
        with self._db.session_scope() as session:
            statement = select(ProductTable).order_by(
                col(ProductTable.name), col(ProductTable.id)
            )
            return [
                Product.model_validate(row, from_attributes=True)
                for row in session.exec(statement).all()
            ]

    def _page(
        self,
        session: Session,
        condition: ColumnElement[bool] | None,
        pageable: Pageable,
    ) -> Page[Product]:
        count_statement = select(func.count()).select_from(ProductTable)
        statement = select(ProductTable)
        if condition is not None:
            count_statement = count_statement.where(condition)
            statement = statement.where(condition)

        total = session.exec(count_statement).one()

        column = col(getattr(ProductTable, pageable.sort_field))
        ordering = column.desc() if pageable.direction is SortDirection.DESC else column.asc()
        statement = (
            statement.order_by(ordering, col(ProductTable.id).asc())
            .offset(pageable.offset)
            .limit(pageable.size)
        )
        items = [
            Product.model_validate(row, from_attributes=True)
            for row in session.exec(statement).all()
        ]
        return Page[Product].of(items, total, pageable)
