"""Database initialization script."""

from src.catalog.core.services import DbManageService, DbSessionService
from src.catalog.entities.product import ProductRepository
from src.catalog.runtime.context import get_config
from src.catalog.runtime.seed import seed_products


def init_db(
    database_service: DbSessionService | None = None,
    *,
    seed: bool | None = None,
) -> int:
    """Create all database tables and seed sample products if configured.

    Returns the number of seeded products.
    """
    database_service = database_service or DbSessionService()
    DbManageService(database_service).create_all()

    if seed is None:
        seed = get_config().catalog.seed_on_startup
    if not seed:
        return 0
    return seed_products(ProductRepository(database_service))


if __name__ == "__main__":
    init_db()
