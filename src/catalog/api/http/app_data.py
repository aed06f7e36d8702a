from dataclasses import dataclass

from src.catalog.core.services import DbSessionService
from src.catalog.core.services.product_service import ProductService
from src.catalog.entities.product import ProductRepository


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    product_repository: ProductRepository
    product_service: ProductService

    @classmethod
    def build(cls, database_service: DbSessionService) -> "ApplicationDependencies":
        """Wire the single long-lived repository and service onto one engine."""
        repository = ProductRepository(database_service)
        return cls(
            database_service=database_service,
            product_repository=repository,
            product_service=ProductService(repository),
        )
