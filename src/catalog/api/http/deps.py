"""FastAPI dependency implementations."""

from __future__ import annotations

from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.core.services import DbSessionService
from src.catalog.core.services.product_service import ProductService
from src.catalog.runtime.config.config_data import CatalogConfig
from src.catalog.runtime.context import get_config

templates = Jinja2Templates(directory=Path(__file__).parent / "templates")


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    """Get the dependencies built at application startup."""
    return request.app.state.app_dependencies


def get_database_service(request: Request) -> DbSessionService:
    """Get the database session service instance."""
    return get_app_dependencies(request).database_service


def get_product_service(request: Request) -> ProductService:
    """Get the product service instance."""
    return get_app_dependencies(request).product_service


def get_catalog_config() -> CatalogConfig:
    """Get the listing configuration of the active context."""
    return get_config().catalog
