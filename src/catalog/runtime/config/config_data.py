"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, computed_field, field_validator, model_validator

from src.catalog.core.models.pagination import SORT_FIELDS


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    name: str = Field(default="Product Catalog", description="Application title")
    host: str = Field(default="localhost", description="Application host")
    port: int = Field(default=8000, description="Application port")
    flash_cookie_name: str = Field(
        default="catalog_flash", description="Cookie carrying one-time notices"
    )


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log format")
    file: str | None = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./catalog.db",
        description="Database connection URL",
    )
    echo: bool = Field(default=False, description="Echo SQL statements")
    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")

    @computed_field
    @property
    def is_sqlite(self) -> bool:
        """Whether the URL points at a SQLite database."""
        return self.url.startswith("sqlite")

    @computed_field
    @property
    def is_in_memory(self) -> bool:
        """Whether the URL points at an in-memory SQLite database."""
        return self.is_sqlite and (
            self.url in ("sqlite://", "sqlite:///") or ":memory:" in self.url
        )


class CatalogConfig(BaseModel):
    """Product listing and bootstrap configuration."""

    default_page_size: int = Field(default=10, ge=1, description="Default page size")
    max_page_size: int = Field(default=100, ge=1, description="Largest page size served")
    default_sort: str = Field(default="name", description="Default sort field")
    seed_on_startup: bool = Field(
        default=True, description="Insert sample products when the store is empty"
    )

    @field_validator("default_sort")
    @classmethod
    def _check_default_sort(cls, value: str) -> str:
        if value not in SORT_FIELDS:
            raise ValueError(
                f"default_sort must be one of: {', '.join(sorted(SORT_FIELDS))}"
            )
        return value

    @model_validator(mode="after")
    def _check_page_sizes(self) -> CatalogConfig:
        if self.default_page_size > self.max_page_size:
            raise ValueError("default_page_size cannot exceed max_page_size")
        return self


class ConfigData(BaseModel):
    """Root configuration model."""

    app: AppConfig = Field(default_factory=AppConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
