from __future__ import annotations

from collections.abc import Generator

import pytest

from src.catalog.core.services import DbManageService, DbSessionService
from src.catalog.runtime.config.config_data import ConfigData, DatabaseConfig
from src.catalog.runtime.context import with_context
from tests.utils import TickingClock


@pytest.fixture
def memory_config() -> ConfigData:
    """Partial override pointing the database at an in-memory SQLite."""
    return ConfigData(database=DatabaseConfig(url="sqlite://"))


@pytest.fixture
def database_service(memory_config: ConfigData) -> Generator[DbSessionService]:
    """In-memory database with the schema created, fresh for each test."""
    with with_context(memory_config):
        service = DbSessionService(memory_config.database)
        DbManageService(service).create_all()
        try:
            yield service
        finally:
            service.dispose()


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()
