"""Unit tests for the configuration context."""

from src.catalog.runtime.config.config_data import (
    CatalogConfig,
    ConfigData,
    DatabaseConfig,
)
from src.catalog.runtime.context import AppContext, get_config, get_context, with_context


class TestContextManager:
    """Test the context manager functionality."""

    def test_default_context_available(self):
        """Should have a default context available."""
        context = get_context()
        config = get_config()

        assert isinstance(context, AppContext)
        assert isinstance(config, ConfigData)
        assert context.config is config

    def test_with_context_partial_override(self):
        """Should replace only the fields set on the override."""
        original = get_config()

        with with_context(ConfigData(database=DatabaseConfig(url="sqlite://"))):
            overridden = get_config()
            assert overridden.database.url == "sqlite://"
            assert overridden.database.pool_size == original.database.pool_size
            assert overridden.catalog == original.catalog
            assert overridden is not original

        assert get_config() is original

    def test_nested_overrides(self):
        """Should stack overrides and unwind them in order."""
        original = get_config()

        with with_context(ConfigData(catalog=CatalogConfig(default_page_size=5))):
            with with_context(ConfigData(database=DatabaseConfig(url="sqlite://"))):
                inner = get_config()
                assert inner.catalog.default_page_size == 5
                assert inner.database.url == "sqlite://"
            assert get_config().catalog.default_page_size == 5
            assert get_config().database.url == original.database.url

        assert get_config() is original

    def test_none_override_is_noop(self):
        original = get_config()
        with with_context(None):
            assert get_config() is original
