"""Unit tests for templated YAML configuration loading."""

from pathlib import Path

import pytest

from src.catalog.runtime.config.config_data import CatalogConfig, ConfigData, DatabaseConfig
from src.catalog.runtime.config.config_template import (
    environment_lookup,
    load_templated_yaml,
    substitute_env_vars,
)
from src.catalog.runtime.config.settings import EnvironmentVariables


class TestSubstitution:
    """Test ${VAR} placeholder handling."""

    def test_plain_variable(self):
        assert substitute_env_vars("url: ${DB}", {"DB": "sqlite://"}) == "url: sqlite://"

    def test_default_used_when_missing(self):
        text = "url: ${DB:-sqlite:///./catalog.db}"
        assert substitute_env_vars(text, {}) == "url: sqlite:///./catalog.db"

    def test_default_ignored_when_set(self):
        assert substitute_env_vars("${LEVEL:-INFO}", {"LEVEL": "DEBUG"}) == "DEBUG"

    def test_required_variable_missing(self):
        with pytest.raises(ValueError, match="DB"):
            substitute_env_vars("${DB}", {})

    def test_required_with_message(self):
        with pytest.raises(ValueError, match="set the database"):
            substitute_env_vars("${DB:?set the database}", {})

    def test_environment_prefix_wins(self):
        env = environment_lookup(
            "production",
            {"DATABASE_URL": "sqlite://", "PRODUCTION_DATABASE_URL": "postgresql://db/catalog"},
        )
        assert env["DATABASE_URL"] == "postgresql://db/catalog"


class TestLoadTemplatedYaml:
    """Test building ConfigData from a YAML file."""

    def test_missing_file_gives_defaults(self, tmp_path: Path):
        config = load_templated_yaml(tmp_path / "absent.yaml", EnvironmentVariables())

        assert config.catalog.default_page_size == 10
        assert config.catalog.max_page_size == 100
        assert config.app.flash_cookie_name == "catalog_flash"

    def test_sections_parsed(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("CATALOG_TEST_PAGE_SIZE", "25")
        path = tmp_path / "config.yaml"
        path.write_text(
            "config:\n"
            "  app:\n"
            "    name: Test Catalog\n"
            "  catalog:\n"
            "    default_page_size: ${CATALOG_TEST_PAGE_SIZE:-10}\n"
            "    seed_on_startup: false\n",
            encoding="utf-8",
        )

        config = load_templated_yaml(path, EnvironmentVariables())

        assert config.app.name == "Test Catalog"
        assert config.catalog.default_page_size == 25
        assert config.catalog.seed_on_startup is False

    def test_environment_overrides(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("config:\n  database:\n    url: sqlite:///file.db\n", encoding="utf-8")
        env_vars = EnvironmentVariables(database_url="sqlite://", log_level="DEBUG")

        config = load_templated_yaml(path, env_vars)

        assert config.database.url == "sqlite://"
        assert config.logging.level == "DEBUG"

    def test_invalid_config_raises(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "config:\n  catalog:\n    default_page_size: 50\n    max_page_size: 20\n",
            encoding="utf-8",
        )

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_yaml(path, EnvironmentVariables())

    def test_malformed_yaml_raises(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("config: [unclosed\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Error parsing YAML"):
            load_templated_yaml(path, EnvironmentVariables())

    def test_placeholders_in_comments_ignored(self, tmp_path: Path, monkeypatch):
        """Should not require variables that only appear in comments."""
        monkeypatch.delenv("UNSET_IN_COMMENT", raising=False)
        path = tmp_path / "config.yaml"
        path.write_text(
            "# Use ${UNSET_IN_COMMENT} to configure things\n"
            "config:\n"
            "  app:\n"
            "    # ${UNSET_IN_COMMENT:?never evaluated}\n"
            "    name: Commented\n",
            encoding="utf-8",
        )

        config = load_templated_yaml(path, EnvironmentVariables())

        assert config.app.name == "Commented"

    def test_shipped_config_loads_with_clean_environment(self, monkeypatch):
        """Should load the repository's config.yaml with no variables exported."""
        for name in (
            "APP_ENVIRONMENT",
            "APP_HOST",
            "APP_PORT",
            "CONFIG_FILE",
            "DATABASE_URL",
            "LOG_LEVEL",
            "LOG_FORMAT",
        ):
            monkeypatch.delenv(name, raising=False)
            monkeypatch.delenv(f"DEVELOPMENT_{name}", raising=False)
        shipped = Path(__file__).resolve().parents[3] / "config.yaml"
        assert shipped.exists()

        config = load_templated_yaml(shipped, EnvironmentVariables(_env_file=None))

        assert config.app.environment == "development"
        assert config.app.port == 8000
        assert config.database.url == "sqlite:///./catalog.db"
        assert config.logging.level == "INFO"
        assert config.catalog.default_sort == "name"


class TestConfigModels:
    """Test derived configuration values."""

    @pytest.mark.parametrize(
        ("url", "in_memory"),
        [
            ("sqlite://", True),
            ("sqlite:///:memory:", True),
            ("sqlite:///./catalog.db", False),
        ],
    )
    def test_sqlite_detection(self, url, in_memory):
        config = DatabaseConfig(url=url)
        assert config.is_sqlite
        assert config.is_in_memory is in_memory

    def test_non_sqlite(self):
        config = DatabaseConfig(url="postgresql://user@db/catalog")
        assert not config.is_sqlite
        assert not config.is_in_memory

    def test_page_size_bounds(self):
        with pytest.raises(ValueError):
            CatalogConfig(default_page_size=200, max_page_size=100)

    @pytest.mark.parametrize("sort", ["password", "", "Name"])
    def test_unknown_default_sort_rejected(self, sort):
        with pytest.raises(ValueError, match="default_sort"):
            CatalogConfig(default_sort=sort)

    def test_camel_case_default_sort_accepted(self):
        assert CatalogConfig(default_sort="createdAt").default_sort == "createdAt"

    def test_unknown_default_sort_in_file_rejected(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("config:\n  catalog:\n    default_sort: password\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_yaml(path, EnvironmentVariables())

    def test_defaults(self):
        config = ConfigData()
        assert config.catalog.default_sort == "name"
        assert config.database.url == "sqlite:///./catalog.db"
