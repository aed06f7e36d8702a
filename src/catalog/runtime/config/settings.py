from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentVariables(BaseSettings):
    """Simple primitive values loaded from environment variables and .env files."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Environment and deployment
    app_environment: Literal["development", "production", "test"] | None = Field(
        default=None
    )
    config_file: str = Field(default="config.yaml")

    # Overrides applied on top of config.yaml
    database_url: str | None = Field(default=None)
    log_level: str | None = Field(default=None)

    def apply_overrides(self, config_dict: dict) -> dict:
        """Layer explicitly set environment values over a parsed config mapping."""
        if self.app_environment:
            config_dict.setdefault("app", {})["environment"] = self.app_environment
        if self.database_url:
            config_dict.setdefault("database", {})["url"] = self.database_url
        if self.log_level:
            config_dict.setdefault("logging", {})["level"] = self.log_level
        return config_dict
