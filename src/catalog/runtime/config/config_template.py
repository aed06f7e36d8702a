"""Configuration template substitution utilities."""

import os
import re
from collections.abc import Mapping
from pathlib import Path

import yaml
from loguru import logger
from pydantic_core import ValidationError

from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.config.settings import EnvironmentVariables

_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


def environment_lookup(env_mode: str, environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Return the environment with ``<ENV_MODE>_`` prefixed variables unprefixed.

    ``PRODUCTION_DATABASE_URL`` therefore wins over ``DATABASE_URL`` when the
    application runs in production mode.
    """
    source = dict(os.environ if environ is None else environ)
    prefix = f"{env_mode.upper()}_"
    overrides = {
        name[len(prefix):]: value
        for name, value in source.items()
        if name.startswith(prefix) and len(name) > len(prefix)
    }
    if overrides:
        logger.debug("Applying {}-specific overrides: {}", env_mode, sorted(overrides))
    source.update(overrides)
    return source


def substitute_env_vars(text: str, environ: Mapping[str, str] | None = None) -> str:
    """
    Substitute environment variable placeholders in text.

    Supports formats:
    - ${VAR_NAME} - required variable (raises error if missing)
    - ${VAR_NAME:-default} - optional with default value
    - ${VAR_NAME:?error_message} - required with custom error message
    """
    env = os.environ if environ is None else environ

    def replacer(match: re.Match) -> str:
        var_expr = match.group(1)

        if ":-" in var_expr:
            var_name, default = var_expr.split(":-", 1)
            return env.get(var_name, default)

        if ":?" in var_expr:
            var_name, error_msg = var_expr.split(":?", 1)
            value = env.get(var_name)
            if value is None:
                raise ValueError(f"Required environment variable {var_name}: {error_msg}")
            return value

        value = env.get(var_expr)
        if value is None:
            raise ValueError(f"Required environment variable {var_expr} not set")
        return value

    return _PLACEHOLDER.sub(replacer, text)


def _strip_comment_lines(text: str) -> str:
    # Placeholders in comments are documentation, not requirements
    return "".join(
        line for line in text.splitlines(keepends=True) if not line.lstrip().startswith("#")
    )


def load_templated_yaml(
    file_path: Path, env_vars: EnvironmentVariables | None = None
) -> ConfigData:
    """
    Load a YAML file with environment variable substitution.

    A missing file yields the model defaults, still subject to environment
    overrides.

    Raises:
        ValueError: If required environment variables are missing or the
            resulting configuration is invalid
    """
    env_vars = env_vars or EnvironmentVariables()
    env_mode = env_vars.app_environment or "development"
    logger.info("Loading configuration for environment: {}", env_mode)

    loaded: dict = {}
    if file_path.exists():
        content = _strip_comment_lines(file_path.read_text(encoding="utf-8"))
        substituted = substitute_env_vars(content, environment_lookup(env_mode))
        try:
            loaded = yaml.safe_load(substituted) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing YAML: {e}") from e
    else:
        logger.warning("Configuration file {} not found; using defaults", file_path)

    config_dict = env_vars.apply_overrides(dict(loaded.get("config") or {}))

    try:
        return ConfigData(**config_dict)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
