"""Configuration template substitution utilities."""

import os
import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from book_catalog.runtime.config.config_data import ConfigData


def substitute_env_vars(text: str) -> str:
    """
    Substitute environment variable placeholders in text.

    Supports formats:
    - ${VAR_NAME} - required variable (raises error if missing)
    - ${VAR_NAME:-default} - optional with default value
    - ${VAR_NAME:?error_message} - required with custom error message
    """

    def replacer(match: re.Match) -> str:
        var_expr = match.group(1)

        if ":-" in var_expr:
            var_name, default = var_expr.split(":-", 1)
            return os.getenv(var_name, default)

        if ":?" in var_expr:
            var_name, error_msg = var_expr.split(":?", 1)
            value = os.getenv(var_name)
            if value is None:
                raise ValueError(f"Required environment variable {var_name}: {error_msg}")
            return value

        value = os.getenv(var_expr)
        if value is None:
            raise ValueError(f"Required environment variable {var_expr} not set")
        return value

    return re.sub(r"\$\{([^}]+)\}", replacer, text)


def apply_environment_overrides(env_mode: str) -> None:
    """Copy ``<ENV>_NAME`` variables to ``NAME`` for the active environment.

    With ``env_mode="test"``, ``TEST_CATALOG_DATABASE_URL`` becomes
    ``CATALOG_DATABASE_URL`` before placeholders are substituted.
    """
    prefix = f"{env_mode.upper()}_"
    overrides = [(var, value) for var, value in os.environ.items() if var.startswith(prefix)]
    for var_name, var_value in overrides:
        os.environ[var_name[len(prefix):]] = var_value
        logger.debug("Set environment variable {} from {}", var_name[len(prefix):], var_name)


def load_templated_yaml(file_path: Path, env_mode: str = "development") -> ConfigData:
    """
    Load a YAML config file with environment variable substitution.

    Args:
        file_path: Path to the YAML file
        env_mode: Active environment, used for prefixed overrides

    Returns:
        The validated ``config:`` section

    Raises:
        ValueError: If required environment variables are missing or the
            file does not describe a valid configuration
        FileNotFoundError: If the YAML file doesn't exist
    """
    content = file_path.read_text()

    logger.debug("Loading configuration from {} for environment: {}", file_path, env_mode)
    apply_environment_overrides(env_mode)

    substituted_content = substitute_env_vars(content)

    try:
        loaded = yaml.safe_load(substituted_content)
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e
    if not isinstance(loaded, dict):
        raise ValueError(f"Configuration file {file_path} is empty or not a mapping")

    try:
        return ConfigData(**(loaded.get("config") or {}))
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
