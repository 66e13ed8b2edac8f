from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from pathlib import Path

from loguru import logger

from book_catalog.runtime.config.config_data import ConfigData
from book_catalog.runtime.config.config_template import (
    apply_environment_overrides,
    load_templated_yaml,
)
from book_catalog.runtime.config.settings import EnvironmentVariables


@dataclass
class AppContext:
    """Application context containing configuration and other app-wide state."""

    config: ConfigData


_app_context: ContextVar[AppContext | None] = ContextVar("app_context", default=None)


def load_config(
    config_file: Path | None = None, env: EnvironmentVariables | None = None
) -> ConfigData:
    """Build the configuration from the config file and ``CATALOG_*`` overrides.

    A missing config file is not an error: defaults are used instead. When
    ``env`` is not given, prefixed variables for the active environment (e.g.
    ``TEST_CATALOG_DATABASE_URL``) are applied before the settings are read.
    """
    if env is None:
        apply_environment_overrides(EnvironmentVariables().environment)
        env = EnvironmentVariables()
    path = config_file or env.config_file

    if path.exists():
        config = load_templated_yaml(path, env.environment)
    else:
        logger.debug("No configuration file at {}; using defaults", path)
        config = ConfigData()

    if env.database_url:
        config.database.url = env.database_url
    if env.log_level:
        config.logging.level = env.log_level.upper()
    return config


def get_context() -> AppContext:
    """Get the current application context, loading the config on first use."""
    context = _app_context.get()
    if context is None:
        context = AppContext(config=load_config())
        _app_context.set(context)
    return context


def set_context(context: AppContext) -> Token[AppContext | None]:
    """Set the current application context."""
    return _app_context.set(context)


def _recursive_dict_merge(base_dict: dict, override_dict: dict) -> dict:
    result = base_dict.copy()
    for key, value in override_dict.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _recursive_dict_merge(result[key], value)
        else:
            result[key] = value
    return result


def _merge_configs(base_config: ConfigData, override_config: ConfigData) -> ConfigData:
    """Merge only the explicitly set fields of ``override_config`` into ``base_config``."""
    merged = _recursive_dict_merge(
        base_config.model_dump(), override_config.model_dump(exclude_unset=True)
    )
    return ConfigData.model_validate(merged)


@contextmanager
def with_context(config_override: ConfigData | None = None):
    """Temporarily override parts of the application configuration.

    Example:
        override = ConfigData(database=DatabaseConfig(url="sqlite://"))
        with with_context(override):
            assert get_config().database.url == "sqlite://"
            # logging and app settings are inherited unchanged
    """
    if config_override is None:
        yield
        return

    if not isinstance(config_override, ConfigData):
        raise ValueError(
            f"config_override must be ConfigData, or None, got {type(config_override)}"
        )

    merged_config = _merge_configs(get_context().config, config_override)
    token = set_context(replace(get_context(), config=merged_config))
    try:
        yield
    finally:
        _app_context.reset(token)


def set_config(config: ConfigData) -> None:
    """Replace the entire current configuration."""
    set_context(AppContext(config=config))


def get_config() -> ConfigData:
    """Convenience function to get the current configuration."""
    return get_context().config
