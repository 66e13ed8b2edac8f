"""Process-level settings read from the environment and .env files."""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentVariables(BaseSettings):
    """Simple primitive values loaded from ``CATALOG_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = Field(
        default="development"
    )
    config_file: Path = Field(default=Path("config.yaml"))

    # Optional overrides applied on top of the config file
    database_url: str | None = Field(default=None)
    log_level: str | None = Field(default=None)
