"""Pydantic models for parsing the config.yaml configuration file.

These models mirror the structure of the ``config:`` section of config.yaml
and handle validation and type conversion of the YAML data.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field
from sqlalchemy.engine import make_url


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(
        default="plain", description="Log file format"
    )
    file: str | None = Field(
        default=None, description="Log file path (no file sink when unset)"
    )
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of rotated log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./catalog.db",
        description="SQLAlchemy database connection URL",
    )
    echo: bool = Field(default=False, description="Echo SQL statements")
    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")
    sqlite_timeout: int = Field(
        default=20, description="SQLite lock timeout in seconds"
    )

    @property
    def is_sqlite(self) -> bool:
        return make_url(self.url).get_backend_name() == "sqlite"

    @property
    def is_memory(self) -> bool:
        """True for an in-memory SQLite database."""
        return self.is_sqlite and make_url(self.url).database in (None, "", ":memory:")

    @property
    def safe_url(self) -> str:
        """The URL with any password masked, for logging."""
        return make_url(self.url).render_as_string(hide_password=True)


class AppConfig(BaseModel):
    """Application configuration model."""

    name: str = Field(default="book-catalog", description="Application name")
    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )


class ConfigData(BaseModel):
    """Root of the ``config:`` section."""

    app: AppConfig = Field(default_factory=AppConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
