"""Database engine and session factory used across the application."""

from typing import Any

from loguru import logger
from sqlalchemy import event, text
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from book_catalog.runtime.config.config_data import DatabaseConfig
from book_catalog.runtime.context import get_config

from .store import CatalogStore


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DbSessionService:
    def __init__(self, db_config: DatabaseConfig | None = None) -> None:
        """Initialize the database engine and session factory."""
        db_config = db_config or get_config().database

        logger.debug("Setting up database engine for {}", db_config.safe_url)
        engine_kwargs: dict[str, Any] = {
            "echo": db_config.echo,
            "connect_args": self._get_connect_args(db_config),
        }

        if db_config.is_sqlite:
            if db_config.is_memory:
                # Every session must see the same in-memory database
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs.update(
                {
                    "pool_size": db_config.pool_size,
                    "max_overflow": db_config.max_overflow,
                    "pool_timeout": db_config.pool_timeout,
                    "pool_recycle": db_config.pool_recycle,
                    "pool_pre_ping": True,
                }
            )

        self._engine = create_engine(db_config.url, **engine_kwargs)

        if db_config.is_sqlite:
            # SQLite only enforces foreign keys when asked to, per connection
            event.listen(self._engine, "connect", _enable_sqlite_foreign_keys)

    @staticmethod
    def _get_connect_args(db_config: DatabaseConfig) -> dict:
        """Get database-specific connection arguments."""
        connect_args = {}

        if db_config.is_sqlite:
            connect_args.update(
                {
                    "check_same_thread": False,
                    "timeout": db_config.sqlite_timeout,
                }
            )

        return connect_args

    @property
    def engine(self) -> Engine:
        return self._engine

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,
            autoflush=True,
        )

    def create_store(self) -> CatalogStore:
        """Return a catalog store that opens sessions from this engine."""
        return CatalogStore(self.get_session)

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.error(
                "Database health check failed: {}: {}", type(e).__name__, e
            )
            return False

    def dispose(self) -> None:
        self._engine.dispose()
