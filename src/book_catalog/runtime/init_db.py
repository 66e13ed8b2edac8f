"""Database initialization script."""

from book_catalog.core.services.database import DbManageService, DbSessionService
from book_catalog.runtime.config.config_data import DatabaseConfig


def init_db(db_config: DatabaseConfig | None = None) -> DbSessionService:
    """Create all database tables and return the session service used."""
    session_service = DbSessionService(db_config)
    DbManageService(session_service).create_all()
    return session_service


if __name__ == "__main__":
    init_db()
