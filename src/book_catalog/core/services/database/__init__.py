"""Database engine, schema management and the catalog store."""

from .db_manage import DbManageService
from .db_session import DbSessionService
from .store import CatalogStore

__all__ = ["CatalogStore", "DbManageService", "DbSessionService"]
