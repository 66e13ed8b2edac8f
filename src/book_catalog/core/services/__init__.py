"""Core services exports."""

from .database import CatalogStore, DbManageService, DbSessionService

__all__ = ["CatalogStore", "DbManageService", "DbSessionService"]
