"""Schema management for the catalog database."""

from loguru import logger
from sqlmodel import SQLModel

from .db_session import DbSessionService


class DbManageService:
    def __init__(self, session_service: DbSessionService) -> None:
        self._engine = session_service.engine

    def create_all(self) -> None:
        """Create all catalog tables that do not exist yet."""
        from book_catalog.entities.authoring_entity import AuthoringEntityTable  # noqa: F401
        from book_catalog.entities.book import BookTable  # noqa: F401
        from book_catalog.entities.publisher import PublisherTable  # noqa: F401
        from book_catalog.entities.team_membership import TeamMembershipTable  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def drop_all(self) -> None:
        """Drop every catalog table."""
        SQLModel.metadata.drop_all(self._engine)
        logger.warning("Dropped all catalog tables.")
