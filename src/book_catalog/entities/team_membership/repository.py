"""Data-access layer for the team membership edge set."""

from typing import TypeVar

from sqlmodel import col, select

from book_catalog.core.errors import IntegrityError
from book_catalog.core.services.database.store import CatalogStore
from book_catalog.entities.authoring_entity import (
    AdHocTeam,
    AuthoringEntityBase,
    AuthoringEntityTable,
    IndividualAuthor,
    to_entity,
)

from .entity import TeamMembership
from .table import TeamMembershipTable

VariantT = TypeVar("VariantT", bound=AuthoringEntityBase)


class TeamMembershipRepository:
    """Sole writer of team membership state.

    Callers are expected to have checked that ``team_email`` names an ad-hoc
    team and ``author_email`` an individual author.
    """

    def __init__(self, store: CatalogStore) -> None:
        self._store = store

    def contains(self, team_email: str, author_email: str) -> bool:
        return (
            self._store.query_by_key(TeamMembershipTable, (team_email, author_email))
            is not None
        )

    def add_edge(self, edge: TeamMembership) -> bool:
        """Record an edge. Returns ``False`` if it was already present."""
        if self.contains(edge.team_email, edge.author_email):
            return False
        self._store.insert(TeamMembershipTable(**edge.model_dump()))
        return True

    def members(self, team_email: str) -> list[IndividualAuthor]:
        member_emails = select(TeamMembershipTable.author_email).where(
            TeamMembershipTable.team_email == team_email
        )
        rows = self._store.query_all(
            AuthoringEntityTable,
            col(AuthoringEntityTable.email).in_(member_emails),
            order_by=AuthoringEntityTable.email,
        )
        return [self._expect(row, IndividualAuthor) for row in rows]

    def memberships(self, author_email: str) -> list[AdHocTeam]:
        team_emails = select(TeamMembershipTable.team_email).where(
            TeamMembershipTable.author_email == author_email
        )
        rows = self._store.query_all(
            AuthoringEntityTable,
            col(AuthoringEntityTable.email).in_(team_emails),
            order_by=AuthoringEntityTable.email,
        )
        return [self._expect(row, AdHocTeam) for row in rows]

    @staticmethod
    def _expect(row: AuthoringEntityTable, variant: type[VariantT]) -> VariantT:
        entity = to_entity(row)
        if not isinstance(entity, variant):
            raise IntegrityError(
                f"membership edge points at '{row.email}', "
                f"which is a {entity.kind.value}, not a {variant.__name__}"
            )
        return entity
