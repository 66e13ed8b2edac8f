"""Entity: TeamMembership."""

from pydantic import Field

from book_catalog.entities._base import AuthorEmail, Entity


class TeamMembership(Entity):
    """One edge between an ad-hoc team and one of its individual authors."""

    team_email: AuthorEmail = Field(description="Email of the ad-hoc team")
    author_email: AuthorEmail = Field(description="Email of the individual author")
