"""Team membership database table model."""

from sqlmodel import Field

from book_catalog.core.errors import EntityCategory
from book_catalog.entities._base import AUTHOR_EMAIL_LENGTH, EntityTable


class TeamMembershipTable(EntityTable, table=True):
    """Join table between ad-hoc teams and individual authors.

    The composite primary key makes each edge unique.
    """

    __tablename__ = "ad_hoc_team_members"
    __category__ = EntityCategory.TEAM_MEMBERSHIP

    team_email: str = Field(
        foreign_key="authoring_entities.email",
        primary_key=True,
        max_length=AUTHOR_EMAIL_LENGTH,
    )
    author_email: str = Field(
        foreign_key="authoring_entities.email",
        primary_key=True,
        max_length=AUTHOR_EMAIL_LENGTH,
        index=True,
    )
