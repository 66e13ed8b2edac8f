"""Entity: authoring entities (individual authors, writing groups, ad-hoc teams)."""

from enum import Enum
from typing import Annotated, Literal

from pydantic import Field

from book_catalog.entities._base import AuthorEmail, Entity, Name


class AuthoringEntityKind(str, Enum):
    """Discriminator values stored in the ``authoring_entity_type`` column."""

    INDIVIDUAL_AUTHOR = "IndividualAuthor"
    WRITING_GROUP = "WritingGroup"
    AD_HOC_TEAM = "AdHocTeam"

    @property
    def label(self) -> str:
        return {
            AuthoringEntityKind.INDIVIDUAL_AUTHOR: "Individual Author",
            AuthoringEntityKind.WRITING_GROUP: "Writing Group",
            AuthoringEntityKind.AD_HOC_TEAM: "Ad Hoc Team",
        }[self]


class AuthoringEntityBase(Entity):
    """Fields shared by every authoring entity variant."""

    email: AuthorEmail = Field(description="Authoring entity email (primary key)")
    name: Name = Field(description="Display name")


class IndividualAuthor(AuthoringEntityBase):
    """A single person credited as an author."""

    kind: Literal[AuthoringEntityKind.INDIVIDUAL_AUTHOR] = (
        AuthoringEntityKind.INDIVIDUAL_AUTHOR
    )


class WritingGroup(AuthoringEntityBase):
    """A formally organised group of writers."""

    kind: Literal[AuthoringEntityKind.WRITING_GROUP] = AuthoringEntityKind.WRITING_GROUP
    head_writer: Name = Field(description="Name of the group's head writer")
    year_formed: int = Field(description="Year the group was formed")


class AdHocTeam(AuthoringEntityBase):
    """A team of individual authors assembled for particular works.

    Membership is not held on the team itself; see the team membership
    edge set.
    """

    kind: Literal[AuthoringEntityKind.AD_HOC_TEAM] = AuthoringEntityKind.AD_HOC_TEAM


AuthoringEntity = Annotated[
    IndividualAuthor | WritingGroup | AdHocTeam,
    Field(discriminator="kind"),
]
