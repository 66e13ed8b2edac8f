"""Entities organised by business concept.

Each entity has its own package containing:
- entity.py: immutable domain model with field validation
- table.py: database persistence model
- repository.py: data access through the catalog store
"""

from .authoring_entity import (
    AdHocTeam,
    AuthoringEntity,
    AuthoringEntityBase,
    AuthoringEntityKind,
    AuthoringEntityRepository,
    AuthoringEntityTable,
    IndividualAuthor,
    WritingGroup,
    classify,
)
from .book import Book, BookDetails, BookRepository, BookTable
from .publisher import Publisher, PublisherRepository, PublisherTable
from .team_membership import (
    TeamMembership,
    TeamMembershipRepository,
    TeamMembershipTable,
)

__all__ = [
    "AdHocTeam",
    "AuthoringEntity",
    "AuthoringEntityBase",
    "AuthoringEntityKind",
    "AuthoringEntityRepository",
    "AuthoringEntityTable",
    "Book",
    "BookDetails",
    "BookRepository",
    "BookTable",
    "IndividualAuthor",
    "Publisher",
    "PublisherRepository",
    "PublisherTable",
    "TeamMembership",
    "TeamMembershipRepository",
    "TeamMembershipTable",
    "WritingGroup",
    "classify",
]
