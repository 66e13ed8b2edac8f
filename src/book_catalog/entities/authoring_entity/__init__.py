"""Entity package: authoring entities.

Individual authors, writing groups and ad-hoc teams share one identity space
(their email) and one table, told apart by a stored type tag.
"""

from .entity import (
    AdHocTeam,
    AuthoringEntity,
    AuthoringEntityBase,
    AuthoringEntityKind,
    IndividualAuthor,
    WritingGroup,
)
from .repository import AuthoringEntityRepository, classify, to_entity, to_row
from .table import AuthoringEntityTable

__all__ = [
    "AdHocTeam",
    "AuthoringEntity",
    "AuthoringEntityBase",
    "AuthoringEntityKind",
    "AuthoringEntityRepository",
    "AuthoringEntityTable",
    "IndividualAuthor",
    "WritingGroup",
    "classify",
    "to_entity",
    "to_row",
]
