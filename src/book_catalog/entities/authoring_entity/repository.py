"""Data-access layer for authoring entities."""

from pydantic import ValidationError as PydanticValidationError

from book_catalog.core.errors import IntegrityError
from book_catalog.core.services.database.store import CatalogStore

from .entity import (
    AdHocTeam,
    AuthoringEntity,
    AuthoringEntityBase,
    AuthoringEntityKind,
    IndividualAuthor,
    WritingGroup,
)
from .table import AuthoringEntityTable

_VARIANTS: dict[AuthoringEntityKind, type[AuthoringEntityBase]] = {
    AuthoringEntityKind.INDIVIDUAL_AUTHOR: IndividualAuthor,
    AuthoringEntityKind.WRITING_GROUP: WritingGroup,
    AuthoringEntityKind.AD_HOC_TEAM: AdHocTeam,
}


def classify(row: AuthoringEntityTable) -> AuthoringEntityKind:
    """Resolve the variant of a stored row from its type tag.

    Raises:
        IntegrityError: if the tag is not one of the known variants.
    """
    try:
        return AuthoringEntityKind(row.authoring_entity_type)
    except ValueError as exc:
        raise IntegrityError(
            f"authoring entity '{row.email}' has unknown type tag "
            f"{row.authoring_entity_type!r}"
        ) from exc


def to_entity(row: AuthoringEntityTable) -> AuthoringEntity:
    """Convert a stored row into the domain variant its tag names."""
    variant = _VARIANTS[classify(row)]
    try:
        return variant.model_validate(row, from_attributes=True)
    except PydanticValidationError as exc:
        raise IntegrityError(
            f"authoring entity '{row.email}' is not a valid {row.authoring_entity_type}"
        ) from exc


def to_row(entity: AuthoringEntity) -> AuthoringEntityTable:
    columns = entity.model_dump(exclude={"kind"})
    return AuthoringEntityTable(authoring_entity_type=entity.kind.value, **columns)


class AuthoringEntityRepository:
    """Data-access layer for authoring entities of every variant."""

    def __init__(self, store: CatalogStore) -> None:
        self._store = store

    def add(self, entity: AuthoringEntity) -> AuthoringEntity:
        self._store.insert(to_row(entity))
        return entity

    def get(self, email: str) -> AuthoringEntity | None:
        row = self._store.query_by_key(AuthoringEntityTable, email)
        if row is None:
            return None
        return to_entity(row)

    def list_all(self, kind: AuthoringEntityKind | None = None) -> list[AuthoringEntity]:
        """Return every authoring entity, or only those of one variant."""
        criteria = []
        if kind is not None:
            criteria.append(AuthoringEntityTable.authoring_entity_type == kind.value)
        rows = self._store.query_all(
            AuthoringEntityTable, *criteria, order_by=AuthoringEntityTable.email
        )
        return [to_entity(row) for row in rows]
