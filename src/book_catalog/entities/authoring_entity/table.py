"""Authoring entity database table model."""

from sqlmodel import Field

from book_catalog.core.errors import EntityCategory
from book_catalog.entities._base import AUTHOR_EMAIL_LENGTH, NAME_LENGTH, EntityTable


class AuthoringEntityTable(EntityTable, table=True):
    """Single table holding every authoring entity variant.

    Variant-specific columns are nullable; ``authoring_entity_type`` names
    the variant and is never rewritten once the row exists.
    """

    __tablename__ = "authoring_entities"
    __category__ = EntityCategory.AUTHORING_ENTITY

    email: str = Field(primary_key=True, max_length=AUTHOR_EMAIL_LENGTH)
    name: str = Field(max_length=NAME_LENGTH, nullable=False)
    authoring_entity_type: str = Field(max_length=20, nullable=False, index=True)
    head_writer: str | None = Field(default=None, max_length=NAME_LENGTH)
    year_formed: int | None = None
