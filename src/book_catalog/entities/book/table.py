"""Book database table model."""

from sqlmodel import Field

from book_catalog.core.errors import EntityCategory
from book_catalog.entities._base import (
    AUTHOR_EMAIL_LENGTH,
    ISBN_LENGTH,
    NAME_LENGTH,
    EntityTable,
)


class BookTable(EntityTable, table=True):
    """Database persistence model for books."""

    __tablename__ = "books"
    __category__ = EntityCategory.BOOK

    isbn: str = Field(primary_key=True, max_length=ISBN_LENGTH)
    title: str = Field(max_length=NAME_LENGTH, nullable=False)
    year_published: int = Field(nullable=False)
    author_email: str = Field(
        foreign_key="authoring_entities.email",
        max_length=AUTHOR_EMAIL_LENGTH,
        nullable=False,
        index=True,
    )
    publisher_name: str = Field(
        foreign_key="publishers.name",
        max_length=NAME_LENGTH,
        nullable=False,
        index=True,
    )
