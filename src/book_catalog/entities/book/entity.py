"""Entity: Book."""

from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints

from book_catalog.entities._base import ISBN_LENGTH, AuthorEmail, Entity, Name, NotBlank
from book_catalog.entities.authoring_entity import AuthoringEntity
from book_catalog.entities.publisher import Publisher

Isbn = Annotated[str, StringConstraints(max_length=ISBN_LENGTH), NotBlank]


class Book(Entity):
    """A published work bound to exactly one author and one publisher.

    The author may be any authoring entity variant. Both references must
    name records that already exist when the book is written.
    """

    isbn: Isbn = Field(description="ISBN (primary key)")
    title: Name = Field(description="Book title")
    year_published: int = Field(description="Year of publication")
    author_email: AuthorEmail = Field(description="Email of the authoring entity")
    publisher_name: Name = Field(description="Name of the publisher")


class BookDetails(BaseModel):
    """A book together with its resolved author and publisher."""

    book: Book
    author: AuthoringEntity
    publisher: Publisher
