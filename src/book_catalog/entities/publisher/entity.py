"""Entity: Publisher."""

from typing import Annotated

from pydantic import Field, StringConstraints

from book_catalog.entities._base import (
    PHONE_LENGTH,
    PUBLISHER_EMAIL_LENGTH,
    Entity,
    Name,
    NotBlank,
)

PublisherEmail = Annotated[
    str, StringConstraints(max_length=PUBLISHER_EMAIL_LENGTH), NotBlank
]
Phone = Annotated[str, StringConstraints(max_length=PHONE_LENGTH), NotBlank]


class Publisher(Entity):
    """Publisher of books, identified by its name.

    Email and phone are not keys but must still be unique across publishers;
    the store enforces that when the publisher is written.
    """

    name: Name = Field(description="Publisher name (primary key)")
    email: PublisherEmail = Field(description="Publisher contact email")
    phone: Phone = Field(description="Publisher contact phone number")
