"""Publisher database table model."""

from sqlmodel import Field

from book_catalog.core.errors import EntityCategory
from book_catalog.entities._base import (
    NAME_LENGTH,
    PHONE_LENGTH,
    PUBLISHER_EMAIL_LENGTH,
    EntityTable,
)


class PublisherTable(EntityTable, table=True):
    """Database persistence model for publishers."""

    __tablename__ = "publishers"
    __category__ = EntityCategory.PUBLISHER

    name: str = Field(primary_key=True, max_length=NAME_LENGTH)
    email: str = Field(max_length=PUBLISHER_EMAIL_LENGTH, unique=True, nullable=False)
    phone: str = Field(max_length=PHONE_LENGTH, unique=True, nullable=False)
