from datetime import UTC, datetime
from typing import Annotated, Any, Self

from pydantic import AfterValidator, BaseModel, ConfigDict, StringConstraints
from pydantic import ValidationError as PydanticValidationError
from sqlmodel import Field, SQLModel

from book_catalog.core.errors import ValidationError


def _reject_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("cannot be empty")
    return value


NotBlank = AfterValidator(_reject_blank)

# Column widths shared by the domain models and the tables.
NAME_LENGTH = 80
AUTHOR_EMAIL_LENGTH = 30
PUBLISHER_EMAIL_LENGTH = 80
PHONE_LENGTH = 24
ISBN_LENGTH = 17

Name = Annotated[str, StringConstraints(max_length=NAME_LENGTH), NotBlank]
AuthorEmail = Annotated[str, StringConstraints(max_length=AUTHOR_EMAIL_LENGTH), NotBlank]


class Entity(BaseModel):
    """Base domain entity.

    Entities are immutable value objects identified by their natural key.
    Use :meth:`build` to construct one from user input: it reports the first
    offending field as a catalog :class:`ValidationError`.
    """

    model_config = ConfigDict(frozen=True)

    @classmethod
    def build(cls, **fields: Any) -> Self:
        try:
            return cls(**fields)
        except PydanticValidationError as exc:
            error = exc.errors()[0]
            field = ".".join(str(part) for part in error["loc"]) or cls.__name__
            message = error["msg"].removeprefix("Value error, ")
            raise ValidationError(field, message) from exc


class EntityTable(SQLModel, table=False):
    """Base table model carrying the audit timestamp.

    Concrete tables set ``__category__`` so the store can say which kind of
    record a failed write belonged to.
    """

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        nullable=False,
    )
