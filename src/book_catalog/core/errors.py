"""Error taxonomy shared by the store, the repositories and the CLI."""

from enum import Enum


class EntityCategory(str, Enum):
    """Kinds of stored records, used to word errors and key listings."""

    PUBLISHER = "publisher"
    AUTHORING_ENTITY = "authoring entity"
    BOOK = "book"
    TEAM_MEMBERSHIP = "team membership"


class CatalogError(Exception):
    """Base class for every error raised by the catalog."""


class ValidationError(CatalogError):
    """A field violates a static constraint (blank, too long, not a number).

    Raised before the store is touched, so the caller can simply re-prompt.
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class ConstraintViolation(CatalogError):
    """A uniqueness or reference constraint failed when writing to the store."""

    def __init__(self, category: EntityCategory, message: str = "") -> None:
        self.category = category
        article = "an" if category.value[0] in "aeiou" else "a"
        self.message = message or (
            f"{article} {category.value} already exists with the given information."
        )
        super().__init__(self.message)


class IntegrityError(CatalogError):
    """Stored data is inconsistent (unknown discriminator, dangling reference)."""


class NotFoundError(CatalogError):
    """No record with the requested key exists."""

    def __init__(self, category: EntityCategory, key: str) -> None:
        self.category = category
        self.key = key
        super().__init__(f"no {category.value} found for '{key}'")
