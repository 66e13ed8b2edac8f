"""Data-access layer for books."""

from book_catalog.core.services.database.store import CatalogStore

from .entity import Book
from .table import BookTable


class BookRepository:
    """Data-access layer for books."""

    def __init__(self, store: CatalogStore) -> None:
        self._store = store

    def add(self, book: Book) -> Book:
        self._store.insert(BookTable(**book.model_dump()))
        return book

    def get(self, isbn: str) -> Book | None:
        row = self._store.query_by_key(BookTable, isbn)
        if row is None:
            return None
        return Book.model_validate(row, from_attributes=True)

    def delete(self, isbn: str) -> Book | None:
        """Remove a book, returning what was removed (``None`` if absent)."""
        row = self._store.query_by_key(BookTable, isbn)
        if row is None:
            return None
        book = Book.model_validate(row, from_attributes=True)
        self._store.remove(row)
        return book

    def by_author(self, author_email: str) -> list[Book]:
        rows = self._store.query_all(
            BookTable, BookTable.author_email == author_email, order_by=BookTable.isbn
        )
        return [Book.model_validate(row, from_attributes=True) for row in rows]

    def list_all(self) -> list[Book]:
        rows = self._store.query_all(BookTable, order_by=BookTable.isbn)
        return [Book.model_validate(row, from_attributes=True) for row in rows]
