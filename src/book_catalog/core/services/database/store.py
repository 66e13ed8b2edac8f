"""Transactional CRUD and query access over SQLModel sessions."""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, TypeVar

from loguru import logger
from sqlalchemy.exc import IntegrityError as SAIntegrityError
from sqlalchemy.orm.exc import FlushError
from sqlmodel import Session, SQLModel, select

from book_catalog.core.errors import ConstraintViolation, EntityCategory, IntegrityError

RowT = TypeVar("RowT", bound=SQLModel)


def _category_of(row: SQLModel) -> EntityCategory | None:
    return getattr(type(row), "__category__", None)


class CatalogStore:
    """Handle on the relational store, passed explicitly to every repository.

    One transaction is open at a time. Each transaction gets a fresh
    session, so nothing loaded in one operation leaks into the next.
    Writes are flushed immediately; a unique or foreign-key collision is
    reported as :class:`ConstraintViolation` carrying the category of the row
    being written, and the whole transaction is rolled back.
    """

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory
        self._session: Session | None = None
        self._last_written: EntityCategory | None = None

    @property
    def in_transaction(self) -> bool:
        return self._session is not None

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("No open transaction; call begin() first")
        return self._session

    def begin(self) -> None:
        if self._session is not None:
            raise RuntimeError("A transaction is already open")
        self._session = self._session_factory()
        self._session.begin()
        self._last_written = None

    def commit(self) -> None:
        session = self.session
        try:
            session.commit()
        except SAIntegrityError as exc:
            session.rollback()
            if self._last_written is None:
                raise IntegrityError(f"commit failed on a constraint: {exc.orig}") from exc
            raise ConstraintViolation(self._last_written) from exc
        finally:
            self._close()

    def rollback(self) -> None:
        if self._session is None:
            return
        try:
            self._session.rollback()
        finally:
            self._close()

    @contextmanager
    def transaction(self) -> Iterator["CatalogStore"]:
        """Run a block as one transaction, or join the one already open."""
        if self._session is not None:
            yield self
            return

        self.begin()
        try:
            yield self
        except BaseException as e:
            logger.debug("Rolling back transaction after {}", type(e).__name__)
            self.rollback()
            raise
        self.commit()

    def insert(self, row: SQLModel) -> None:
        session = self.session
        category = _category_of(row)
        session.add(row)
        try:
            session.flush()
        except (SAIntegrityError, FlushError) as exc:
            session.rollback()
            if category is None:
                raise IntegrityError(f"write rejected by the store: {exc}") from exc
            missing = self._missing_reference(row)
            if missing is not None:
                raise ConstraintViolation(
                    category, f"the {category.value} references a missing {missing}."
                ) from exc
            raise ConstraintViolation(category) from exc
        self._last_written = category

    def _missing_reference(self, row: SQLModel) -> str | None:
        """Describe the first foreign key of ``row`` whose target does not exist."""
        for foreign_key in type(row).__table__.foreign_keys:
            value = getattr(row, foreign_key.parent.name)
            target = foreign_key.column
            if self.session.exec(select(target).where(target == value)).first() is None:
                return f"{target.table.name} record '{value}'"
        return None

    def remove(self, row: SQLModel) -> None:
        session = self.session
        session.delete(row)
        try:
            session.flush()
        except SAIntegrityError as exc:
            session.rollback()
            raise IntegrityError(f"delete rejected by the store: {exc.orig}") from exc

    def query_all(
        self, table: type[RowT], *criteria: Any, order_by: Any = None
    ) -> list[RowT]:
        statement = select(table)
        if criteria:
            statement = statement.where(*criteria)
        if order_by is not None:
            statement = statement.order_by(order_by)
        return list(self.session.exec(statement).all())

    def query_by_key(self, table: type[RowT], key: Any) -> RowT | None:
        return self.session.get(table, key)

    def _close(self) -> None:
        if self._session is not None:
            self._session.close()
        self._session = None
