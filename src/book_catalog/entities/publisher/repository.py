"""Data-access layer for publishers."""

from book_catalog.core.services.database.store import CatalogStore

from .entity import Publisher
from .table import PublisherTable


class PublisherRepository:
    """Data-access layer for publishers."""

    def __init__(self, store: CatalogStore) -> None:
        self._store = store

    def add(self, publisher: Publisher) -> Publisher:
        self._store.insert(PublisherTable(**publisher.model_dump()))
        return publisher

    def get(self, name: str) -> Publisher | None:
        row = self._store.query_by_key(PublisherTable, name)
        if row is None:
            return None
        return Publisher.model_validate(row, from_attributes=True)

    def list_all(self) -> list[Publisher]:
        rows = self._store.query_all(PublisherTable, order_by=PublisherTable.name)
        return [Publisher.model_validate(row, from_attributes=True) for row in rows]
