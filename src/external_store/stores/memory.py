"""InMemoryStoreProvider — zero-config, dict-backed provider for development and testing."""

from __future__ import annotations

from typing import Any

from external_store._internal.validation import require_argument, require_setting
from external_store.codec import from_row, to_row
from external_store.exceptions import InvalidArgumentError, StoreNotInitializedError
from external_store.storable import Storable
from external_store.stores.base import StoreProvider

_VALUE_COLUMNS = ("cacheForTimePeriod", "contents", "contentType", "longevity")


class InMemoryStoreProvider(StoreProvider):
    """In-memory provider using nested dicts.  Data is lost on process exit.

    Rows are kept in their encoded column form, so reads go through the
    same decoding and validation as the SQLite provider.  Store names are
    matched case-insensitively.
    """

    def __init__(self, store_name: str | None = None) -> None:
        self.store_name = store_name
        self._tables: dict[str, dict[str, dict[str, Any]]] = {}

    def _rows(self) -> dict[str, dict[str, Any]]:
        name = require_setting("store_name", self.store_name)
        try:
            return self._tables[name.lower()]
        except KeyError:
            raise StoreNotInitializedError(name) from None

    async def init(self) -> None:
        name = require_setting("store_name", self.store_name)
        self._tables.setdefault(name.lower(), {})

    async def delete_store(self) -> None:
        name = require_setting("store_name", self.store_name)
        self._tables.pop(name.lower(), None)

    async def add_or_update(self, storable: Storable) -> None:
        if storable is None:
            raise InvalidArgumentError("storable", "A storable must be supplied.")
        require_argument("key", storable.key)
        self._rows()[storable.key] = to_row(storable)

    async def get(self, key: str) -> Storable | None:
        require_argument("key", key)
        row = self._rows().get(key)
        if row is None:
            return None
        return from_row(key, [row[column] for column in _VALUE_COLUMNS])

    async def get_all(self) -> list[Storable]:
        return [
            from_row(key, [row[column] for column in _VALUE_COLUMNS])
            for key, row in self._rows().items()
        ]

    async def delete(self, key: str) -> None:
        require_argument("key", key)
        self._rows().pop(key, None)
