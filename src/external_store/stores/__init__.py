"""Store providers for external storage."""

from external_store.stores.base import StoreProvider
from external_store.stores.memory import InMemoryStoreProvider
from external_store.stores.sqlite import SQLiteStoreProvider

__all__ = ["InMemoryStoreProvider", "SQLiteStoreProvider", "StoreProvider"]
