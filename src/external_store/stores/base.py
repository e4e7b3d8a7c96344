"""StoreProvider protocol — the capability set every backing engine offers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from external_store.storable import Storable


class StoreProvider(ABC):
    """Abstract base for all store providers.

    A provider maps one logical store onto one backing container (a table,
    for relational engines).  Callers depend on this capability rather than
    on the engine behind it.
    """

    @abstractmethod
    async def add_or_update(self, storable: Storable) -> None:
        """Insert *storable*, or overwrite the item already stored under its key."""
        ...

    @abstractmethod
    async def get(self, key: str) -> Storable | None:
        """Return the stored item, or ``None`` if not found."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Storable]:
        """Return a snapshot of every item in the store, in no particular order."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Delete an item.  No-op if the key does not exist."""
        ...

    @abstractmethod
    async def init(self) -> None:
        """Ensure the store exists.  Never touches an existing store's data."""
        ...

    @abstractmethod
    async def delete_store(self) -> None:
        """Drop the whole store.  ``init`` is required before further use."""
        ...
