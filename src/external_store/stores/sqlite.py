"""SQLiteStoreProvider — table-backed store provider using aiosqlite."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

try:
    import aiosqlite
except ImportError as exc:
    raise ImportError(
        "SQLiteStoreProvider requires the 'aiosqlite' package. "
        "Install it with: pip install external-store"
    ) from exc

from external_store._internal.validation import is_blank, require_argument, require_setting
from external_store.codec import from_row, to_row
from external_store.exceptions import BootstrapError, InvalidArgumentError
from external_store.storable import DEFAULT_CACHE_PERIOD, Storable
from external_store.stores.base import StoreProvider

if TYPE_CHECKING:
    from external_store.config import StoreSettings

logger = logging.getLogger(__name__)

# Schema alias the optional ``db_name`` database is attached under.
SELECTED_SCHEMA = "selected"


def quote_identifier(name: str) -> str:
    """Quote *name* for interpolation into statement text."""
    return '"' + name.replace('"', '""') + '"'


class SQLiteStoreProvider(StoreProvider):
    """Store provider backed by a single SQLite table.

    Every operation opens its own connection, runs a single statement (or
    the fixed bootstrap sequence) and closes the connection before
    returning, whatever the outcome.  Atomicity is whatever SQLite gives a
    single statement; the provider adds no locking of its own.

    Parameters:
        connection_string: Database to open.  A ``file:`` prefix is passed
                           to SQLite as a URI.
        store_name:        Name of the backing table.  Treated as a trusted,
                           operator-supplied identifier.
        db_name:           Optional database file attached after connecting.
                           When set, the table lives in that database.

    All three are plain attributes and may be set after construction; they
    are validated when an operation runs.
    """

    def __init__(
        self,
        connection_string: str | None = None,
        store_name: str | None = None,
        db_name: str | None = None,
    ) -> None:
        self.connection_string = connection_string
        self.store_name = store_name
        self.db_name = db_name
        self._table_exists = False

    @classmethod
    def from_settings(cls, settings: StoreSettings) -> SQLiteStoreProvider:
        return cls(
            connection_string=settings.connection_string,
            store_name=settings.store_name,
            db_name=settings.db_name,
        )

    # ── plumbing ─────────────────────────────────────────────

    def _check_config(self) -> None:
        require_setting("connection_string", self.connection_string)
        require_setting("store_name", self.store_name)

    @property
    def _schema(self) -> str:
        return "main" if is_blank(self.db_name) else SELECTED_SCHEMA

    @property
    def _table(self) -> str:
        assert self.store_name is not None
        return f"{quote_identifier(self._schema)}.{quote_identifier(self.store_name)}"

    @asynccontextmanager
    async def _connect(self) -> AsyncIterator[aiosqlite.Connection]:
        assert self.connection_string is not None
        uri = self.connection_string.startswith("file:")
        async with aiosqlite.connect(self.connection_string, uri=uri) as db:
            if not is_blank(self.db_name):
                await db.execute(
                    f"ATTACH DATABASE ? AS {quote_identifier(SELECTED_SCHEMA)}",
                    (self.db_name,),
                )
            yield db

    async def _probe(self, db: aiosqlite.Connection) -> bool:
        cursor = await db.execute(
            f"SELECT 1 FROM {quote_identifier(self._schema)}.sqlite_master "
            "WHERE type = 'table' AND name = :name COLLATE NOCASE",
            {"name": self.store_name},
        )
        return (await cursor.fetchone()) is not None

    # ── bootstrap ────────────────────────────────────────────

    async def store_exists(self) -> bool:
        """Return ``True`` if the backing table is present.  Performs no mutation."""
        self._check_config()
        async with self._connect() as db:
            return await self._probe(db)

    async def _create_store(self) -> bool:
        """Drop any table of the same name, create a fresh one and re-probe.

        Destructive: only :meth:`init` calls this, and only after the probe
        found nothing to lose.
        """
        self._check_config()
        async with self._connect() as db:
            await db.execute(f"DROP TABLE IF EXISTS {self._table}")
            await db.execute(
                f"""
                CREATE TABLE {self._table} (
                    "key"                VARCHAR(250) NOT NULL PRIMARY KEY,
                    "cacheForTimePeriod" VARCHAR(20)  NOT NULL DEFAULT '{DEFAULT_CACHE_PERIOD}',
                    "contents"           TEXT         NOT NULL,
                    "contentType"        VARCHAR(45)  NOT NULL,
                    "longevity"          INT          NOT NULL DEFAULT 0
                )
                """
            )
            await db.commit()
            self._table_exists = await self._probe(db)
        return self._table_exists

    async def init(self) -> None:
        self._table_exists = await self.store_exists()
        if self._table_exists:
            logger.debug("Store %r already exists", self.store_name)
            return

        logger.info("Creating store %r", self.store_name)
        if not await self._create_store():
            raise BootstrapError(self.store_name or "")

    async def delete_store(self) -> None:
        self._check_config()
        async with self._connect() as db:
            await db.execute(f"DROP TABLE IF EXISTS {self._table}")
            await db.commit()
        self._table_exists = False
        logger.info("Dropped store %r", self.store_name)

    # ── StoreProvider protocol ───────────────────────────────

    async def add_or_update(self, storable: Storable) -> None:
        if storable is None:
            raise InvalidArgumentError("storable", "A storable must be supplied.")
        require_argument("key", storable.key)
        self._check_config()

        async with self._connect() as db:
            await db.execute(
                f"""
                INSERT INTO {self._table}
                    ("key", "cacheForTimePeriod", "contents", "contentType", "longevity")
                VALUES
                    (:key, :cacheForTimePeriod, :contents, :contentType, :longevity)
                ON CONFLICT ("key") DO UPDATE SET
                    "cacheForTimePeriod" = excluded."cacheForTimePeriod",
                    "contents"           = excluded."contents",
                    "contentType"        = excluded."contentType",
                    "longevity"          = excluded."longevity"
                """,
                to_row(storable),
            )
            await db.commit()
        logger.debug("Stored %r in %r", storable.key, self.store_name)

    async def get(self, key: str) -> Storable | None:
        require_argument("key", key)
        self._check_config()

        async with self._connect() as db:
            cursor = await db.execute(
                f"""
                SELECT "cacheForTimePeriod", "contents", "contentType", "longevity"
                FROM {self._table}
                WHERE "key" = :key
                """,
                {"key": key},
            )
            row = await cursor.fetchone()
        if row is None:
            return None
        return from_row(key, row)

    async def get_all(self) -> list[Storable]:
        self._check_config()

        async with self._connect() as db:
            cursor = await db.execute(
                f"""
                SELECT "key", "cacheForTimePeriod", "contents", "contentType", "longevity"
                FROM {self._table}
                """
            )
            rows = await cursor.fetchall()
        return [from_row(row[0], row[1:]) for row in rows]

    async def delete(self, key: str) -> None:
        require_argument("key", key)
        self._check_config()

        async with self._connect() as db:
            await db.execute(
                f'DELETE FROM {self._table} WHERE "key" = :key',
                {"key": key},
            )
            await db.commit()
        logger.debug("Deleted %r from %r", key, self.store_name)
