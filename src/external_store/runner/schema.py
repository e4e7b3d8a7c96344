# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Data transfer objects for runner input/output.

These Pydantic models define the JSON contract of
``python -m external_store.runner``.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel

from external_store.storable import DEFAULT_CACHE_PERIOD, Longevity, Storable

Operation = Literal["init", "add_or_update", "get", "get_all", "delete", "delete_store"]


class StoreConfigSchema(BaseModel):
    """Provider configuration.

    Attributes:
        type: Provider type ("sqlite" or "memory")
        connection_string: Database to open (sqlite only)
        db_name: Database file attached after connecting (sqlite only)
        store_name: Backing table name
    """

    type: Literal["sqlite", "memory"] = "sqlite"
    connection_string: str | None = None
    db_name: str | None = None
    store_name: str | None = None


class StorableSchema(BaseModel):
    """A storable item as it travels over JSON.

    ``longevity`` is carried by name and validated when the executor
    turns it into a :class:`~external_store.storable.Storable`.
    """

    key: str
    contents: str = ""
    content_type: str = ""
    cache_for_time_period: str = DEFAULT_CACHE_PERIOD
    longevity: str = Longevity.PERMANENT.name

    @classmethod
    def from_storable(cls, storable: Storable) -> StorableSchema:
        return cls(
            key=storable.key,
            contents=storable.contents,
            content_type=storable.content_type,
            cache_for_time_period=storable.cache_for_time_period,
            longevity=storable.longevity.name,
        )


class RunnerInput(BaseModel):
    """Complete input read from stdin.

    Attributes:
        operation: Provider operation to run
        key: Item key (get, delete)
        storable: Item to write (add_or_update)
        store: Provider configuration
    """

    operation: Operation
    key: str | None = None
    storable: StorableSchema | None = None
    store: StoreConfigSchema


class RunnerOutput(BaseModel):
    """Complete output written to stdout.

    The runner always outputs valid JSON matching this schema,
    even on errors.

    Attributes:
        success: Whether the operation completed successfully
        result: Operation result (``get``: item or null, ``get_all``: list)
        error: Error message (on failure)
        error_type: Error class name (on failure)
    """

    success: bool
    result: Any = None
    error: str = ""
    error_type: str = ""
