# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Executor for running a single store operation from runner input.

Orchestrates the flow:
1. Create provider from configuration
2. Dispatch the requested operation
3. Return structured result
"""

from __future__ import annotations

import logging
from typing import Any

from external_store.codec import decode_longevity
from external_store.exceptions import InvalidArgumentError
from external_store.storable import Storable
from external_store.stores import InMemoryStoreProvider, SQLiteStoreProvider, StoreProvider

from .schema import RunnerInput, RunnerOutput, StorableSchema, StoreConfigSchema

logger = logging.getLogger(__name__)


class Executor:
    """Runs one store operation and reports the outcome.

    Pass a provider to the constructor to override creation from
    configuration (useful for testing).

    Example:
        executor = Executor()
        output = await executor.execute(input_data)
    """

    def __init__(self, provider: StoreProvider | None = None) -> None:
        self._injected_provider = provider

    async def execute(self, input_data: RunnerInput) -> RunnerOutput:
        """Execute the requested operation.

        Note:
            This method catches all exceptions and returns them as
            RunnerOutput errors, ensuring valid JSON is always returned.
        """
        try:
            result = await self._execute_internal(input_data)
        except Exception as e:
            logger.debug("Operation %r failed", input_data.operation, exc_info=True)
            return RunnerOutput(
                success=False,
                error=str(e),
                error_type=type(e).__name__,
            )
        return RunnerOutput(success=True, result=result)

    async def _execute_internal(self, input_data: RunnerInput) -> Any:
        """Internal execution logic.

        Separated from execute() to allow exception propagation
        for testing while execute() catches all errors.
        """
        provider = self._injected_provider or self._create_provider(input_data.store)
        operation = input_data.operation

        if operation == "init":
            await provider.init()
            return None
        if operation == "delete_store":
            await provider.delete_store()
            return None
        if operation == "add_or_update":
            if input_data.storable is None:
                raise InvalidArgumentError("storable", "add_or_update requires 'storable'")
            await provider.add_or_update(self._to_storable(input_data.storable))
            return None
        if operation == "get":
            storable = await provider.get(input_data.key or "")
            if storable is None:
                return None
            return StorableSchema.from_storable(storable).model_dump()
        if operation == "get_all":
            return [StorableSchema.from_storable(s).model_dump() for s in await provider.get_all()]
        if operation == "delete":
            await provider.delete(input_data.key or "")
            return None

        raise ValueError(f"Unknown operation: '{operation}'")

    def _create_provider(self, config: StoreConfigSchema) -> StoreProvider:
        if config.type == "memory":
            return InMemoryStoreProvider(store_name=config.store_name)
        return SQLiteStoreProvider(
            connection_string=config.connection_string,
            store_name=config.store_name,
            db_name=config.db_name,
        )

    def _to_storable(self, schema: StorableSchema) -> Storable:
        return Storable(
            key=schema.key,
            contents=schema.contents,
            content_type=schema.content_type,
            cache_for_time_period=schema.cache_for_time_period,
            longevity=decode_longevity(schema.longevity),
        )
