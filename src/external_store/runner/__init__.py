# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Runner submodule for driving a store provider from JSON.

Usage:
    python -m external_store.runner < input.json > output.json

Exports:
    Executor: Runs one operation against a configured provider
    RunnerInput: Input schema
    RunnerOutput: Output schema
"""

from .executor import Executor
from .schema import (
    RunnerInput,
    RunnerOutput,
    StorableSchema,
    StoreConfigSchema,
)

__all__ = [
    "Executor",
    "RunnerInput",
    "RunnerOutput",
    "StorableSchema",
    "StoreConfigSchema",
]
