"""Custom exceptions for the external_store package."""

from __future__ import annotations

from typing import Any


class StoreProviderError(Exception):
    """Base exception for all store-provider errors."""


class InvalidArgumentError(StoreProviderError, ValueError):
    """Raised when a required per-call argument (e.g. ``key``) is blank."""

    def __init__(self, argument: str, message: str = "") -> None:
        self.argument = argument
        super().__init__(message or f"The {argument} parameter must be a non-zero-length string.")


class MissingConfigurationError(StoreProviderError):
    """Raised when a mandatory provider setting has not been populated."""

    def __init__(self, setting: str) -> None:
        self.setting = setting
        super().__init__(f"The {setting} setting must be specified.")


class BootstrapError(StoreProviderError):
    """Raised when creating the backing table did not yield a detectable table."""

    def __init__(self, store_name: str) -> None:
        self.store_name = store_name
        super().__init__(f"Unable to create store '{store_name}'")


class InvalidEnumerationValueError(StoreProviderError, ValueError):
    """Raised when a persisted enumeration value matches no known member."""

    def __init__(self, field: str, value: Any) -> None:
        self.field = field
        self.value = value
        super().__init__(f"The value used for {field} was not valid: {value!r}")


class StoreNotInitializedError(StoreProviderError):
    """Raised by the in-memory provider when the store has not been initialised."""

    def __init__(self, store_name: str) -> None:
        self.store_name = store_name
        super().__init__(f"Store '{store_name}' does not exist; call init() first")
