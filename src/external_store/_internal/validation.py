"""Argument and configuration checks shared by the store providers."""

from __future__ import annotations

from external_store.exceptions import InvalidArgumentError, MissingConfigurationError


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def require_argument(name: str, value: str | None) -> str:
    """Return *value*, or raise :class:`InvalidArgumentError` if it is blank."""
    if is_blank(value):
        raise InvalidArgumentError(name)
    assert value is not None
    return value


def require_setting(name: str, value: str | None) -> str:
    """Return *value*, or raise :class:`MissingConfigurationError` if it is blank."""
    if is_blank(value):
        raise MissingConfigurationError(name)
    assert value is not None
    return value
