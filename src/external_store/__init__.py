"""external_store — table-backed persistence for external storage items.

A store is a key-value collection of :class:`Storable` items mapped onto
a single relational table.  Providers create the table on demand and
expose add-or-update, get, get-all and delete over it.
"""

from external_store.config import StoreSettings
from external_store.exceptions import (
    BootstrapError,
    InvalidArgumentError,
    InvalidEnumerationValueError,
    MissingConfigurationError,
    StoreNotInitializedError,
    StoreProviderError,
)
from external_store.storable import Longevity, Storable

__all__ = [
    "BootstrapError",
    "InvalidArgumentError",
    "InvalidEnumerationValueError",
    "Longevity",
    "MissingConfigurationError",
    "Storable",
    "StoreNotInitializedError",
    "StoreProviderError",
    "StoreSettings",
]
