"""Store settings loaded from the environment.

Pydantic Settings for environment variable management.  Every field is
optional at load time: a missing value is reported by the provider as a
:class:`~external_store.exceptions.MissingConfigurationError` when an
operation actually needs it.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreSettings(BaseSettings):
    """Provider configuration read from ``EXTERNAL_STORE_*`` variables.

    Attributes:
        connection_string: Database to open (SQLite path or ``file:`` URI).
        db_name:           Optional database file attached after connecting;
                           statements then target it instead of ``main``.
        store_name:        Name of the backing table.
    """

    connection_string: str | None = None
    db_name: str | None = None
    store_name: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="EXTERNAL_STORE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )
