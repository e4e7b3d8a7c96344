"""Shared test fixtures."""

import pytest

from external_store import Longevity, Storable
from external_store.stores import InMemoryStoreProvider, SQLiteStoreProvider


@pytest.fixture
def db_path(tmp_path):
    # Every operation opens its own connection, so ":memory:" would not persist.
    return str(tmp_path / "store.db")


@pytest.fixture
def provider(db_path):
    return SQLiteStoreProvider(connection_string=db_path, store_name="storables")


@pytest.fixture
async def ready_provider(provider):
    await provider.init()
    return provider


@pytest.fixture
def memory_provider():
    return InMemoryStoreProvider(store_name="storables")


@pytest.fixture
def logo_css():
    return Storable(
        key="css/logo",
        contents=".logo { background: url(logo.png); }",
        content_type="text/css",
        cache_for_time_period="{1:00:00:00}",
        longevity=Longevity.PERMANENT,
    )


@pytest.fixture
def banner_js():
    return Storable(
        key="js/banner",
        contents="document.title = 'hi';",
        content_type="application/javascript",
        cache_for_time_period="{0:00:30:00}",
        longevity=Longevity.LIMITED,
    )
