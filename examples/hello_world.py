"""
external_store — Hello World

A store is one table.  init() creates it if absent, add_or_update()
upserts by key, get() returns None when nothing is stored.
"""

import asyncio
import logging
import tempfile
from datetime import timedelta
from pathlib import Path

from external_store import Longevity, Storable
from external_store.codec import format_period
from external_store.stores import SQLiteStoreProvider


async def main():
    logging.basicConfig(level=logging.INFO)

    with tempfile.TemporaryDirectory() as tmp:
        # ──────────────────────────────────────
        #  1. Configure and bootstrap the store
        # ──────────────────────────────────────
        provider = SQLiteStoreProvider(
            connection_string=str(Path(tmp) / "assets.db"),
            store_name="external_files",
        )
        await provider.init()

        # ──────────────────────────────────────
        #  2. Write, then overwrite, an item
        # ──────────────────────────────────────
        script = Storable(
            key="js/app",
            contents="console.log('v1');",
            content_type="application/javascript",
            cache_for_time_period=format_period(timedelta(hours=6)),
            longevity=Longevity.LIMITED,
        )
        await provider.add_or_update(script)
        script.contents = "console.log('v2');"
        await provider.add_or_update(script)

        print(f"  get('js/app')   -> {await provider.get('js/app')}")
        print(f"  get('missing')  -> {await provider.get('missing')}")
        print(f"  get_all()       -> {len(await provider.get_all())} item(s)")

        # ──────────────────────────────────────
        #  3. Clean up
        # ──────────────────────────────────────
        await provider.delete("js/app")
        await provider.delete_store()


if __name__ == "__main__":
    asyncio.run(main())
