"""SqlResourceSource and ResourceStore against a live Postgres table."""

import pytest
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from getres_lens.core.paths import resource_path
from getres_lens.core.store import ResourceStore
from getres_lens.db import SqlResourceSource
from getres_lens.errors import RefreshError


@pytest.mark.asyncio
async def test_fetch_resources(database: AsyncEngine) -> None:
    source = SqlResourceSource(database)

    records = await source.fetch_resources()

    assert sorted(r.key for r in records) == ["1", "2", "3", "4", "5"]
    shop = next(r for r in records if r.key == "1")
    assert shop.pid is None
    assert shop.code == ".shop { display: block; }"


@pytest.mark.asyncio
async def test_null_code_becomes_empty(database: AsyncEngine) -> None:
    async with database.begin() as conn:
        await conn.execute(text("UPDATE resources SET code = NULL WHERE id = 3"))

    records = await SqlResourceSource(database).fetch_resources()

    assert next(r for r in records if r.key == "3").code == ""


@pytest.mark.asyncio
async def test_store_refresh_resolves_paths(database: AsyncEngine) -> None:
    store = ResourceStore(SqlResourceSource(database))

    await store.refresh()

    logo = store.lookup_by_id("3")
    assert logo is not None
    assert resource_path(logo, store.snapshot.by_id) == "Shop-Banner-Logo"


@pytest.mark.asyncio
async def test_ping(database: AsyncEngine) -> None:
    assert await SqlResourceSource(database).ping() is True


@pytest.mark.asyncio
async def test_missing_table_fails_refresh_and_keeps_snapshot(database: AsyncEngine) -> None:
    store = ResourceStore(SqlResourceSource(database))
    await store.refresh()

    async with database.begin() as conn:
        await conn.execute(text("DROP TABLE resources"))

    with pytest.raises(RefreshError):
        await store.refresh()
    assert len(store) == 5
