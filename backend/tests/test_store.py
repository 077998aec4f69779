# backend/tests/test_store.py

import asyncio
from contextlib import asynccontextmanager

import pytest

from app.db.config import DatabaseSettings
from app.db.schema import DEFAULT_ADMIN, bootstrap
from app.db.store import Store, StoreSession
from app.errors import DatabaseError


@asynccontextmanager
async def connected_store(settings: DatabaseSettings):
    store = Store(settings)
    await store.connect()
    try:
        yield store
    finally:
        await store.close()


def test_execute_and_fetch_primitives(db_settings) -> None:
    async def scenario():
        async with connected_store(db_settings) as store:
            await store.execute("CREATE TABLE items (id INTEGER PRIMARY KEY AUTOINCREMENT, name TEXT)")

            first = await store.execute("INSERT INTO items (name) VALUES (?)", ("a",))
            second = await store.execute("INSERT INTO items (name) VALUES (?)", ("b",))
            updated = await store.execute("UPDATE items SET name = ?", ("z",))

            one = await store.fetch_one("SELECT * FROM items WHERE id = ?", (first.last_id,))
            missing = await store.fetch_one("SELECT * FROM items WHERE id = ?", (999,))
            rows = await store.fetch_all("SELECT * FROM items ORDER BY id")
            empty = await store.fetch_all("SELECT * FROM items WHERE name = ?", ("nope",))
            return first, second, updated, one, missing, rows, empty

    first, second, updated, one, missing, rows, empty = asyncio.run(scenario())

    assert first.rowcount == 1
    assert second.last_id != first.last_id
    assert updated.rowcount == 2
    assert one == {"id": first.last_id, "name": "z"}
    assert missing is None
    assert [row["id"] for row in rows] == [first.last_id, second.last_id]
    assert empty == []


def test_parameters_are_bound_not_interpolated(db_settings) -> None:
    async def scenario():
        async with connected_store(db_settings) as store:
            await store.execute("CREATE TABLE items (name TEXT)")
            hostile = "x'); DROP TABLE items; --"
            await store.execute("INSERT INTO items (name) VALUES (?)", (hostile,))
            return await store.fetch_all("SELECT name FROM items")

    rows = asyncio.run(scenario())

    assert rows == [{"name": "x'); DROP TABLE items; --"}]


def test_transaction_rolls_back_on_error(db_settings) -> None:
    async def scenario():
        async with connected_store(db_settings) as store:
            await store.execute("CREATE TABLE items (name TEXT)")
            with pytest.raises(RuntimeError):
                async with store.transaction() as tx:
                    await tx.execute("INSERT INTO items (name) VALUES (?)", ("lost",))
                    raise RuntimeError("boom")

            async with store.transaction() as tx:
                await tx.execute("INSERT INTO items (name) VALUES (?)", ("kept",))

            return await store.fetch_all("SELECT name FROM items")

    assert asyncio.run(scenario()) == [{"name": "kept"}]


def test_sql_errors_surface_as_database_error(db_settings) -> None:
    async def scenario():
        async with connected_store(db_settings) as store:
            await store.fetch_all("SELECT * FROM no_such_table")

    with pytest.raises(DatabaseError) as excinfo:
        asyncio.run(scenario())

    assert "no_such_table" in excinfo.value.message


def test_statement_timeout_raises_database_error() -> None:
    session = StoreSession(conn=None, timeout_seconds=0.01)  # type: ignore[arg-type]

    async def scenario():
        await session._run("SELECT slow()", asyncio.sleep(1))

    with pytest.raises(DatabaseError) as excinfo:
        asyncio.run(scenario())

    assert "timed out" in excinfo.value.message


def test_operations_before_connect_fail(db_settings) -> None:
    store = Store(db_settings)

    with pytest.raises(DatabaseError):
        asyncio.run(store.fetch_all("SELECT 1"))


def test_bootstrap_is_idempotent(db_settings) -> None:
    async def scenario():
        async with connected_store(db_settings) as store:
            await bootstrap(store)
            await bootstrap(store)
            users = await store.fetch_all("SELECT * FROM users")
            tables = await store.fetch_all(
                "SELECT name FROM sqlite_master WHERE type = 'table' AND name NOT LIKE 'sqlite_%' ORDER BY name"
            )
            return users, [t["name"] for t in tables]

    users, tables = asyncio.run(scenario())

    assert users == [dict(zip(("id", "username", "password", "name"), DEFAULT_ADMIN))]
    assert tables == ["clients", "leads", "notifications", "projects", "tasks", "users"]
