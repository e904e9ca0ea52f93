"""Tests for the SQLite key-value store and its connection pool."""

from pathlib import Path

import aiosqlite
import pytest

from dsvflow.core.exceptions import CorruptSlotError, DatabaseError
from dsvflow.infrastructure.storage.sqlite import ConnectionPool, SQLiteKeyValueStore


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    return tmp_path / "nested" / "test.db"


@pytest.fixture
async def pool(temp_db_path: Path):
    pool = ConnectionPool(temp_db_path)
    await pool.initialize()
    yield pool
    await pool.close()


@pytest.fixture
def kv(pool) -> SQLiteKeyValueStore:
    return SQLiteKeyValueStore(pool)


class TestConnectionPool:
    def test_defaults(self, temp_db_path: Path):
        pool = ConnectionPool(temp_db_path)
        assert pool.pool_size == 1
        assert pool.busy_timeout == 30000
        assert pool._initialized is False

    async def test_initialize_creates_directory_and_schema(self, pool, temp_db_path):
        assert temp_db_path.parent.exists()
        async with pool.acquire() as conn:
            cursor = await conn.execute(
                "SELECT name FROM sqlite_master WHERE type='table' AND name='kv_store'"
            )
            assert await cursor.fetchone() is not None

    async def test_initialize_is_idempotent(self, pool):
        await pool.initialize()
        assert len(pool._connections) == 1

    async def test_wal_mode(self, pool):
        async with pool.acquire() as conn:
            cursor = await conn.execute("PRAGMA journal_mode")
            row = await cursor.fetchone()
            assert row[0] == "wal"

    async def test_transaction_rolls_back(self, pool):
        with pytest.raises(RuntimeError):
            async with pool.transaction() as conn:
                await conn.execute(
                    "INSERT INTO kv_store (key, value) VALUES ('k', '[]')"
                )
                raise RuntimeError("boom")

        async with pool.acquire() as conn:
            cursor = await conn.execute("SELECT COUNT(*) FROM kv_store")
            assert (await cursor.fetchone())[0] == 0

    async def test_close_allows_reinitialize(self, temp_db_path):
        pool = ConnectionPool(temp_db_path)
        await pool.initialize()
        await pool.close()
        assert pool._initialized is False

        async with pool.acquire():
            pass
        assert pool._initialized is True
        await pool.close()


class TestSQLiteKeyValueStore:
    async def test_missing_key(self, kv):
        assert await kv.get("dsv_orders") is None

    async def test_set_and_get(self, kv):
        value = [{"id": "1", "name": "Gh₵ mugs", "quantity": 3}]
        await kv.set("dsv_inventory", value)
        assert await kv.get("dsv_inventory") == value

    async def test_overwrite(self, kv):
        await kv.set("slot", [1])
        await kv.set("slot", [2, 3])
        assert await kv.get("slot") == [2, 3]
        assert await kv.keys() == ["slot"]

    async def test_delete_and_keys(self, kv):
        await kv.set("b", [])
        await kv.set("a", [])
        assert await kv.keys() == ["a", "b"]
        await kv.delete("a")
        await kv.delete("never-set")
        assert await kv.keys() == ["b"]

    async def test_survives_reopen(self, temp_db_path):
        pool = ConnectionPool(temp_db_path)
        await SQLiteKeyValueStore(pool).set("dsv_clients", [{"id": "c"}])
        await pool.close()

        reopened = ConnectionPool(temp_db_path)
        try:
            assert await SQLiteKeyValueStore(reopened).get("dsv_clients") == [{"id": "c"}]
        finally:
            await reopened.close()

    async def test_corrupt_json(self, kv, pool):
        async with pool.transaction() as conn:
            await conn.execute(
                "INSERT INTO kv_store (key, value) VALUES ('dsv_orders', '{not json')"
            )
        with pytest.raises(CorruptSlotError):
            await kv.get("dsv_orders")

    async def test_sqlite_errors_wrapped(self, kv, pool):
        async with pool.transaction() as conn:
            await conn.execute("DROP TABLE kv_store")
        with pytest.raises(DatabaseError) as exc_info:
            await kv.get("dsv_orders")
        assert exc_info.value.details["operation"] == "get"
        assert isinstance(exc_info.value.__cause__, aiosqlite.Error)
