"""Tests for the in-memory key-value store and the store factory."""

from dsvflow.infrastructure.storage import close_kv_store, get_kv_store
from dsvflow.infrastructure.storage.memory import MemoryKeyValueStore


class TestMemoryKeyValueStore:
    async def test_initial_values(self):
        kv = MemoryKeyValueStore({"dsv_orders": []})
        assert await kv.get("dsv_orders") == []
        assert await kv.get("dsv_clients") is None

    async def test_values_are_copied(self):
        kv = MemoryKeyValueStore()
        value = [{"id": "1"}]
        await kv.set("slot", value)
        value.append({"id": "2"})
        assert await kv.get("slot") == [{"id": "1"}]

    async def test_delete_and_keys(self):
        kv = MemoryKeyValueStore({"b": [], "a": []})
        assert await kv.keys() == ["a", "b"]
        await kv.delete("a")
        await kv.delete("missing")
        assert await kv.keys() == ["b"]


class TestStoreFactory:
    async def test_memory_backend(self):
        kv = await get_kv_store()
        assert isinstance(kv, MemoryKeyValueStore)
        assert await get_kv_store() is kv
        await close_kv_store()
        assert await get_kv_store() is not kv

    async def test_sqlite_backend(self, monkeypatch, tmp_path):
        from dsvflow.config import reset_settings
        from dsvflow.infrastructure.storage.sqlite import SQLiteKeyValueStore

        monkeypatch.setenv("STORAGE_BACKEND", "sqlite")
        monkeypatch.setenv("STORAGE_DATA_DIR", str(tmp_path / "db"))
        reset_settings()
        try:
            kv = await get_kv_store()
            assert isinstance(kv, SQLiteKeyValueStore)
            await kv.set("dsv_orders", [])
            assert (tmp_path / "db" / "dsvflow.db").exists()
        finally:
            await close_kv_store()
