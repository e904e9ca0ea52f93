"""Key-value store implementations and the configured-store factory."""

from dsvflow.config import get_settings
from dsvflow.core.interfaces.kv_store import IKeyValueStore
from dsvflow.infrastructure.storage.memory import MemoryKeyValueStore

# Singleton instance
_kv_store: IKeyValueStore | None = None


async def get_kv_store() -> IKeyValueStore:
    """Get the key-value store selected by STORAGE_BACKEND."""
    global _kv_store
    if _kv_store is None:
        if get_settings().storage.backend == "memory":
            _kv_store = MemoryKeyValueStore()
        else:
            from dsvflow.infrastructure.storage.sqlite import SQLiteKeyValueStore, get_pool

            _kv_store = SQLiteKeyValueStore(await get_pool())
    return _kv_store


async def close_kv_store() -> None:
    """Release the store and its connection pool."""
    global _kv_store
    _kv_store = None
    from dsvflow.infrastructure.storage.sqlite import close_pool

    await close_pool()


__all__ = [
    "MemoryKeyValueStore",
    "get_kv_store",
    "close_kv_store",
]
