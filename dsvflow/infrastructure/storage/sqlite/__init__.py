"""SQLite storage implementations."""

from dsvflow.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_pool,
)
from dsvflow.infrastructure.storage.sqlite.kv_store import SQLiteKeyValueStore

__all__ = [
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "SQLiteKeyValueStore",
]
