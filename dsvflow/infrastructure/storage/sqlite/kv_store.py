"""SQLite implementation of the key-value store."""

import json
from datetime import UTC, datetime
from typing import Any

import aiosqlite

from dsvflow.config import get_logger
from dsvflow.core.exceptions import CorruptSlotError, DatabaseError
from dsvflow.core.interfaces.kv_store import IKeyValueStore
from dsvflow.infrastructure.storage.sqlite.connection import ConnectionPool

logger = get_logger(__name__)


class SQLiteKeyValueStore(IKeyValueStore):
    """Stores each slot as one JSON document in the kv_store table."""

    def __init__(self, pool: ConnectionPool):
        self._pool = pool

    async def get(self, key: str) -> Any | None:
        try:
            async with self._pool.acquire() as conn:
                cursor = await conn.execute(
                    "SELECT value FROM kv_store WHERE key = ?", (key,)
                )
                row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise DatabaseError("get", str(e)) from e

        if row is None:
            return None
        try:
            return json.loads(row["value"])
        except json.JSONDecodeError as e:
            raise CorruptSlotError(key, str(e)) from e

    async def set(self, key: str, value: Any) -> None:
        payload = json.dumps(value, ensure_ascii=False)
        try:
            async with self._pool.transaction() as conn:
                await conn.execute(
                    """
                    INSERT INTO kv_store (key, value, updated_at)
                    VALUES (?, ?, ?)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = excluded.updated_at
                    """,
                    (key, payload, datetime.now(UTC).isoformat()),
                )
        except aiosqlite.Error as e:
            raise DatabaseError("set", str(e)) from e
        logger.debug("kv_slot_written", key=key, size=len(payload))

    async def delete(self, key: str) -> None:
        try:
            async with self._pool.transaction() as conn:
                await conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
        except aiosqlite.Error as e:
            raise DatabaseError("delete", str(e)) from e

    async def keys(self) -> list[str]:
        try:
            async with self._pool.acquire() as conn:
                cursor = await conn.execute("SELECT key FROM kv_store ORDER BY key")
                rows = await cursor.fetchall()
        except aiosqlite.Error as e:
            raise DatabaseError("keys", str(e)) from e
        return [row["key"] for row in rows]
