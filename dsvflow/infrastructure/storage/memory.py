"""In-memory key-value store for tests and ephemeral runs."""

import json
from typing import Any

from dsvflow.core.interfaces.kv_store import IKeyValueStore


class MemoryKeyValueStore(IKeyValueStore):
    """Keeps serialised slots in a dict.

    Values are JSON-encoded on write so callers observe the same
    round-trip behaviour as the SQLite store.
    """

    def __init__(self, initial: dict[str, Any] | None = None):
        self._data: dict[str, str] = {}
        for key, value in (initial or {}).items():
            self._data[key] = json.dumps(value)

    async def get(self, key: str) -> Any | None:
        raw = self._data.get(key)
        return None if raw is None else json.loads(raw)

    async def set(self, key: str, value: Any) -> None:
        self._data[key] = json.dumps(value)

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    async def keys(self) -> list[str]:
        return sorted(self._data)
