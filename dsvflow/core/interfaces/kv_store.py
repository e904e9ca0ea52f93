"""Abstract interface for the local key-value store."""

from abc import ABC, abstractmethod
from typing import Any


class IKeyValueStore(ABC):
    """Named slots holding JSON-serialisable values.

    Each collection (orders, clients, inventory) lives under one slot as a
    list of records and is rewritten whole on every mutation.
    """

    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """Return the value stored under key, or None when the slot is empty."""
        pass

    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        """Replace the value stored under key."""
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Clear the slot. Clearing an empty slot is a no-op."""
        pass

    @abstractmethod
    async def keys(self) -> list[str]:
        """List occupied slots."""
        pass
