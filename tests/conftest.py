"""Pytest configuration and shared fixtures."""

from datetime import UTC, datetime, timedelta

import pytest

from dsvflow.application.repositories import (
    ClientRepository,
    InventoryRepository,
    OrderRepository,
)
from dsvflow.core.entities.notification import Notification
from dsvflow.core.exceptions import DatabaseError
from dsvflow.core.interfaces.notifier import INotifier
from dsvflow.infrastructure.storage.memory import MemoryKeyValueStore

FIXED_NOW = datetime(2026, 10, 19, 10, 30, tzinfo=UTC)


class FixedClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime = FIXED_NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class RecordingNotifier(INotifier):
    """Keeps every notification for assertions."""

    def __init__(self):
        self.notifications: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    @property
    def titles(self) -> list[str]:
        return [n.title for n in self.notifications]


class FlakyStore(MemoryKeyValueStore):
    """Memory store whose writes raise while ``failing`` is set."""

    def __init__(self):
        super().__init__()
        self.failing = False

    async def set(self, key, value) -> None:
        if self.failing:
            raise DatabaseError("set", "disk I/O error")
        await super().set(key, value)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Point settings at an in-memory store and drop cached singletons."""
    from dsvflow.application import services
    from dsvflow.config import reset_settings
    from dsvflow.infrastructure import storage

    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    monkeypatch.setenv("STORAGE_DATA_DIR", str(tmp_path / "data"))
    reset_settings()
    services.reset_repositories()
    monkeypatch.setattr(storage, "_kv_store", None)
    yield
    reset_settings()
    services.reset_repositories()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
async def orders(store, notifier, clock) -> OrderRepository:
    repo = OrderRepository(store, notifier=notifier, clock=clock)
    await repo.load()
    return repo


@pytest.fixture
async def clients(store, notifier, clock) -> ClientRepository:
    repo = ClientRepository(store, notifier=notifier, clock=clock)
    await repo.load()
    return repo


@pytest.fixture
async def inventory(store, notifier, clock) -> InventoryRepository:
    repo = InventoryRepository(store, notifier=notifier, clock=clock, seed_defaults=False)
    await repo.load()
    return repo


@pytest.fixture
def flaky_store() -> FlakyStore:
    return FlakyStore()
