"""
Repository factory functions for dependency injection.

Each repository is created once per process over the configured key-value
store, loaded from its slot and then reused. The API layer and the use
cases import from here; tests override or reset them.
"""

from dsvflow.application.repositories import (
    ClientRepository,
    InventoryRepository,
    OrderRepository,
)
from dsvflow.config import get_logger, get_settings
from dsvflow.core.exceptions import ConfigurationError
from dsvflow.core.interfaces.kv_store import IKeyValueStore

logger = get_logger(__name__)

# Singleton repository instances
_order_repository: OrderRepository | None = None
_client_repository: ClientRepository | None = None
_inventory_repository: InventoryRepository | None = None


async def _store(store: IKeyValueStore | None) -> IKeyValueStore:
    if store is not None:
        return store
    # Lazy import infrastructure to avoid circular imports
    from dsvflow.infrastructure.storage import get_kv_store

    return await get_kv_store()


def _slot_key(name: str) -> str:
    """Configured slot for one collection; every collection needs its own."""
    storage = get_settings().storage
    keys = {
        "orders": storage.orders_key,
        "clients": storage.clients_key,
        "inventory": storage.inventory_key,
    }
    if len(set(keys.values())) != len(keys):
        raise ConfigurationError(
            "Collections must use distinct storage slots",
            code="DUPLICATE_SLOT_KEY",
            details=keys,
        )
    return keys[name]


def _notifier():
    from dsvflow.infrastructure.notifications import LogNotifier

    return LogNotifier()


async def get_order_repository(store: IKeyValueStore | None = None) -> OrderRepository:
    """Get or create the loaded OrderRepository."""
    global _order_repository

    if _order_repository is not None and store is None:
        return _order_repository

    repo = OrderRepository(
        await _store(store),
        key=_slot_key("orders"),
        notifier=_notifier(),
    )
    await repo.load()
    if store is None:
        _order_repository = repo
    return repo


async def get_client_repository(store: IKeyValueStore | None = None) -> ClientRepository:
    """Get or create the loaded ClientRepository."""
    global _client_repository

    if _client_repository is not None and store is None:
        return _client_repository

    repo = ClientRepository(
        await _store(store),
        key=_slot_key("clients"),
        notifier=_notifier(),
    )
    await repo.load()
    if store is None:
        _client_repository = repo
    return repo


async def get_inventory_repository(
    store: IKeyValueStore | None = None,
) -> InventoryRepository:
    """Get or create the loaded InventoryRepository."""
    global _inventory_repository

    if _inventory_repository is not None and store is None:
        return _inventory_repository

    settings = get_settings()
    repo = InventoryRepository(
        await _store(store),
        key=_slot_key("inventory"),
        notifier=_notifier(),
        seed_defaults=settings.business.seed_default_inventory,
    )
    await repo.load()
    if store is None:
        _inventory_repository = repo
    return repo


def reset_repositories() -> None:
    """Drop cached repositories (for testing)."""
    global _order_repository, _client_repository, _inventory_repository
    _order_repository = None
    _client_repository = None
    _inventory_repository = None
