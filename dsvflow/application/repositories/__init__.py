"""Collection repositories persisted to key-value slots."""

from dsvflow.application.repositories.base import Clock, CollectionRepository
from dsvflow.application.repositories.client_repository import ClientRepository
from dsvflow.application.repositories.inventory_repository import (
    DEFAULT_INVENTORY,
    InventoryRepository,
)
from dsvflow.application.repositories.order_repository import OrderRepository

__all__ = [
    "Clock",
    "CollectionRepository",
    "ClientRepository",
    "DEFAULT_INVENTORY",
    "InventoryRepository",
    "OrderRepository",
]
