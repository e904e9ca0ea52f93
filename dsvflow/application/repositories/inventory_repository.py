"""Inventory repository: stock levels and low-stock detection."""

from collections.abc import Mapping
from typing import Any

from dsvflow.application.repositories.base import Clock, CollectionRepository
from dsvflow.config import get_logger
from dsvflow.core.entities.common import utc_now
from dsvflow.core.entities.inventory import (
    INVENTORY_IDENTITY_FIELDS,
    InventoryItem,
    InventoryItemDraft,
)
from dsvflow.core.entities.notification import NotificationLevel
from dsvflow.core.interfaces.kv_store import IKeyValueStore
from dsvflow.core.interfaces.notifier import INotifier

logger = get_logger(__name__)

# Stock list of a freshly installed shop, keyed by stable ids
DEFAULT_INVENTORY: tuple[tuple[str, InventoryItemDraft], ...] = (
    ("1", InventoryItemDraft(name="Plain White T-Shirts", quantity=500, min_stock=100, unit_cost=15, category="Apparel")),
    ("2", InventoryItemDraft(name="Plain Black T-Shirts", quantity=450, min_stock=100, unit_cost=15, category="Apparel")),
    ("3", InventoryItemDraft(name="Polo Shirts (Assorted)", quantity=300, min_stock=75, unit_cost=25, category="Apparel")),
    ("4", InventoryItemDraft(name="Baseball Caps", quantity=200, min_stock=50, unit_cost=8, category="Accessories")),
    ("5", InventoryItemDraft(name="Ceramic Mugs", quantity=350, min_stock=80, unit_cost=5, category="Drinkware")),
    ("6", InventoryItemDraft(name="Vinyl Banner Material (sqm)", quantity=100, min_stock=25, unit_cost=12, category="Printing")),
    ("7", InventoryItemDraft(name="Business Card Paper (packs)", quantity=150, min_stock=30, unit_cost=20, category="Printing")),
    ("8", InventoryItemDraft(name="Sticker Vinyl Rolls", quantity=45, min_stock=15, unit_cost=35, category="Printing")),
    ("9", InventoryItemDraft(name="Tote Bags", quantity=180, min_stock=50, unit_cost=10, category="Bags")),
    ("10", InventoryItemDraft(name="Branded Pens", quantity=1000, min_stock=200, unit_cost=1.5, category="Stationery")),
)


class InventoryRepository(CollectionRepository):
    """Stock items with add/reduce operations and low-stock alerts."""

    model = InventoryItem

    def __init__(
        self,
        store: IKeyValueStore,
        key: str = "dsv_inventory",
        notifier: INotifier | None = None,
        clock: Clock = utc_now,
        seed_defaults: bool = True,
    ):
        super().__init__(store, key, notifier=notifier, clock=clock)
        self._seed_defaults = seed_defaults

    def _default_items(self) -> list[InventoryItem]:
        if not self._seed_defaults:
            return []
        now = self._clock()
        return [
            InventoryItem(id=item_id, **draft.model_dump(), last_updated=now)
            for item_id, draft in DEFAULT_INVENTORY
        ]

    async def create(self, draft: InventoryItemDraft) -> InventoryItem:
        await self._ensure_loaded()
        item = InventoryItem(**draft.model_dump(), last_updated=self._clock())
        await self._commit(self._prepended(item))

        logger.info("inventory_item_created", item_id=item.id, quantity=item.quantity)
        self._notify("Item added to inventory", f"{item.name} has been added.")
        return item

    async def update(self, item_id: str, changes: Mapping[str, Any]) -> InventoryItem | None:
        await self._ensure_loaded()
        idx = self._index_of(item_id)
        if idx is None:
            return None

        item = self._merge(
            self._items[idx],
            changes,
            INVENTORY_IDENTITY_FIELDS,
            last_updated=self._clock(),
        )
        await self._commit(self._replaced(idx, item))

        logger.info("inventory_item_updated", item_id=item_id, fields=sorted(changes))
        self._notify("Inventory updated")
        return item

    async def delete(self, item_id: str) -> None:
        if await self._remove(item_id):
            logger.info("inventory_item_deleted", item_id=item_id)
            self._notify("Item removed from inventory")

    async def add_stock(self, item_id: str, amount: int) -> InventoryItem | None:
        """Increase on-hand quantity."""
        return await self._set_quantity(
            item_id, lambda item: item.quantity + amount, "stock_added", amount
        )

    async def reduce_stock(self, item_id: str, amount: int) -> InventoryItem | None:
        """Decrease on-hand quantity, never below zero; warn at or below the minimum."""
        return await self._set_quantity(
            item_id, lambda item: max(0, item.quantity - amount), "stock_reduced", amount
        )

    async def _set_quantity(self, item_id, compute, event: str, amount: int) -> InventoryItem | None:
        await self._ensure_loaded()
        idx = self._index_of(item_id)
        if idx is None:
            return None

        current = self._items[idx]
        item = current.model_copy(
            update={"quantity": compute(current), "last_updated": self._clock()}
        )
        await self._commit(self._replaced(idx, item))

        logger.info(
            event,
            item_id=item_id,
            amount=amount,
            previous=current.quantity,
            quantity=item.quantity,
        )
        if event == "stock_added":
            self._notify("Stock added successfully")
        elif item.is_low_stock:
            self._notify(
                f"Low stock alert: {item.name}",
                f"Only {item.quantity} units remaining.",
                level=NotificationLevel.WARNING,
            )
        return item

    def low_stock_items(self) -> list[InventoryItem]:
        """Items at or below their minimum stock."""
        return [item for item in self._items if item.is_low_stock]

    def search(self, query: str) -> list[InventoryItem]:
        """Case-insensitive match on name or category."""
        needle = query.lower()
        return [
            item
            for item in self._items
            if needle in item.name.lower() or needle in item.category.lower()
        ]
