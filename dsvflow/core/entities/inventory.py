"""Inventory domain entities."""

from datetime import datetime

from pydantic import BaseModel, Field

from dsvflow.core.entities.common import new_id, utc_now


class InventoryItemDraft(BaseModel):
    """Caller-supplied stock item data."""

    name: str
    category: str = ""
    quantity: int = 0
    min_stock: int = 0
    unit_cost: float = 0.0


class InventoryItem(BaseModel):
    """Tracks on-hand quantity and the reorder threshold for a material."""

    id: str = Field(default_factory=new_id)
    name: str
    category: str = ""
    quantity: int = 0
    min_stock: int = 0
    unit_cost: float = 0.0
    last_updated: datetime = Field(default_factory=utc_now)

    @property
    def is_low_stock(self) -> bool:
        """At or below the minimum threshold."""
        return self.quantity <= self.min_stock

    @property
    def stock_value(self) -> float:
        """Value of stock on hand = quantity * unit_cost."""
        return self.quantity * self.unit_cost


# Fields an update may never overwrite
INVENTORY_IDENTITY_FIELDS = frozenset({"id"})
