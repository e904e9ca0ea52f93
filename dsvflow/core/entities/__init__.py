"""Core domain entities."""

from dsvflow.core.entities.client import Client, ClientDraft
from dsvflow.core.entities.inventory import InventoryItem, InventoryItemDraft
from dsvflow.core.entities.notification import Notification, NotificationLevel
from dsvflow.core.entities.order import (
    Order,
    OrderDraft,
    OrderStatus,
    PricingBreakdown,
    ProductType,
)
from dsvflow.core.entities.report import (
    DashboardStats,
    ProductBreakdown,
    SalesReport,
    StatusBreakdown,
)

__all__ = [
    # Order entities
    "Order",
    "OrderDraft",
    "OrderStatus",
    "ProductType",
    "PricingBreakdown",
    # Client entities
    "Client",
    "ClientDraft",
    # Inventory entities
    "InventoryItem",
    "InventoryItemDraft",
    # Notifications
    "Notification",
    "NotificationLevel",
    # Reports
    "SalesReport",
    "ProductBreakdown",
    "StatusBreakdown",
    "DashboardStats",
]
