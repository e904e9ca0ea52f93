"""Order repository: numbering, pricing and status changes over the order slot."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from dsvflow.application.repositories.base import Clock, CollectionRepository
from dsvflow.config import get_logger
from dsvflow.core.entities.common import utc_now
from dsvflow.core.entities.order import (
    ORDER_DERIVED_FIELDS,
    ORDER_IDENTITY_FIELDS,
    Order,
    OrderDraft,
    OrderStatus,
    PricingBreakdown,
)
from dsvflow.core.interfaces.kv_store import IKeyValueStore
from dsvflow.core.interfaces.notifier import INotifier
from dsvflow.core.services.order_numbers import generate_order_number
from dsvflow.core.services.pricing import calculate_pricing
from dsvflow.core.services.reporting import orders_in_window
from dsvflow.core.services.status_flow import next_status

logger = get_logger(__name__)


class OrderRepository(CollectionRepository):
    """Create, update, advance and query orders."""

    model = Order

    def __init__(
        self,
        store: IKeyValueStore,
        key: str = "dsv_orders",
        notifier: INotifier | None = None,
        clock: Clock = utc_now,
    ):
        super().__init__(store, key, notifier=notifier, clock=clock)

    def quote(self, quantity: int, unit_price: float) -> PricingBreakdown:
        """Price a quantity without creating anything."""
        return calculate_pricing(quantity, unit_price)

    def next_order_number(self) -> str:
        """The number the next order created today would receive."""
        return generate_order_number(
            (o.order_number for o in self._items), self._clock().date()
        )

    async def create(self, draft: OrderDraft) -> Order:
        """Price, number and store a new order at the head of the collection."""
        await self._ensure_loaded()
        now = self._clock()
        pricing = calculate_pricing(draft.quantity, draft.unit_price)

        order = Order(
            **draft.model_dump(),
            **pricing.model_dump(),
            order_number=self.next_order_number(),
            created_at=now,
            updated_at=now,
        )
        await self._commit(self._prepended(order))

        logger.info(
            "order_created",
            order_id=order.id,
            order_number=order.order_number,
            client_id=order.client_id,
            total=round(order.total, 2),
        )
        self._notify(
            "Order created successfully",
            f"Order {order.order_number} has been created.",
        )
        return order

    async def update(self, order_id: str, changes: Mapping[str, Any]) -> Order | None:
        """
        Merge partial changes into an order.

        Pricing is recomputed from the effective quantity and unit price, so
        derived fields in ``changes`` are ignored. Unknown ids are a no-op.
        """
        await self._ensure_loaded()
        idx = self._index_of(order_id)
        if idx is None:
            logger.debug("order_update_skipped", order_id=order_id)
            return None

        current = self._items[idx]
        quantity = changes.get("quantity")
        if quantity is None:
            quantity = current.quantity
        unit_price = changes.get("unit_price")
        if unit_price is None:
            unit_price = current.unit_price
        pricing = calculate_pricing(quantity, unit_price)

        order = self._merge(
            current,
            changes,
            ORDER_IDENTITY_FIELDS | ORDER_DERIVED_FIELDS,
            **pricing.model_dump(),
            updated_at=self._clock(),
        )
        await self._commit(self._replaced(idx, order))

        logger.info("order_updated", order_id=order_id, fields=sorted(changes))
        self._notify("Order updated successfully")
        return order

    async def update_status(self, order_id: str, status: OrderStatus) -> Order | None:
        """Set any status directly, bypassing the flow."""
        await self._ensure_loaded()
        idx = self._index_of(order_id)
        if idx is None:
            return None

        previous = self._items[idx].status
        order = self._items[idx].model_copy(
            update={"status": status, "updated_at": self._clock()}
        )
        await self._commit(self._replaced(idx, order))

        logger.info(
            "order_status_set",
            order_id=order_id,
            previous=previous.value,
            status=status.value,
        )
        self._notify(f"Order status updated to {status.value}")
        return order

    async def advance_status(self, order_id: str) -> Order | None:
        """Move one step along the flow; None for unknown ids or the terminal state."""
        await self._ensure_loaded()
        order = self.get(order_id)
        if order is None:
            return None
        target = next_status(order.status)
        if target is None:
            logger.debug("order_advance_terminal", order_id=order_id)
            return None
        return await self.update_status(order_id, target)

    async def delete(self, order_id: str) -> None:
        if await self._remove(order_id):
            logger.info("order_deleted", order_id=order_id)
            self._notify("Order deleted successfully")

    async def discard(self, order_id: str) -> None:
        """Remove an order without notifying, to undo a partly placed order."""
        if await self._remove(order_id):
            logger.warning("order_discarded", order_id=order_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def by_client(self, client_id: str) -> list[Order]:
        return [o for o in self._items if o.client_id == client_id]

    def by_status(self, status: OrderStatus) -> list[Order]:
        return [o for o in self._items if o.status == status]

    def by_date_range(self, start: datetime, end: datetime) -> list[Order]:
        """Orders created within [start, end]."""
        return orders_in_window(self._items, start, end)
