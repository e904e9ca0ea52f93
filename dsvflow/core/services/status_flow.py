"""
Linear order status flow.

Draft -> Pending -> Approved -> Production -> Completed -> Delivered.
Advancing moves exactly one step; Delivered is terminal. Setting an
arbitrary status is a separate, unguarded repository operation.
"""

from dsvflow.core.entities.order import OrderStatus

ORDER_STATUS_FLOW: tuple[OrderStatus, ...] = (
    OrderStatus.DRAFT,
    OrderStatus.PENDING,
    OrderStatus.APPROVED,
    OrderStatus.PRODUCTION,
    OrderStatus.COMPLETED,
    OrderStatus.DELIVERED,
)

# States an order may be created in
INITIAL_STATUSES = frozenset({OrderStatus.DRAFT, OrderStatus.PENDING})

TERMINAL_STATUS = ORDER_STATUS_FLOW[-1]


def status_index(status: OrderStatus) -> int:
    """Position of a status in the flow."""
    return ORDER_STATUS_FLOW.index(status)


def can_advance(status: OrderStatus) -> bool:
    return status != TERMINAL_STATUS


def next_status(status: OrderStatus) -> OrderStatus | None:
    """The status one step forward, or None from the terminal state."""
    if not can_advance(status):
        return None
    return ORDER_STATUS_FLOW[status_index(status) + 1]
