"""
Sales reporting over order collections.

Only Completed and Delivered orders count towards sales; every order in
the window counts towards order, unit and status figures.
"""

from collections.abc import Iterable
from datetime import date, datetime, time

from dsvflow.core.entities.common import as_utc
from dsvflow.core.entities.order import Order, OrderStatus
from dsvflow.core.entities.report import (
    DashboardStats,
    ProductBreakdown,
    SalesReport,
    StatusBreakdown,
)
from dsvflow.core.services.status_flow import ORDER_STATUS_FLOW


def day_window(start: date, end: date) -> tuple[datetime, datetime]:
    """Whole-day UTC bounds: start of the first day to the last instant of the last."""
    return (
        as_utc(datetime.combine(start, time.min)),
        as_utc(datetime.combine(end, time.max)),
    )


def orders_in_window(
    orders: Iterable[Order], start: datetime, end: datetime
) -> list[Order]:
    """Orders created within [start, end], inclusive at both ends."""
    start, end = as_utc(start), as_utc(end)
    return [o for o in orders if start <= as_utc(o.created_at) <= end]


def _sales_total(orders: list[Order]) -> tuple[float, int]:
    fulfilled = [o for o in orders if o.is_fulfilled]
    return sum(o.total for o in fulfilled), len(fulfilled)


def build_sales_report(
    orders: Iterable[Order], start: datetime, end: datetime
) -> SalesReport:
    """Aggregate the orders created in the window."""
    window = orders_in_window(orders, start, end)
    total_sales, completed_count = _sales_total(window)
    total_orders = len(window)

    by_product: dict = {}
    for order in window:
        entry = by_product.setdefault(
            order.product_type, ProductBreakdown(product_type=order.product_type)
        )
        entry.count += 1
        entry.revenue += order.total
        entry.units += order.quantity

    for entry in by_product.values():
        entry.share = (entry.revenue / total_sales * 100) if total_sales else 0.0

    status_counts = {status: 0 for status in ORDER_STATUS_FLOW}
    for order in window:
        status_counts[order.status] += 1

    status_breakdown = [
        StatusBreakdown(
            status=status,
            count=count,
            share=count / total_orders * 100,
        )
        for status, count in status_counts.items()
        if count
    ]

    return SalesReport(
        start=as_utc(start),
        end=as_utc(end),
        total_sales=total_sales,
        total_orders=total_orders,
        completed_count=completed_count,
        average_order_value=(total_sales / completed_count) if completed_count else 0.0,
        total_units=sum(o.quantity for o in window),
        product_breakdown=sorted(
            by_product.values(), key=lambda e: e.revenue, reverse=True
        ),
        status_breakdown=status_breakdown,
        orders=window,
    )


def build_dashboard_stats(
    orders: Iterable[Order], now: datetime, low_stock_count: int = 0
) -> DashboardStats:
    """Headline figures for the dashboard."""
    orders = list(orders)
    now = as_utc(now)
    month_start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)

    total_sales, completed = _sales_total(orders)

    return DashboardStats(
        total_sales=total_sales,
        total_orders=len(orders),
        monthly_orders=sum(1 for o in orders if as_utc(o.created_at) >= month_start),
        pending_orders=sum(1 for o in orders if o.status == OrderStatus.PENDING),
        in_production=sum(1 for o in orders if o.status == OrderStatus.PRODUCTION),
        completed=completed,
        average_order_value=(total_sales / completed) if completed else 0.0,
        low_stock_count=low_stock_count,
    )
