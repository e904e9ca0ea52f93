"""
Core business logic services.

Layer-pure services that depend only on:
- dsvflow/core/entities/*
- dsvflow/core/interfaces/*
- dsvflow/core/exceptions.py

NO infrastructure imports.
"""

from dsvflow.core.services.formatting import format_currency, format_date
from dsvflow.core.services.order_numbers import generate_order_number
from dsvflow.core.services.pricing import (
    DISCOUNT_TIERS,
    VAT_RATE,
    DiscountTier,
    calculate_discount,
    calculate_pricing,
    get_discount_tier,
)
from dsvflow.core.services.reporting import (
    build_dashboard_stats,
    build_sales_report,
    day_window,
    orders_in_window,
)
from dsvflow.core.services.status_flow import (
    INITIAL_STATUSES,
    ORDER_STATUS_FLOW,
    can_advance,
    next_status,
    status_index,
)

__all__ = [
    # Pricing
    "DiscountTier",
    "DISCOUNT_TIERS",
    "VAT_RATE",
    "get_discount_tier",
    "calculate_discount",
    "calculate_pricing",
    # Order numbers
    "generate_order_number",
    # Status flow
    "ORDER_STATUS_FLOW",
    "INITIAL_STATUSES",
    "next_status",
    "can_advance",
    "status_index",
    # Reporting
    "build_sales_report",
    "build_dashboard_stats",
    "orders_in_window",
    "day_window",
    # Formatting
    "format_currency",
    "format_date",
]
