"""Sales reporting models."""

from datetime import datetime

from pydantic import BaseModel, Field

from dsvflow.core.entities.order import Order, OrderStatus, ProductType


class ProductBreakdown(BaseModel):
    """Orders grouped by product type."""

    product_type: ProductType
    count: int = 0
    revenue: float = 0.0
    units: int = 0
    share: float = 0.0  # percent of total sales


class StatusBreakdown(BaseModel):
    """Orders grouped by status."""

    status: OrderStatus
    count: int = 0
    share: float = 0.0  # percent of orders in the window


class SalesReport(BaseModel):
    """Sales figures for an inclusive window of order creation times."""

    start: datetime
    end: datetime
    total_sales: float = 0.0
    total_orders: int = 0
    completed_count: int = 0
    average_order_value: float = 0.0
    total_units: int = 0
    product_breakdown: list[ProductBreakdown] = Field(default_factory=list)
    status_breakdown: list[StatusBreakdown] = Field(default_factory=list)
    orders: list[Order] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.orders


class DashboardStats(BaseModel):
    """Headline figures across all orders."""

    total_sales: float = 0.0
    total_orders: int = 0
    monthly_orders: int = 0
    pending_orders: int = 0
    in_production: int = 0
    completed: int = 0
    average_order_value: float = 0.0
    low_stock_count: int = 0
