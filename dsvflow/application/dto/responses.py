"""Response DTOs for API endpoints."""

from datetime import UTC, datetime

from pydantic import BaseModel, Field

from dsvflow.core.entities.client import Client
from dsvflow.core.entities.inventory import InventoryItem
from dsvflow.core.entities.order import Order


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    storage_backend: str | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. ORDER_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))


class QuoteResponse(BaseModel):
    """Pricing for a quantity and unit price."""

    quantity: int
    unit_price: float
    tier_label: str = Field(..., description="Volume discount tier applied")
    subtotal: float
    discount_percentage: float
    discount: float
    vat: float
    vat_amount: float
    total: float
    profit_margin: float


class ClientDetailResponse(BaseModel):
    """A client together with the orders placed under their id."""

    client: Client
    orders: list[Order] = Field(default_factory=list)


class InventoryItemResponse(BaseModel):
    """Stock item with its computed flags."""

    id: str
    name: str
    category: str
    quantity: int
    min_stock: int
    unit_cost: float
    last_updated: datetime
    is_low_stock: bool
    stock_value: float

    @classmethod
    def from_item(cls, item: InventoryItem) -> "InventoryItemResponse":
        return cls(
            **item.model_dump(),
            is_low_stock=item.is_low_stock,
            stock_value=item.stock_value,
        )
