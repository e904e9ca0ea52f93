"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation. Repositories assume their
input is already valid, so every boundary check lives here.
"""

from pydantic import BaseModel, Field, field_validator

from dsvflow.core.entities.order import OrderStatus, ProductType
from dsvflow.core.services.status_flow import INITIAL_STATUSES


class CreateClientRequest(BaseModel):
    """Request to add a client."""

    name: str = Field(..., min_length=1, description="Client name", examples=["Acme"])
    phone: str = Field(default="", description="Contact phone")
    email: str = Field(default="", description="Contact email")
    company: str = Field(default="", description="Company name")


class UpdateClientRequest(BaseModel):
    """Partial client update; omitted fields are left unchanged."""

    name: str | None = Field(default=None, min_length=1)
    phone: str | None = None
    email: str | None = None
    company: str | None = None


class CreateOrderRequest(BaseModel):
    """Request to place an order for an existing client.

    New orders start as Draft or Pending; later states are reached through
    the status endpoints.
    """

    client_id: str = Field(..., min_length=1, description="Client placing the order")
    product_type: ProductType = Field(..., description="Product ordered")
    quantity: int = Field(..., gt=0, description="Units ordered", examples=[500])
    unit_price: float = Field(..., gt=0, description="Price per unit", examples=[10.0])
    status: OrderStatus = Field(default=OrderStatus.PENDING, description="Initial status")
    notes: str | None = Field(default=None, description="Free-form notes")

    @field_validator("status")
    @classmethod
    def _initial_status(cls, v: OrderStatus) -> OrderStatus:
        if v not in INITIAL_STATUSES:
            raise ValueError("new orders must start as Draft or Pending")
        return v


class UpdateOrderRequest(BaseModel):
    """Partial order update. Pricing is recomputed from the result."""

    client_id: str | None = Field(default=None, min_length=1)
    client_name: str | None = Field(default=None, min_length=1)
    product_type: ProductType | None = None
    quantity: int | None = Field(default=None, gt=0)
    unit_price: float | None = Field(default=None, gt=0)
    status: OrderStatus | None = None
    notes: str | None = None


class SetOrderStatusRequest(BaseModel):
    """Set an order status directly, outside the normal flow."""

    status: OrderStatus


class QuoteRequest(BaseModel):
    """Price a quantity without creating an order."""

    quantity: int = Field(..., ge=0, description="Units to price")
    unit_price: float = Field(..., ge=0, description="Price per unit")


class CreateInventoryItemRequest(BaseModel):
    """Request to add a stock item."""

    name: str = Field(..., min_length=1, description="Item name")
    category: str = Field(default="", description="Free-form category")
    quantity: int = Field(default=0, ge=0, description="Units on hand")
    min_stock: int = Field(default=0, ge=0, description="Low-stock threshold")
    unit_cost: float = Field(default=0.0, ge=0, description="Cost per unit")


class UpdateInventoryItemRequest(BaseModel):
    """Partial stock item update."""

    name: str | None = Field(default=None, min_length=1)
    category: str | None = None
    quantity: int | None = Field(default=None, ge=0)
    min_stock: int | None = Field(default=None, ge=0)
    unit_cost: float | None = Field(default=None, ge=0)


class StockAdjustmentRequest(BaseModel):
    """Add or remove units of a stock item."""

    amount: int = Field(..., gt=0, description="Units to add or remove")
