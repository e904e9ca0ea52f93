"""Order domain entities."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from dsvflow.core.entities.common import new_id, utc_now


class OrderStatus(str, Enum):
    """Lifecycle states of an order, declared in flow order."""

    DRAFT = "Draft"
    PENDING = "Pending"
    APPROVED = "Approved"
    PRODUCTION = "Production"
    COMPLETED = "Completed"
    DELIVERED = "Delivered"


class ProductType(str, Enum):
    """Products offered by the shop."""

    T_SHIRTS = "T-Shirts"
    POLO_SHIRTS = "Polo Shirts"
    CAPS_AND_HATS = "Caps & Hats"
    MUGS = "Mugs"
    BANNERS = "Banners"
    BUSINESS_CARDS = "Business Cards"
    FLYERS = "Flyers"
    STICKERS = "Stickers"
    NOTEBOOKS = "Notebooks"
    BAGS = "Bags"
    PENS = "Pens"
    LANYARDS = "Lanyards"
    KEYCHAINS = "Keychains"
    UMBRELLAS = "Umbrellas"
    USB_DRIVES = "USB Drives"
    OTHER = "Other"


class PricingBreakdown(BaseModel):
    """Derived pricing for a quantity and unit price."""

    subtotal: float
    discount_percentage: float
    discount: float
    vat: float  # rate, in percent
    vat_amount: float
    total: float
    profit_margin: float  # display heuristic, not an accounting figure


class OrderDraft(BaseModel):
    """Caller-supplied order data; numbering and pricing are derived."""

    client_id: str
    client_name: str
    product_type: ProductType
    quantity: int
    unit_price: float
    status: OrderStatus = OrderStatus.PENDING
    notes: str | None = None


class Order(BaseModel):
    """A printing/branding order with its derived pricing."""

    id: str = Field(default_factory=new_id)
    order_number: str
    client_id: str
    client_name: str  # snapshot at creation time
    product_type: ProductType
    quantity: int
    unit_price: float
    discount_percentage: float = 0.0
    discount: float = 0.0
    subtotal: float = 0.0
    vat: float = 0.0
    vat_amount: float = 0.0
    total: float = 0.0
    profit_margin: float = 0.0
    status: OrderStatus = OrderStatus.PENDING
    notes: str | None = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def is_fulfilled(self) -> bool:
        """Completed and delivered orders count towards sales."""
        return self.status in (OrderStatus.COMPLETED, OrderStatus.DELIVERED)


# Fields an update may never overwrite
ORDER_IDENTITY_FIELDS = frozenset({"id", "order_number", "created_at"})

# Fields always recomputed from quantity and unit_price
ORDER_DERIVED_FIELDS = frozenset(PricingBreakdown.model_fields)
