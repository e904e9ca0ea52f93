"""Data Transfer Objects for the API layer.

Request DTOs validate incoming payloads; response DTOs shape what the API
returns where an entity alone is not enough.
"""

from dsvflow.application.dto.requests import (
    CreateClientRequest,
    CreateInventoryItemRequest,
    CreateOrderRequest,
    QuoteRequest,
    SetOrderStatusRequest,
    StockAdjustmentRequest,
    UpdateClientRequest,
    UpdateInventoryItemRequest,
    UpdateOrderRequest,
)
from dsvflow.application.dto.responses import (
    ClientDetailResponse,
    ErrorResponse,
    HealthResponse,
    InventoryItemResponse,
    QuoteResponse,
)

__all__ = [
    "ClientDetailResponse",
    "CreateClientRequest",
    "CreateInventoryItemRequest",
    "CreateOrderRequest",
    "ErrorResponse",
    "HealthResponse",
    "InventoryItemResponse",
    "QuoteRequest",
    "QuoteResponse",
    "SetOrderStatusRequest",
    "StockAdjustmentRequest",
    "UpdateClientRequest",
    "UpdateInventoryItemRequest",
    "UpdateOrderRequest",
]
