"""
Domain exceptions for the DSV Flow application.

Repository lookups that miss are not errors (they return None); these
types cover the boundary and storage failures that are surfaced.
"""

from typing import Any


class DSVError(Exception):
    """Base exception for all DSV Flow errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Storage Exceptions
class StorageError(DSVError):
    """Base exception for storage operations."""

    pass


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


class CorruptSlotError(StorageError):
    """A key-value slot holds something other than a list of records."""

    def __init__(self, key: str, reason: str):
        super().__init__(
            f"Stored collection '{key}' is unreadable: {reason}",
            code="CORRUPT_SLOT",
            details={"key": key, "reason": reason},
        )


# Lookup Exceptions (raised at the API / use case boundary only)
class NotFoundError(DSVError):
    """Base exception for entities that do not exist."""

    pass


class ClientNotFoundError(NotFoundError):
    """Client not found."""

    def __init__(self, client_id: str):
        super().__init__(
            f"Client not found: {client_id}",
            code="CLIENT_NOT_FOUND",
            details={"client_id": client_id},
        )


class OrderNotFoundError(NotFoundError):
    """Order not found."""

    def __init__(self, order_id: str):
        super().__init__(
            f"Order not found: {order_id}",
            code="ORDER_NOT_FOUND",
            details={"order_id": order_id},
        )


class InventoryItemNotFoundError(NotFoundError):
    """Inventory item not found."""

    def __init__(self, item_id: str):
        super().__init__(
            f"Inventory item not found: {item_id}",
            code="INVENTORY_ITEM_NOT_FOUND",
            details={"item_id": item_id},
        )


# Validation Exceptions
class ValidationError(DSVError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


class InvalidDateRangeError(ValidationError):
    """Report window ends before it starts."""

    def __init__(self, start: Any, end: Any):
        super().__init__(
            field="end",
            message=f"End date {end} is before start date {start}",
            value=end,
        )
        self.details.update({"start": str(start), "end": str(end)})


class ConfigurationError(DSVError):
    """Configuration error."""

    pass
