"""DSV Flow: order, client and inventory management for a print and branding shop."""

__version__ = "1.0.0"
