"""
Order pricing: volume discount tiers and VAT.

Pure functions; no I/O and no error conditions for valid input.
"""

from dataclasses import dataclass

from dsvflow.core.entities.order import PricingBreakdown


@dataclass(frozen=True)
class DiscountTier:
    """A volume discount rule."""

    min_quantity: int
    percentage: float
    label: str


# Scanned top-down; the first tier whose minimum is met wins
DISCOUNT_TIERS: tuple[DiscountTier, ...] = (
    DiscountTier(1000, 20, "Maximum (1000+ units)"),
    DiscountTier(500, 15, "Higher (500+ units)"),
    DiscountTier(200, 10, "Medium (200+ units)"),
    DiscountTier(100, 5, "Small (100+ units)"),
    DiscountTier(0, 0, "No discount"),
)

VAT_RATE = 0.15

BASE_PROFIT_MARGIN = 30.0
MIN_PROFIT_MARGIN = 10.0


def get_discount_tier(quantity: int) -> DiscountTier:
    """Return the highest tier whose minimum quantity is met."""
    for tier in DISCOUNT_TIERS:
        if quantity >= tier.min_quantity:
            return tier
    return DISCOUNT_TIERS[-1]


def calculate_discount(quantity: int) -> float:
    """Discount percentage for a quantity."""
    return get_discount_tier(quantity).percentage


def calculate_pricing(quantity: int, unit_price: float) -> PricingBreakdown:
    """
    Compute the full price breakdown for an order line.

    VAT is charged on the discounted subtotal. The profit margin is a
    display heuristic: the base margin less the discount, floored.
    """
    discount_percentage = calculate_discount(quantity)
    subtotal = quantity * unit_price
    discount = subtotal * (discount_percentage / 100)
    after_discount = subtotal - discount
    vat_amount = after_discount * VAT_RATE
    total = after_discount + vat_amount
    profit_margin = max(BASE_PROFIT_MARGIN - discount_percentage, MIN_PROFIT_MARGIN)

    return PricingBreakdown(
        subtotal=subtotal,
        discount_percentage=discount_percentage,
        discount=discount,
        vat=VAT_RATE * 100,
        vat_amount=vat_amount,
        total=total,
        profit_margin=profit_margin,
    )
