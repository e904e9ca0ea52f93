"""Tests for volume discount tiers and order pricing."""

import pytest

from dsvflow.core.services.pricing import (
    DISCOUNT_TIERS,
    VAT_RATE,
    calculate_discount,
    calculate_pricing,
    get_discount_tier,
)


class TestDiscountTiers:
    @pytest.mark.parametrize(
        ("quantity", "expected"),
        [
            (0, 0),
            (1, 0),
            (99, 0),
            (100, 5),
            (199, 5),
            (200, 10),
            (499, 10),
            (500, 15),
            (999, 15),
            (1000, 20),
            (25000, 20),
        ],
    )
    def test_tier_boundaries(self, quantity, expected):
        assert calculate_discount(quantity) == expected

    def test_tiers_sorted_descending(self):
        minimums = [t.min_quantity for t in DISCOUNT_TIERS]
        assert minimums == sorted(minimums, reverse=True)
        assert minimums[-1] == 0

    def test_tier_labels(self):
        assert get_discount_tier(1000).label == "Maximum (1000+ units)"
        assert get_discount_tier(50).label == "No discount"


class TestCalculatePricing:
    def test_documented_example(self):
        pricing = calculate_pricing(500, 10)
        assert pricing.subtotal == pytest.approx(5000)
        assert pricing.discount_percentage == 15
        assert pricing.discount == pytest.approx(750)
        assert pricing.vat == pytest.approx(15)
        assert pricing.vat_amount == pytest.approx(637.5)
        assert pricing.total == pytest.approx(4887.5)
        assert pricing.profit_margin == 15

    @pytest.mark.parametrize(
        ("quantity", "unit_price"),
        [(1, 3.5), (150, 12.0), (350, 0.75), (2000, 4.2)],
    )
    def test_total_formula(self, quantity, unit_price):
        pricing = calculate_pricing(quantity, unit_price)
        tier = calculate_discount(quantity)
        expected = quantity * unit_price * (1 - tier / 100) * (1 + VAT_RATE)
        assert pricing.total == pytest.approx(expected)
        assert pricing.total == pytest.approx(
            pricing.subtotal - pricing.discount + pricing.vat_amount
        )

    def test_no_discount_below_first_tier(self):
        pricing = calculate_pricing(10, 20)
        assert pricing.discount == 0
        assert pricing.profit_margin == 30
        assert pricing.total == pytest.approx(230)

    def test_profit_margin_floor(self):
        assert calculate_pricing(1000, 1).profit_margin == 10

    def test_zero_quantity(self):
        pricing = calculate_pricing(0, 10)
        assert pricing.subtotal == 0
        assert pricing.total == 0
