"""Tests for reporting entities."""

from datetime import UTC, datetime

from dsvflow.core.entities.report import DashboardStats, SalesReport


class TestSalesReport:
    def test_empty_report(self):
        now = datetime(2026, 10, 19, tzinfo=UTC)
        report = SalesReport(start=now, end=now)
        assert report.is_empty
        assert report.total_sales == 0.0
        assert report.product_breakdown == []


class TestDashboardStats:
    def test_defaults_are_zero(self):
        stats = DashboardStats()
        assert stats.total_orders == 0
        assert stats.low_stock_count == 0
