"""Tests for the fpdf2 sales report renderer."""

import zlib
from datetime import UTC, date, datetime

import pytest

from dsvflow.config.settings import BusinessSettings, PdfSettings
from dsvflow.core.entities.order import Order, OrderStatus, ProductType
from dsvflow.core.services.pricing import calculate_pricing
from dsvflow.core.services.reporting import build_sales_report, day_window
from dsvflow.infrastructure.pdf import Fpdf2SalesReportRenderer
from dsvflow.infrastructure.pdf.sales_report_renderer import _latin1


def _extract_pdf_text(pdf_bytes: bytes) -> str:
    """Decompress FlateDecode streams and return everything as latin-1 text."""
    texts = [pdf_bytes.decode("latin-1")]
    start = 0
    while True:
        idx = pdf_bytes.find(b"stream", start)
        if idx == -1:
            break
        data_start = idx + len(b"stream")
        if pdf_bytes[data_start:data_start + 2] == b"\r\n":
            data_start += 2
        elif pdf_bytes[data_start:data_start + 1] == b"\n":
            data_start += 1
        end = pdf_bytes.find(b"endstream", data_start)
        if end == -1:
            break
        try:
            texts.append(zlib.decompress(pdf_bytes[data_start:end]).decode("latin-1"))
        except zlib.error:
            pass
        start = end + len(b"endstream")
    return "\n".join(texts)


def _order(number: str, status: OrderStatus, product: ProductType, client: str) -> Order:
    created = datetime(2026, 10, 10, 9, tzinfo=UTC)
    return Order(
        order_number=number,
        client_id="c-1",
        client_name=client,
        product_type=product,
        quantity=500,
        unit_price=10,
        status=status,
        created_at=created,
        updated_at=created,
        **calculate_pricing(500, 10).model_dump(),
    )


@pytest.fixture
def renderer() -> Fpdf2SalesReportRenderer:
    return Fpdf2SalesReportRenderer(
        PdfSettings(title="Sales Report", footer_text="Generated by DSV Flow", currency_symbol="GHS"),
        BusinessSettings(company_name="DSV Enterprise"),
    )


@pytest.fixture
def report():
    orders = [
        _order("DSV-20261010-001", OrderStatus.COMPLETED, ProductType.T_SHIRTS, "Acme"),
        _order("DSV-20261010-002", OrderStatus.PENDING, ProductType.CAPS_AND_HATS, "Ama Ɔsei"),
    ]
    start, end = day_window(date(2026, 10, 1), date(2026, 10, 19))
    return build_sales_report(orders, start, end)


class TestFpdf2SalesReportRenderer:
    def test_media_type(self, renderer):
        assert renderer.media_type == "application/pdf"

    def test_renders_pdf_bytes(self, renderer, report):
        content = renderer.render(report)
        assert isinstance(content, bytes)
        assert content.startswith(b"%PDF")

    def test_contains_report_sections(self, renderer, report):
        text = _extract_pdf_text(renderer.render(report))
        assert "DSV Enterprise - Sales Report" in text
        assert "Revenue by Product" in text
        assert "Orders by Status" in text
        assert "DSV-20261010-002" in text
        assert "GHS 4,887.50" in text

    def test_empty_report(self, renderer):
        start, end = day_window(date(2026, 10, 1), date(2026, 10, 19))
        text = _extract_pdf_text(renderer.render(build_sales_report([], start, end)))
        assert "No orders found in the selected date range" in text
        assert "Order Details" not in text

    def test_defaults_from_settings(self, report):
        content = Fpdf2SalesReportRenderer().render(report)
        assert content.startswith(b"%PDF")


def test_latin1_sanitiser():
    assert _latin1("GH₵ 10") == "GH? 10"
    assert _latin1("Café") == "Café"
