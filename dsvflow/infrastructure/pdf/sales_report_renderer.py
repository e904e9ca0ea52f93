"""
Sales report PDF renderer using fpdf2.

Generates a printable sales report: period header, headline metrics,
revenue by product, orders by status and the order detail table, with a
page-numbered footer. Core fonts are latin-1 only, so text is sanitised
before it is drawn.
"""

from datetime import UTC, datetime

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from dsvflow.config.settings import BusinessSettings, PdfSettings, get_settings
from dsvflow.core.entities.report import SalesReport
from dsvflow.core.interfaces.report_renderer import IReportRenderer
from dsvflow.core.services.formatting import format_currency, format_date


def _latin1(text: str) -> str:
    """Replace characters the core fonts cannot encode with '?'."""
    return text.encode("latin-1", "replace").decode("latin-1")


# ---------------------------------------------------------------------------
# Custom FPDF subclass with page-number footer
# ---------------------------------------------------------------------------


class _ReportPdf(FPDF):
    """FPDF subclass that renders a footer on every page."""

    def __init__(self, pdf_settings: PdfSettings) -> None:
        super().__init__()
        self._pdf_settings = pdf_settings
        self._generation_date = datetime.now(UTC).strftime("%Y-%m-%d %H:%M UTC")

    def footer(self) -> None:
        """Render footer with page numbers and generation date."""
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.cell(0, 5, _latin1(self._pdf_settings.footer_text), align="L")
        self.set_x(-60)
        self.cell(
            0,
            5,
            f"Page {self.page_no()} of {{nb}} | {self._generation_date}",
            align="R",
        )


# ---------------------------------------------------------------------------
# Concrete renderer
# ---------------------------------------------------------------------------


class Fpdf2SalesReportRenderer(IReportRenderer):
    """Renders sales reports as PDF documents."""

    media_type = "application/pdf"

    def __init__(
        self,
        pdf_settings: PdfSettings | None = None,
        business_settings: BusinessSettings | None = None,
    ) -> None:
        if pdf_settings is None:
            pdf_settings = get_settings().pdf
        if business_settings is None:
            business_settings = get_settings().business
        self._settings = pdf_settings
        self._company_name = business_settings.company_name

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render(self, report: SalesReport) -> bytes:
        """Render a SalesReport into PDF bytes."""
        pdf = _ReportPdf(self._settings)
        pdf.set_auto_page_break(auto=True, margin=20)
        pdf.add_page()

        self._render_header(pdf, report)
        self._render_metrics(pdf, report)
        if report.is_empty:
            pdf.set_font("Helvetica", "I", 10)
            pdf.cell(
                0, 8, "No orders found in the selected date range", align="C",
                new_x=XPos.LMARGIN, new_y=YPos.NEXT,
            )
        else:
            self._render_product_table(pdf, report)
            self._render_status_table(pdf, report)
            self._render_orders_table(pdf, report)

        return bytes(pdf.output())

    def _money(self, amount: float) -> str:
        return format_currency(amount, self._settings.currency_symbol)

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def _render_header(self, pdf: FPDF, report: SalesReport) -> None:
        """Company name, report title and period."""
        pdf.set_font("Helvetica", "B", 16)
        pdf.cell(
            0, 10, _latin1(f"{self._company_name} - {self._settings.title}"),
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )
        pdf.set_font("Helvetica", "", 10)
        pdf.cell(
            0, 6,
            f"Period: {format_date(report.start)} - {format_date(report.end)}",
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )

        y = pdf.get_y() + 2
        pdf.set_draw_color(100, 100, 100)
        pdf.line(10, y, 200, y)
        pdf.set_draw_color(0, 0, 0)
        pdf.ln(6)

    def _render_metrics(self, pdf: FPDF, report: SalesReport) -> None:
        """Four headline figures in a row of boxes."""
        metrics = [
            ("Total Revenue", self._money(report.total_sales)),
            ("Total Orders", str(report.total_orders)),
            ("Avg Order Value", self._money(report.average_order_value)),
            ("Total Units", f"{report.total_units:,}"),
        ]
        width = 190 / len(metrics)

        pdf.set_font("Helvetica", "", 8)
        pdf.set_fill_color(245, 245, 245)
        for label, _ in metrics:
            pdf.cell(width, 6, label, border="LTR", fill=True, align="C")
        pdf.ln()
        pdf.set_font("Helvetica", "B", 11)
        for _, value in metrics:
            pdf.cell(width, 8, value, border="LBR", fill=True, align="C")
        pdf.ln(12)

    @staticmethod
    def _table_header(pdf: FPDF, title: str, headers: list[str], widths: list[int]) -> None:
        pdf.set_font("Helvetica", "B", 12)
        pdf.cell(0, 8, title, new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        pdf.set_font("Helvetica", "B", 9)
        pdf.set_fill_color(70, 70, 70)
        pdf.set_text_color(255, 255, 255)
        for header, width in zip(headers, widths):
            pdf.cell(width, 7, header, border=1, fill=True, align="C")
        pdf.ln()
        pdf.set_text_color(0, 0, 0)
        pdf.set_font("Helvetica", "", 8)

    @staticmethod
    def _row_fill(pdf: FPDF, idx: int) -> bool:
        """Alternating row background."""
        if idx % 2 == 0:
            pdf.set_fill_color(240, 240, 240)
            return True
        return False

    def _render_product_table(self, pdf: FPDF, report: SalesReport) -> None:
        widths = [60, 25, 30, 45, 30]
        self._table_header(
            pdf, "Revenue by Product",
            ["Product", "Orders", "Units", "Revenue", "Share"], widths,
        )
        for idx, entry in enumerate(report.product_breakdown, 1):
            fill = self._row_fill(pdf, idx)
            pdf.cell(widths[0], 6, _latin1(entry.product_type.value), border=1, fill=fill)
            pdf.cell(widths[1], 6, str(entry.count), border=1, align="R", fill=fill)
            pdf.cell(widths[2], 6, f"{entry.units:,}", border=1, align="R", fill=fill)
            pdf.cell(widths[3], 6, self._money(entry.revenue), border=1, align="R", fill=fill)
            pdf.cell(widths[4], 6, f"{entry.share:.0f}%", border=1, align="R", fill=fill)
            pdf.ln()
        pdf.ln(4)

    def _render_status_table(self, pdf: FPDF, report: SalesReport) -> None:
        widths = [60, 30, 30]
        self._table_header(pdf, "Orders by Status", ["Status", "Orders", "Share"], widths)
        for idx, entry in enumerate(report.status_breakdown, 1):
            fill = self._row_fill(pdf, idx)
            pdf.cell(widths[0], 6, entry.status.value, border=1, fill=fill)
            pdf.cell(widths[1], 6, str(entry.count), border=1, align="R", fill=fill)
            pdf.cell(widths[2], 6, f"{entry.share:.0f}%", border=1, align="R", fill=fill)
            pdf.ln()
        pdf.ln(4)

    def _render_orders_table(self, pdf: FPDF, report: SalesReport) -> None:
        # Order # | Date | Client | Product | Qty | Status | Total
        widths = [36, 22, 34, 28, 14, 22, 34]
        self._table_header(
            pdf, "Order Details",
            ["Order #", "Date", "Client", "Product", "Qty", "Status", "Total"], widths,
        )
        for idx, order in enumerate(report.orders, 1):
            fill = self._row_fill(pdf, idx)
            pdf.cell(widths[0], 6, order.order_number, border=1, fill=fill)
            pdf.cell(widths[1], 6, format_date(order.created_at), border=1, fill=fill)
            pdf.cell(widths[2], 6, _latin1(order.client_name[:22]), border=1, fill=fill)
            pdf.cell(widths[3], 6, _latin1(order.product_type.value), border=1, fill=fill)
            pdf.cell(widths[4], 6, f"{order.quantity:,}", border=1, align="R", fill=fill)
            pdf.cell(widths[5], 6, order.status.value, border=1, fill=fill)
            pdf.cell(widths[6], 6, self._money(order.total), border=1, align="R", fill=fill)
            pdf.ln()
