"""PDF rendering."""

from dsvflow.infrastructure.pdf.sales_report_renderer import Fpdf2SalesReportRenderer

__all__ = ["Fpdf2SalesReportRenderer"]
