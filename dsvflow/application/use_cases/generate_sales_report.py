"""Generate Sales Report Use Case: aggregate a date window and render it."""

from dataclasses import dataclass
from datetime import date

from dsvflow.application.repositories import OrderRepository
from dsvflow.config import get_logger
from dsvflow.core.entities.common import utc_now
from dsvflow.core.entities.report import SalesReport
from dsvflow.core.exceptions import InvalidDateRangeError
from dsvflow.core.interfaces.report_renderer import IReportRenderer
from dsvflow.core.services.reporting import build_sales_report, day_window

logger = get_logger(__name__)


@dataclass
class RenderedReport:
    """A rendered sales report document."""

    content: bytes
    media_type: str
    filename: str
    report: SalesReport


class GenerateSalesReportUseCase:
    """Build sales reports for whole-day windows.

    The window defaults to the first day of the current month through today.
    """

    def __init__(
        self,
        order_repository: OrderRepository | None = None,
        renderer: IReportRenderer | None = None,
        clock=utc_now,
    ):
        self._orders = order_repository
        self._renderer = renderer
        self._clock = clock

    async def _get_orders(self) -> OrderRepository:
        if self._orders is None:
            from dsvflow.application.services import get_order_repository

            self._orders = await get_order_repository()
        return self._orders

    def _get_renderer(self) -> IReportRenderer:
        if self._renderer is None:
            from dsvflow.infrastructure.pdf import Fpdf2SalesReportRenderer

            self._renderer = Fpdf2SalesReportRenderer()
        return self._renderer

    def resolve_window(
        self, start_date: date | None = None, end_date: date | None = None
    ) -> tuple[date, date]:
        today = self._clock().date()
        start_date = start_date or today.replace(day=1)
        end_date = end_date or today
        if end_date < start_date:
            raise InvalidDateRangeError(start_date, end_date)
        return start_date, end_date

    async def execute(
        self, start_date: date | None = None, end_date: date | None = None
    ) -> SalesReport:
        """Aggregate orders created between the two dates, inclusive."""
        start_date, end_date = self.resolve_window(start_date, end_date)
        orders = await self._get_orders()
        start, end = day_window(start_date, end_date)
        report = build_sales_report(orders.list(), start, end)

        logger.info(
            "sales_report_built",
            start=start_date.isoformat(),
            end=end_date.isoformat(),
            total_orders=report.total_orders,
            total_sales=round(report.total_sales, 2),
        )
        return report

    async def render(
        self, start_date: date | None = None, end_date: date | None = None
    ) -> RenderedReport:
        """Build the report and render it to a document."""
        report = await self.execute(start_date, end_date)
        renderer = self._get_renderer()
        content = renderer.render(report)

        filename = (
            f"sales-report-{report.start.date().isoformat()}"
            f"-to-{report.end.date().isoformat()}.pdf"
        )
        logger.info("sales_report_rendered", filename=filename, size=len(content))
        return RenderedReport(
            content=content,
            media_type=renderer.media_type,
            filename=filename,
            report=report,
        )
