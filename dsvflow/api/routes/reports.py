"""Reporting endpoints: sales reports and dashboard figures."""

from datetime import date

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from dsvflow.api.dependencies import get_inventory, get_orders, get_sales_report_use_case
from dsvflow.application.dto.responses import ErrorResponse
from dsvflow.application.repositories import InventoryRepository, OrderRepository
from dsvflow.application.use_cases import GenerateSalesReportUseCase
from dsvflow.core.entities.common import utc_now
from dsvflow.core.entities.report import DashboardStats, SalesReport
from dsvflow.core.services.reporting import build_dashboard_stats

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.get(
    "/sales",
    response_model=SalesReport,
    responses={400: {"model": ErrorResponse}},
)
async def sales_report(
    start_date: date | None = None,
    end_date: date | None = None,
    use_case: GenerateSalesReportUseCase = Depends(get_sales_report_use_case),
) -> SalesReport:
    """Sales for whole days; defaults to the current month to date."""
    return await use_case.execute(start_date, end_date)


@router.get(
    "/sales/pdf",
    response_class=Response,
    responses={
        200: {"content": {"application/pdf": {}}},
        400: {"model": ErrorResponse},
    },
)
async def sales_report_pdf(
    start_date: date | None = None,
    end_date: date | None = None,
    use_case: GenerateSalesReportUseCase = Depends(get_sales_report_use_case),
) -> Response:
    """Download the sales report as a PDF document."""
    rendered = await use_case.render(start_date, end_date)
    return Response(
        content=rendered.content,
        media_type=rendered.media_type,
        headers={"Content-Disposition": f'attachment; filename="{rendered.filename}"'},
    )


@router.get("/dashboard", response_model=DashboardStats)
async def dashboard(
    orders: OrderRepository = Depends(get_orders),
    inventory: InventoryRepository = Depends(get_inventory),
) -> DashboardStats:
    return build_dashboard_stats(
        orders.list(),
        utc_now(),
        low_stock_count=len(inventory.low_stock_items()),
    )
