"""Application use cases."""

from dsvflow.application.use_cases.generate_sales_report import (
    GenerateSalesReportUseCase,
    RenderedReport,
)
from dsvflow.application.use_cases.place_order import (
    PlaceOrderResult,
    PlaceOrderUseCase,
)

__all__ = [
    "GenerateSalesReportUseCase",
    "PlaceOrderResult",
    "PlaceOrderUseCase",
    "RenderedReport",
]
