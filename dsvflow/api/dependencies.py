"""
Dependency injection for FastAPI.

Provides repositories and use cases to route handlers. Tests replace these
through ``app.dependency_overrides``.
"""

from fastapi import Depends

from dsvflow.application.repositories import (
    ClientRepository,
    InventoryRepository,
    OrderRepository,
)
from dsvflow.application.services import (
    get_client_repository,
    get_inventory_repository,
    get_order_repository,
)
from dsvflow.application.use_cases import (
    GenerateSalesReportUseCase,
    PlaceOrderUseCase,
)
from dsvflow.config import Settings, get_settings
from dsvflow.core.interfaces.report_renderer import IReportRenderer


def get_app_settings() -> Settings:
    return get_settings()


async def get_orders() -> OrderRepository:
    return await get_order_repository()


async def get_clients() -> ClientRepository:
    return await get_client_repository()


async def get_inventory() -> InventoryRepository:
    return await get_inventory_repository()


def get_report_renderer() -> IReportRenderer:
    from dsvflow.infrastructure.pdf import Fpdf2SalesReportRenderer

    return Fpdf2SalesReportRenderer()


def get_place_order_use_case(
    orders: OrderRepository = Depends(get_orders),
    clients: ClientRepository = Depends(get_clients),
    settings: Settings = Depends(get_app_settings),
) -> PlaceOrderUseCase:
    return PlaceOrderUseCase(
        order_repository=orders,
        client_repository=clients,
        track_client_stats=settings.business.track_client_stats,
    )


def get_sales_report_use_case(
    orders: OrderRepository = Depends(get_orders),
    renderer: IReportRenderer = Depends(get_report_renderer),
) -> GenerateSalesReportUseCase:
    return GenerateSalesReportUseCase(order_repository=orders, renderer=renderer)
