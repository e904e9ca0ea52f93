"""API route modules."""

from dsvflow.api.routes.clients import router as clients_router
from dsvflow.api.routes.health import router as health_router
from dsvflow.api.routes.inventory import router as inventory_router
from dsvflow.api.routes.orders import router as orders_router
from dsvflow.api.routes.reports import router as reports_router

__all__ = [
    "clients_router",
    "health_router",
    "inventory_router",
    "orders_router",
    "reports_router",
]
