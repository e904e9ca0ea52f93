"""Place Order Use Case: create an order for a known client and update their totals."""

from dataclasses import dataclass

from dsvflow.application.dto.requests import CreateOrderRequest
from dsvflow.application.repositories import ClientRepository, OrderRepository
from dsvflow.config import get_logger
from dsvflow.core.entities.client import Client
from dsvflow.core.entities.order import Order, OrderDraft
from dsvflow.core.exceptions import ClientNotFoundError

logger = get_logger(__name__)


@dataclass
class PlaceOrderResult:
    """Result of placing an order."""

    order: Order
    client: Client  # client as it stands after the order was recorded


class PlaceOrderUseCase:
    """Create an order, snapshotting the client name at creation time."""

    def __init__(
        self,
        order_repository: OrderRepository | None = None,
        client_repository: ClientRepository | None = None,
        track_client_stats: bool | None = None,
    ):
        self._orders = order_repository
        self._clients = client_repository
        self._track_client_stats = track_client_stats

    async def _get_orders(self) -> OrderRepository:
        if self._orders is None:
            from dsvflow.application.services import get_order_repository

            self._orders = await get_order_repository()
        return self._orders

    async def _get_clients(self) -> ClientRepository:
        if self._clients is None:
            from dsvflow.application.services import get_client_repository

            self._clients = await get_client_repository()
        return self._clients

    def _tracking(self) -> bool:
        if self._track_client_stats is None:
            from dsvflow.config import get_settings

            self._track_client_stats = get_settings().business.track_client_stats
        return self._track_client_stats

    async def execute(self, request: CreateOrderRequest) -> PlaceOrderResult:
        """Execute place order use case."""
        logger.info(
            "place_order_started",
            client_id=request.client_id,
            product_type=request.product_type.value,
            quantity=request.quantity,
        )

        clients = await self._get_clients()
        client = clients.get(request.client_id)
        if client is None:
            raise ClientNotFoundError(request.client_id)

        orders = await self._get_orders()
        order = await orders.create(
            OrderDraft(
                client_id=client.id,
                client_name=client.name,
                product_type=request.product_type,
                quantity=request.quantity,
                unit_price=request.unit_price,
                status=request.status,
                notes=request.notes,
            )
        )

        if self._tracking():
            try:
                client = await clients.record_order(client.id, order.total) or client
            except Exception as e:
                # Keep orders and client totals in step
                logger.error("place_order_failed", order_id=order.id, error=str(e))
                await orders.discard(order.id)
                raise

        logger.info(
            "place_order_complete",
            order_id=order.id,
            order_number=order.order_number,
            total=round(order.total, 2),
        )
        return PlaceOrderResult(order=order, client=client)
