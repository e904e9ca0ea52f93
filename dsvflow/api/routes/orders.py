"""Order endpoints: placement, quoting, editing and the status flow."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status

from dsvflow.api.dependencies import get_orders, get_place_order_use_case
from dsvflow.application.dto.requests import (
    CreateOrderRequest,
    QuoteRequest,
    SetOrderStatusRequest,
    UpdateOrderRequest,
)
from dsvflow.application.dto.responses import ErrorResponse, QuoteResponse
from dsvflow.application.repositories import OrderRepository
from dsvflow.application.use_cases import PlaceOrderUseCase
from dsvflow.core.entities.order import Order, OrderStatus
from dsvflow.core.exceptions import InvalidDateRangeError, OrderNotFoundError
from dsvflow.core.services.pricing import get_discount_tier
from dsvflow.core.services.reporting import day_window

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.get("", response_model=list[Order])
async def list_orders(
    client_id: str | None = None,
    status_filter: OrderStatus | None = Query(default=None, alias="status"),
    start_date: date | None = None,
    end_date: date | None = None,
    orders: OrderRepository = Depends(get_orders),
) -> list[Order]:
    """
    List orders, newest first.

    Filters combine: by client, by status and by creation date (whole days,
    both ends inclusive).
    """
    result = orders.list()
    if client_id is not None:
        result = [o for o in result if o.client_id == client_id]
    if status_filter is not None:
        result = [o for o in result if o.status == status_filter]
    if start_date is not None or end_date is not None:
        start_date = start_date or date.min
        end_date = end_date or date.max
        if end_date < start_date:
            raise InvalidDateRangeError(start_date, end_date)
        start, end = day_window(start_date, end_date)
        window = {o.id for o in orders.by_date_range(start, end)}
        result = [o for o in result if o.id in window]
    return result


@router.post(
    "",
    response_model=Order,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def create_order(
    request: CreateOrderRequest,
    use_case: PlaceOrderUseCase = Depends(get_place_order_use_case),
) -> Order:
    """Place an order for an existing client."""
    result = await use_case.execute(request)
    return result.order


@router.post("/quote", response_model=QuoteResponse)
async def quote(
    request: QuoteRequest,
    orders: OrderRepository = Depends(get_orders),
) -> QuoteResponse:
    """Price a quantity without creating an order."""
    pricing = orders.quote(request.quantity, request.unit_price)
    return QuoteResponse(
        quantity=request.quantity,
        unit_price=request.unit_price,
        tier_label=get_discount_tier(request.quantity).label,
        **pricing.model_dump(),
    )


@router.get(
    "/{order_id}",
    response_model=Order,
    responses={404: {"model": ErrorResponse}},
)
async def get_order(
    order_id: str,
    orders: OrderRepository = Depends(get_orders),
) -> Order:
    order = orders.get(order_id)
    if order is None:
        raise OrderNotFoundError(order_id)
    return order


@router.patch(
    "/{order_id}",
    response_model=Order,
    responses={404: {"model": ErrorResponse}},
)
async def update_order(
    order_id: str,
    request: UpdateOrderRequest,
    orders: OrderRepository = Depends(get_orders),
) -> Order:
    """Edit an order; pricing is recomputed."""
    order = await orders.update(order_id, request.model_dump(exclude_unset=True))
    if order is None:
        raise OrderNotFoundError(order_id)
    return order


@router.put(
    "/{order_id}/status",
    response_model=Order,
    responses={404: {"model": ErrorResponse}},
)
async def set_order_status(
    order_id: str,
    request: SetOrderStatusRequest,
    orders: OrderRepository = Depends(get_orders),
) -> Order:
    """Set any status, including moving backwards."""
    order = await orders.update_status(order_id, request.status)
    if order is None:
        raise OrderNotFoundError(order_id)
    return order


@router.post(
    "/{order_id}/advance",
    response_model=Order,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def advance_order(
    order_id: str,
    orders: OrderRepository = Depends(get_orders),
) -> Order:
    """Move an order one step along the status flow."""
    if orders.get(order_id) is None:
        raise OrderNotFoundError(order_id)
    order = await orders.advance_status(order_id)
    if order is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Order {order_id} is already {OrderStatus.DELIVERED.value}",
        )
    return order


@router.delete(
    "/{order_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_order(
    order_id: str,
    orders: OrderRepository = Depends(get_orders),
) -> None:
    if orders.get(order_id) is None:
        raise OrderNotFoundError(order_id)
    await orders.delete(order_id)
