"""Inventory endpoints: stock items, adjustments and low-stock alerts."""

from fastapi import APIRouter, Depends, status

from dsvflow.api.dependencies import get_inventory
from dsvflow.application.dto.requests import (
    CreateInventoryItemRequest,
    StockAdjustmentRequest,
    UpdateInventoryItemRequest,
)
from dsvflow.application.dto.responses import ErrorResponse, InventoryItemResponse
from dsvflow.application.repositories import InventoryRepository
from dsvflow.core.entities.inventory import InventoryItem, InventoryItemDraft
from dsvflow.core.exceptions import InventoryItemNotFoundError

router = APIRouter(prefix="/api/inventory", tags=["inventory"])


def _found(item: InventoryItem | None, item_id: str) -> InventoryItemResponse:
    if item is None:
        raise InventoryItemNotFoundError(item_id)
    return InventoryItemResponse.from_item(item)


@router.get("", response_model=list[InventoryItemResponse])
async def list_items(
    q: str | None = None,
    inventory: InventoryRepository = Depends(get_inventory),
) -> list[InventoryItemResponse]:
    """List stock items; ``q`` filters by name or category."""
    items = inventory.search(q) if q else inventory.list()
    return [InventoryItemResponse.from_item(item) for item in items]


@router.get("/low-stock", response_model=list[InventoryItemResponse])
async def low_stock(
    inventory: InventoryRepository = Depends(get_inventory),
) -> list[InventoryItemResponse]:
    """Items at or below their minimum stock."""
    return [InventoryItemResponse.from_item(item) for item in inventory.low_stock_items()]


@router.post("", response_model=InventoryItemResponse, status_code=status.HTTP_201_CREATED)
async def create_item(
    request: CreateInventoryItemRequest,
    inventory: InventoryRepository = Depends(get_inventory),
) -> InventoryItemResponse:
    item = await inventory.create(InventoryItemDraft(**request.model_dump()))
    return InventoryItemResponse.from_item(item)


@router.get(
    "/{item_id}",
    response_model=InventoryItemResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_item(
    item_id: str,
    inventory: InventoryRepository = Depends(get_inventory),
) -> InventoryItemResponse:
    return _found(inventory.get(item_id), item_id)


@router.patch(
    "/{item_id}",
    response_model=InventoryItemResponse,
    responses={404: {"model": ErrorResponse}},
)
async def update_item(
    item_id: str,
    request: UpdateInventoryItemRequest,
    inventory: InventoryRepository = Depends(get_inventory),
) -> InventoryItemResponse:
    item = await inventory.update(item_id, request.model_dump(exclude_unset=True))
    return _found(item, item_id)


@router.post(
    "/{item_id}/add",
    response_model=InventoryItemResponse,
    responses={404: {"model": ErrorResponse}},
)
async def add_stock(
    item_id: str,
    request: StockAdjustmentRequest,
    inventory: InventoryRepository = Depends(get_inventory),
) -> InventoryItemResponse:
    return _found(await inventory.add_stock(item_id, request.amount), item_id)


@router.post(
    "/{item_id}/reduce",
    response_model=InventoryItemResponse,
    responses={404: {"model": ErrorResponse}},
)
async def reduce_stock(
    item_id: str,
    request: StockAdjustmentRequest,
    inventory: InventoryRepository = Depends(get_inventory),
) -> InventoryItemResponse:
    """Remove units; the quantity never drops below zero."""
    return _found(await inventory.reduce_stock(item_id, request.amount), item_id)


@router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_item(
    item_id: str,
    inventory: InventoryRepository = Depends(get_inventory),
) -> None:
    if inventory.get(item_id) is None:
        raise InventoryItemNotFoundError(item_id)
    await inventory.delete(item_id)
