"""Client endpoints."""

from fastapi import APIRouter, Depends, status

from dsvflow.api.dependencies import get_clients, get_orders
from dsvflow.application.dto.requests import CreateClientRequest, UpdateClientRequest
from dsvflow.application.dto.responses import ClientDetailResponse, ErrorResponse
from dsvflow.application.repositories import ClientRepository, OrderRepository
from dsvflow.core.entities.client import Client, ClientDraft
from dsvflow.core.exceptions import ClientNotFoundError

router = APIRouter(prefix="/api/clients", tags=["clients"])


@router.get("", response_model=list[Client])
async def list_clients(
    q: str | None = None,
    clients: ClientRepository = Depends(get_clients),
) -> list[Client]:
    """List clients, newest first; ``q`` filters by name, company or email."""
    if q:
        return clients.search(q)
    return clients.list()


@router.post("", response_model=Client, status_code=status.HTTP_201_CREATED)
async def create_client(
    request: CreateClientRequest,
    clients: ClientRepository = Depends(get_clients),
) -> Client:
    return await clients.create(ClientDraft(**request.model_dump()))


@router.get(
    "/{client_id}",
    response_model=ClientDetailResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_client(
    client_id: str,
    clients: ClientRepository = Depends(get_clients),
    orders: OrderRepository = Depends(get_orders),
) -> ClientDetailResponse:
    """A client with their order history."""
    client = clients.get(client_id)
    if client is None:
        raise ClientNotFoundError(client_id)
    return ClientDetailResponse(client=client, orders=orders.by_client(client_id))


@router.patch(
    "/{client_id}",
    response_model=Client,
    responses={404: {"model": ErrorResponse}},
)
async def update_client(
    client_id: str,
    request: UpdateClientRequest,
    clients: ClientRepository = Depends(get_clients),
) -> Client:
    client = await clients.update(client_id, request.model_dump(exclude_unset=True))
    if client is None:
        raise ClientNotFoundError(client_id)
    return client


@router.delete(
    "/{client_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_client(
    client_id: str,
    clients: ClientRepository = Depends(get_clients),
) -> None:
    if clients.get(client_id) is None:
        raise ClientNotFoundError(client_id)
    await clients.delete(client_id)
