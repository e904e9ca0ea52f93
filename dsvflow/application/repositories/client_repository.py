"""Client repository over the client slot."""

from collections.abc import Mapping
from typing import Any

from dsvflow.application.repositories.base import Clock, CollectionRepository
from dsvflow.config import get_logger
from dsvflow.core.entities.client import CLIENT_IDENTITY_FIELDS, Client, ClientDraft
from dsvflow.core.entities.common import utc_now
from dsvflow.core.interfaces.kv_store import IKeyValueStore
from dsvflow.core.interfaces.notifier import INotifier

logger = get_logger(__name__)

# Running totals only change through record_order
_PROTECTED = CLIENT_IDENTITY_FIELDS | {"total_orders", "total_value"}


class ClientRepository(CollectionRepository):
    """Create, update and search clients; keep their running order totals."""

    model = Client

    def __init__(
        self,
        store: IKeyValueStore,
        key: str = "dsv_clients",
        notifier: INotifier | None = None,
        clock: Clock = utc_now,
    ):
        super().__init__(store, key, notifier=notifier, clock=clock)

    async def create(self, draft: ClientDraft) -> Client:
        await self._ensure_loaded()
        now = self._clock()
        client = Client(**draft.model_dump(), created_at=now, updated_at=now)
        await self._commit(self._prepended(client))

        logger.info("client_created", client_id=client.id)
        self._notify(
            "Client added successfully",
            f"{client.name} has been added to your clients.",
        )
        return client

    async def update(self, client_id: str, changes: Mapping[str, Any]) -> Client | None:
        await self._ensure_loaded()
        idx = self._index_of(client_id)
        if idx is None:
            return None

        client = self._merge(
            self._items[idx], changes, _PROTECTED, updated_at=self._clock()
        )
        await self._commit(self._replaced(idx, client))

        logger.info("client_updated", client_id=client_id, fields=sorted(changes))
        self._notify("Client updated successfully")
        return client

    async def delete(self, client_id: str) -> None:
        """Remove a client. Their orders are left in place."""
        if await self._remove(client_id):
            logger.info("client_deleted", client_id=client_id)
            self._notify("Client deleted successfully")

    async def record_order(self, client_id: str, order_total: float) -> Client | None:
        """Count one more order and add its total to the client's value."""
        await self._ensure_loaded()
        idx = self._index_of(client_id)
        if idx is None:
            return None

        current = self._items[idx]
        client = current.model_copy(
            update={
                "total_orders": current.total_orders + 1,
                "total_value": current.total_value + order_total,
                "updated_at": self._clock(),
            }
        )
        await self._commit(self._replaced(idx, client))

        logger.info(
            "client_order_recorded",
            client_id=client_id,
            total_orders=client.total_orders,
        )
        return client

    def search(self, query: str) -> list[Client]:
        """Case-insensitive match on name, company or email."""
        needle = query.lower()
        return [
            c
            for c in self._items
            if needle in c.name.lower()
            or needle in c.company.lower()
            or needle in c.email.lower()
        ]
