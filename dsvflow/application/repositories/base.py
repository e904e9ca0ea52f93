"""
Shared plumbing for collection repositories.

Each repository owns one in-memory list of entities mirrored to a single
key-value slot. The list is hydrated by ``load()`` and rewritten whole
after every mutation. Lookups that miss return None; they never raise.
"""

from collections.abc import Callable, Iterable, Mapping
from datetime import datetime
from typing import Any, ClassVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from dsvflow.config import get_logger
from dsvflow.core.entities.common import utc_now
from dsvflow.core.entities.notification import Notification, NotificationLevel
from dsvflow.core.exceptions import CorruptSlotError
from dsvflow.core.interfaces.kv_store import IKeyValueStore
from dsvflow.core.interfaces.notifier import INotifier

logger = get_logger(__name__)

Clock = Callable[[], datetime]


class CollectionRepository:
    """Base for repositories backed by one key-value slot."""

    model: ClassVar[type[BaseModel]]

    def __init__(
        self,
        store: IKeyValueStore,
        key: str,
        notifier: INotifier | None = None,
        clock: Clock = utc_now,
    ):
        self._store = store
        self._key = key
        self._notifier = notifier
        self._clock = clock
        self._items: list[Any] = []
        self._loaded = False

    async def load(self) -> list[Any]:
        """Hydrate from the store, falling back to the default collection."""
        raw = await self._store.get(self._key)
        if raw is None:
            self._items = self._default_items()
        else:
            self._items = self._parse(raw)
        self._loaded = True
        logger.info("collection_loaded", key=self._key, count=len(self._items))
        return self.list()

    def _default_items(self) -> list[Any]:
        """Collection used when the slot has never been written."""
        return []

    def _parse(self, raw: Any) -> list[Any]:
        if not isinstance(raw, list):
            raise CorruptSlotError(self._key, f"expected a list, got {type(raw).__name__}")
        try:
            return [self.model.model_validate(record) for record in raw]
        except PydanticValidationError as e:
            raise CorruptSlotError(self._key, str(e)) from e

    async def _ensure_loaded(self) -> None:
        if not self._loaded:
            await self.load()

    async def _commit(self, items: list[Any]) -> None:
        """Write ``items`` to the slot, then adopt them as the collection.

        If the write raises, the in-memory collection is left untouched.
        """
        await self._store.set(self._key, [item.model_dump(mode="json") for item in items])
        self._items = items

    def _prepended(self, item: Any) -> list[Any]:
        return [item, *self._items]

    def _replaced(self, idx: int, item: Any) -> list[Any]:
        items = list(self._items)
        items[idx] = item
        return items

    def _index_of(self, item_id: str) -> int | None:
        for idx, item in enumerate(self._items):
            if item.id == item_id:
                return idx
        return None

    def _merge(
        self,
        item: BaseModel,
        changes: Mapping[str, Any],
        protected: Iterable[str],
        **overrides: Any,
    ) -> Any:
        """Apply partial changes, keep protected fields, then apply overrides.

        A None change clears fields whose default is None and leaves every
        other field at its current value.
        """
        protected = set(protected)
        fields = self.model.model_fields
        merged = item.model_dump()
        merged.update(
            {
                k: v
                for k, v in changes.items()
                if k not in protected
                and (v is not None or (k in fields and fields[k].default is None))
            }
        )
        merged.update(overrides)
        return self.model.model_validate(merged)

    async def _remove(self, item_id: str) -> bool:
        await self._ensure_loaded()
        idx = self._index_of(item_id)
        if idx is None:
            return False
        await self._commit(self._items[:idx] + self._items[idx + 1 :])
        return True

    def _notify(
        self,
        title: str,
        description: str | None = None,
        level: NotificationLevel = NotificationLevel.SUCCESS,
    ) -> None:
        if self._notifier is None:
            return
        self._notifier.notify(
            Notification(level=level, title=title, description=description)
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, item_id: str) -> Any | None:
        idx = self._index_of(item_id)
        return None if idx is None else self._items[idx]

    def list(self) -> list[Any]:
        """Snapshot of the collection, newest first."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)
