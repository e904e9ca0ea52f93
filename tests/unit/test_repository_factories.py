"""Tests for the repository factory functions."""

import pytest

from dsvflow.application.services import (
    get_client_repository,
    get_inventory_repository,
    get_order_repository,
)
from dsvflow.config import reset_settings
from dsvflow.core.exceptions import ConfigurationError


async def test_repositories_are_cached():
    assert await get_order_repository() is await get_order_repository()


async def test_explicit_store_gets_fresh_repository(store):
    repo = await get_order_repository(store)
    assert repo is not await get_order_repository()


async def test_shared_slot_rejected(monkeypatch):
    monkeypatch.setenv("STORAGE_CLIENTS_KEY", "dsv_orders")
    reset_settings()

    with pytest.raises(ConfigurationError) as exc:
        await get_client_repository()
    assert exc.value.code == "DUPLICATE_SLOT_KEY"
    assert exc.value.details["orders"] == "dsv_orders"


async def test_inventory_seed_follows_settings(monkeypatch):
    monkeypatch.setenv("BUSINESS_SEED_DEFAULT_INVENTORY", "false")
    reset_settings()

    inventory = await get_inventory_repository()
    assert inventory.list() == []
