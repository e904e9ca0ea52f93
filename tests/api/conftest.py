"""Fixtures for API tests: the app wired to in-memory repositories."""

import pytest
from httpx import ASGITransport, AsyncClient

from dsvflow.api.dependencies import get_clients, get_inventory, get_orders
from dsvflow.api.main import app


@pytest.fixture
async def api_client(orders, clients, inventory):
    app.dependency_overrides[get_orders] = lambda: orders
    app.dependency_overrides[get_clients] = lambda: clients
    app.dependency_overrides[get_inventory] = lambda: inventory
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
