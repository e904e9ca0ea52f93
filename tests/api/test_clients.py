"""API tests for client endpoints."""

from httpx import AsyncClient

from dsvflow.core.entities.client import ClientDraft


class TestClientsAPI:
    async def test_create_and_list(self, api_client: AsyncClient, notifier):
        response = await api_client.post(
            "/api/clients", json={"name": "Acme", "email": "hi@acme.com"}
        )
        assert response.status_code == 201
        created = response.json()
        assert created["name"] == "Acme"
        assert created["total_orders"] == 0
        assert notifier.titles[-1] == "Client added successfully"

        listed = (await api_client.get("/api/clients")).json()
        assert [c["id"] for c in listed] == [created["id"]]

    async def test_name_required(self, api_client: AsyncClient):
        response = await api_client.post("/api/clients", json={"name": ""})
        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    async def test_search(self, api_client: AsyncClient, clients):
        await clients.create(ClientDraft(name="Acme"))
        await clients.create(ClientDraft(name="Kofi", company="Gold Coast"))

        found = (await api_client.get("/api/clients", params={"q": "gold"})).json()
        assert [c["name"] for c in found] == ["Kofi"]

    async def test_detail_includes_orders(self, api_client: AsyncClient, clients):
        client = await clients.create(ClientDraft(name="Acme"))
        await api_client.post(
            "/api/orders",
            json={"client_id": client.id, "product_type": "Mugs", "quantity": 5, "unit_price": 20},
        )

        body = (await api_client.get(f"/api/clients/{client.id}")).json()
        assert body["client"]["name"] == "Acme"
        assert len(body["orders"]) == 1

    async def test_get_unknown(self, api_client: AsyncClient):
        response = await api_client.get("/api/clients/missing")
        assert response.status_code == 404
        body = response.json()
        assert body["error_code"] == "CLIENT_NOT_FOUND"
        assert body["hint"]
        assert body["path"] == "/api/clients/missing"

    async def test_patch(self, api_client: AsyncClient, clients):
        client = await clients.create(ClientDraft(name="Acme"))
        response = await api_client.patch(
            f"/api/clients/{client.id}", json={"phone": "0240000000"}
        )
        assert response.status_code == 200
        assert response.json()["phone"] == "0240000000"
        assert response.json()["name"] == "Acme"

    async def test_patch_unknown(self, api_client: AsyncClient):
        response = await api_client.patch("/api/clients/missing", json={"phone": "1"})
        assert response.status_code == 404

    async def test_delete(self, api_client: AsyncClient, clients):
        client = await clients.create(ClientDraft(name="Acme"))
        response = await api_client.delete(f"/api/clients/{client.id}")
        assert response.status_code == 204
        assert clients.get(client.id) is None

        again = await api_client.delete(f"/api/clients/{client.id}")
        assert again.status_code == 404
