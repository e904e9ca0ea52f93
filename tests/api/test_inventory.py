"""API tests for inventory endpoints."""

from httpx import AsyncClient

from dsvflow.core.entities.inventory import InventoryItemDraft


class TestInventoryAPI:
    async def test_create_and_list(self, api_client: AsyncClient):
        response = await api_client.post(
            "/api/inventory",
            json={"name": "Mugs", "category": "Drinkware", "quantity": 40, "min_stock": 50, "unit_cost": 5},
        )
        assert response.status_code == 201
        item = response.json()
        assert item["is_low_stock"] is True
        assert item["stock_value"] == 200

        listed = (await api_client.get("/api/inventory")).json()
        assert [i["name"] for i in listed] == ["Mugs"]

    async def test_negative_values_rejected(self, api_client: AsyncClient):
        response = await api_client.post("/api/inventory", json={"name": "Mugs", "quantity": -1})
        assert response.status_code == 422

    async def test_search(self, api_client: AsyncClient, inventory):
        await inventory.create(InventoryItemDraft(name="Branded Pens", category="Stationery"))
        await inventory.create(InventoryItemDraft(name="Tote Bags", category="Bags"))

        found = (await api_client.get("/api/inventory", params={"q": "station"})).json()
        assert [i["name"] for i in found] == ["Branded Pens"]

    async def test_low_stock(self, api_client: AsyncClient, inventory):
        await inventory.create(InventoryItemDraft(name="At", quantity=10, min_stock=10))
        await inventory.create(InventoryItemDraft(name="Above", quantity=11, min_stock=10))

        low = (await api_client.get("/api/inventory/low-stock")).json()
        assert [i["name"] for i in low] == ["At"]

    async def test_add_and_reduce(self, api_client: AsyncClient, inventory, notifier):
        item = await inventory.create(InventoryItemDraft(name="Caps", quantity=5, min_stock=2))

        added = await api_client.post(f"/api/inventory/{item.id}/add", json={"amount": 10})
        assert added.json()["quantity"] == 15

        reduced = await api_client.post(f"/api/inventory/{item.id}/reduce", json={"amount": 100})
        assert reduced.json()["quantity"] == 0
        assert notifier.titles[-1] == "Low stock alert: Caps"

    async def test_adjustment_must_be_positive(self, api_client: AsyncClient, inventory):
        item = await inventory.create(InventoryItemDraft(name="Caps", quantity=5))
        response = await api_client.post(f"/api/inventory/{item.id}/add", json={"amount": 0})
        assert response.status_code == 422

    async def test_unknown_item(self, api_client: AsyncClient):
        for method, path, body in [
            ("GET", "/api/inventory/missing", None),
            ("PATCH", "/api/inventory/missing", {"quantity": 1}),
            ("POST", "/api/inventory/missing/add", {"amount": 1}),
            ("POST", "/api/inventory/missing/reduce", {"amount": 1}),
            ("DELETE", "/api/inventory/missing", None),
        ]:
            response = await api_client.request(method, path, json=body)
            assert response.status_code == 404, path
            assert response.json()["error_code"] == "INVENTORY_ITEM_NOT_FOUND"

    async def test_patch_and_delete(self, api_client: AsyncClient, inventory):
        item = await inventory.create(InventoryItemDraft(name="Caps", quantity=5))

        patched = await api_client.patch(f"/api/inventory/{item.id}", json={"min_stock": 8})
        assert patched.json()["min_stock"] == 8
        assert patched.json()["is_low_stock"] is True

        deleted = await api_client.delete(f"/api/inventory/{item.id}")
        assert deleted.status_code == 204
        assert len(inventory) == 0
