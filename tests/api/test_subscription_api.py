"""API tests for subscription endpoints."""

from httpx import AsyncClient


class TestSubscriptionAPI:
    async def test_default_plan(self, client: AsyncClient):
        response = await client.get("/api/subscription")
        data = response.json()
        assert data["plan"] == "free"
        assert data["name"] == "Free"
        assert data["transaction_limit"] == 25
        assert data["remaining_transactions"] == 25
        assert data["can_transact"] is True
        assert data["features"]["daily_report"] is False

    async def test_set_plan(self, client: AsyncClient):
        response = await client.put("/api/subscription/plan", json={"plan": "pro"})
        data = response.json()
        assert data["plan"] == "pro"
        assert data["transaction_limit"] is None
        assert data["remaining_transactions"] is None
        assert data["features"]["report_export"] is True

    async def test_unknown_plan(self, client: AsyncClient):
        response = await client.put("/api/subscription/plan", json={"plan": "platinum"})
        assert response.status_code == 422

    async def test_feature_check(self, client: AsyncClient):
        response = await client.get("/api/subscription/features/split_view")
        assert response.json() == {
            "feature": "split_view",
            "enabled": False,
            "required_plan": "advance",
        }

    async def test_unknown_feature(self, client: AsyncClient):
        response = await client.get("/api/subscription/features/teleport")
        assert response.status_code == 400

    async def test_reset_usage(self, client: AsyncClient, latte_json):
        await client.post("/api/shifts/open", json={"opening_cash": "0"})
        await client.post("/api/cart/items", json=latte_json)
        await client.post("/api/checkout", json={"payment_method": "cash"})
        assert (await client.get("/api/subscription")).json()["monthly_transaction_count"] == 1

        response = await client.post("/api/subscription/reset-usage")
        assert response.json()["monthly_transaction_count"] == 0
