"""API tests for reports, expenses and transaction history."""

from httpx import AsyncClient


class TestReportsAPI:
    async def test_locked_on_free_plan(self, client: AsyncClient):
        response = await client.get("/api/reports/daily")
        assert response.status_code == 403
        body = response.json()
        assert body["error_code"] == "FEATURE_LOCKED"
        assert "required_plan=basic" in body["detail"]

    async def test_daily_report(self, client: AsyncClient, latte_json):
        await client.put("/api/subscription/plan", json={"plan": "basic"})
        await client.post("/api/shifts/open", json={"opening_cash": "0"})
        await client.post("/api/cart/items", json=latte_json)
        await client.post("/api/checkout", json={"payment_method": "card"})
        await client.post("/api/expenses", json={"description": "Milk", "amount": "2.00"})

        response = await client.get("/api/reports/daily")

        assert response.status_code == 200
        data = response.json()
        assert data["transaction_count"] == 1
        assert data["total_sales"] == "6.30"
        assert data["sales_by_method"]["card"] == "6.30"
        assert data["expenses_total"] == "2.00"
        assert data["net"] == "4.30"


class TestExpensesAPI:
    async def test_add_list_remove(self, client: AsyncClient):
        created = await client.post("/api/expenses", json={"description": "Cups", "amount": "3.25"})
        assert created.status_code == 201
        expense_id = created.json()["id"]

        listed = (await client.get("/api/expenses")).json()
        assert [e["id"] for e in listed] == [expense_id]

        removed = await client.delete(f"/api/expenses/{expense_id}")
        assert removed.status_code == 204
        assert (await client.get("/api/expenses")).json() == []

    async def test_invalid_amount(self, client: AsyncClient):
        response = await client.post("/api/expenses", json={"description": "Cups", "amount": "0"})
        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_AMOUNT"

    async def test_remove_unknown(self, client: AsyncClient):
        response = await client.delete("/api/expenses/exp_404")
        assert response.status_code == 404
        assert response.json()["error_code"] == "EXPENSE_NOT_FOUND"


class TestTransactionsAPI:
    async def test_unknown_transaction(self, client: AsyncClient):
        response = await client.get("/api/transactions/tx_404")
        assert response.status_code == 404
        assert response.json()["error_code"] == "TRANSACTION_NOT_FOUND"

    async def test_limit(self, client: AsyncClient, latte_json):
        await client.post("/api/shifts/open", json={"opening_cash": "0"})
        for _ in range(3):
            await client.post("/api/cart/items", json=latte_json)
            await client.post("/api/checkout", json={"payment_method": "cash"})

        response = await client.get("/api/transactions", params={"limit": 2})
        assert len(response.json()) == 2
