"""API tests for health endpoints."""

from httpx import AsyncClient


class TestHealthAPI:
    async def test_root_health(self, client: AsyncClient):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    async def test_api_health(self, client: AsyncClient):
        response = await client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["shift_state"] == "no_shift"
        assert data["plan"] == "free"
        assert data["uptime_seconds"] >= 0

    async def test_request_id_header(self, client: AsyncClient):
        response = await client.get("/api/health", headers={"X-Terminal-ID": "T-01"})
        assert "X-Request-ID" in response.headers
        assert response.headers["X-Response-Time"].endswith("ms")
