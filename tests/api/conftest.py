"""Fixtures for API tests.

Runs against the real app and real service singletons; the autouse
reset in the root conftest gives each test a fresh terminal.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from quickpos.api.main import app
from quickpos.application import services
from quickpos.config import reset_settings


@pytest.fixture
async def client(monkeypatch):
    # Manual countdown and an instant processor keep tests deterministic
    monkeypatch.setenv("PAYMENT_TICK_INTERVAL", "0")
    monkeypatch.setenv("PAYMENT_CHECK_LATENCY", "0")
    monkeypatch.setenv("PAYMENT_RETRY_DELAY", "0")
    reset_settings()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    await services.get_qr_payment_use_case().aclose()


@pytest.fixture
def latte_json() -> dict:
    return {"product_id": "1", "name": "Iced Latte", "unit_price": "7.00"}


@pytest.fixture
def croissant_json() -> dict:
    return {"product_id": "2", "name": "Croissant", "unit_price": "4.50"}
