"""Pytest configuration and fixtures."""

from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest

from quickpos.application.services import reset_services
from quickpos.config import reset_settings
from quickpos.core.entities import CatalogItem, SubscriptionPlan
from quickpos.core.interfaces import IClock, IIdGenerator
from quickpos.core.services import (
    CartLedger,
    PricingPolicy,
    QRISMerchant,
    ShiftManager,
    SubscriptionGate,
    TransactionRecorder,
)
from quickpos.infrastructure.storage.memory import InMemoryTransactionStore


class FakeClock(IClock):
    """Clock that only moves when told to."""

    def __init__(self, start: datetime | None = None):
        self.current = start or datetime(2024, 1, 15, 9, 0, tzinfo=UTC)

    def now(self) -> datetime:
        return self.current

    def advance(self, seconds: float = 0, **kwargs: float) -> None:
        self.current += timedelta(seconds=seconds, **kwargs)


class SequentialIds(IIdGenerator):
    """prefix + 1, 2, 3... per prefix."""

    def __init__(self) -> None:
        self._counters: dict[str, int] = {}

    def new_id(self, prefix: str = "") -> str:
        self._counters[prefix] = self._counters.get(prefix, 0) + 1
        return f"{prefix}{self._counters[prefix]}"


@pytest.fixture(autouse=True)
def _fresh_singletons():
    """Every test starts with fresh settings and service singletons."""
    reset_services()
    reset_settings()
    yield
    reset_services()
    reset_settings()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def ids() -> SequentialIds:
    return SequentialIds()


@pytest.fixture
def cart() -> CartLedger:
    return CartLedger()


@pytest.fixture
def gate(clock: FakeClock) -> SubscriptionGate:
    return SubscriptionGate(plan=SubscriptionPlan.FREE, clock=clock)


@pytest.fixture
def shifts(clock: FakeClock, ids: SequentialIds) -> ShiftManager:
    return ShiftManager(clock=clock, id_generator=ids)


@pytest.fixture
def store() -> InMemoryTransactionStore:
    return InMemoryTransactionStore()


@pytest.fixture
def pricing() -> PricingPolicy:
    """10% discount, no tax."""
    return PricingPolicy.from_rates(Decimal("0.10"), Decimal("0"))


@pytest.fixture
def recorder(
    pricing: PricingPolicy,
    store: InMemoryTransactionStore,
    clock: FakeClock,
    ids: SequentialIds,
) -> TransactionRecorder:
    return TransactionRecorder(pricing=pricing, store=store, clock=clock, id_generator=ids)


@pytest.fixture
def merchant() -> QRISMerchant:
    return QRISMerchant(
        merchant_id="ID2020123456789",
        name="QuickPOS Store",
        city="Jakarta Selatan",
        postal_code="12340",
    )


@pytest.fixture
def latte() -> CatalogItem:
    return CatalogItem(product_id="1", name="Iced Latte", unit_price=Decimal("7.00"))


@pytest.fixture
def croissant() -> CatalogItem:
    return CatalogItem(product_id="2", name="Croissant", unit_price=Decimal("4.50"))
