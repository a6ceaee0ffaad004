"""Tests for InMemoryTransactionStore."""

from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest

from quickpos.core.entities import PaymentMethod, Transaction, TransactionLine
from quickpos.infrastructure.storage.memory import InMemoryTransactionStore

BASE = datetime(2024, 1, 15, 9, 0, tzinfo=UTC)


def _tx(tx_id: str, minutes: int = 0) -> Transaction:
    return Transaction(
        id=tx_id,
        items=(TransactionLine(product_id="1", name="Tea", unit_price=Decimal("2.00"), quantity=1),),
        subtotal=Decimal("2.00"),
        discount=Decimal("0.20"),
        tax=Decimal("0.00"),
        total=Decimal("1.80"),
        payment_method=PaymentMethod.CASH,
        created_at=BASE + timedelta(minutes=minutes),
    )


class TestInMemoryTransactionStore:
    def test_add_and_get(self):
        store = InMemoryTransactionStore()
        tx = store.add(_tx("tx_1"))
        assert store.get("tx_1") == tx
        assert store.get("tx_2") is None
        assert store.count() == 1

    def test_duplicate_id(self):
        store = InMemoryTransactionStore()
        store.add(_tx("tx_1"))
        with pytest.raises(ValueError):
            store.add(_tx("tx_1"))

    def test_discard(self):
        store = InMemoryTransactionStore()
        store.add(_tx("tx_1"))
        store.add(_tx("tx_2"))
        store.discard("tx_1")
        store.discard("tx_unknown")
        assert [t.id for t in store.list_transactions()] == ["tx_2"]
        assert store.get("tx_1") is None

    def test_window_is_half_open(self):
        store = InMemoryTransactionStore()
        for i, minutes in enumerate((0, 30, 60), start=1):
            store.add(_tx(f"tx_{i}", minutes))

        window = store.list_transactions(since=BASE, until=BASE + timedelta(minutes=60))
        assert [t.id for t in window] == ["tx_1", "tx_2"]

    def test_limit_keeps_newest(self):
        store = InMemoryTransactionStore()
        for i in range(1, 5):
            store.add(_tx(f"tx_{i}", i))
        assert [t.id for t in store.list_transactions(limit=2)] == ["tx_3", "tx_4"]
