"""Tests for TransactionRecorder.commit()."""

import threading
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from quickpos.core.entities import Customer, PaymentMethod, SubscriptionPlan, UsageCounter
from quickpos.core.exceptions import (
    EmptyCartError,
    QuotaExceededError,
    ShiftClosedError,
    ShiftRequiredError,
)
from quickpos.core.services import CartLedger, SubscriptionGate, TransactionRecorder


def _state(cart, shifts, gate):
    """Everything commit may touch, for before/after comparison."""
    shift = shifts.current_shift
    return (
        cart.lines,
        cart.customer,
        shift.transactions if shift else None,
        gate.monthly_transaction_count,
    )


class TestCommit:
    def test_commits_given_snapshot(self, recorder, cart, shifts, gate, latte, croissant):
        shifts.open_shift(0)
        cart.add_item(latte)
        held = cart.snapshot()
        cart.add_item(croissant)

        tx = recorder.commit(cart, shifts, gate, PaymentMethod.DIGITAL, snapshot=held)

        assert tx.total == Decimal("6.30")
        assert [line.product_id for line in tx.items] == ["1"]
        assert [line.product_id for line in cart.lines] == ["2"]
        assert gate.monthly_transaction_count == 1

    def test_empty_snapshot_rejected(self, recorder, cart, shifts, gate, latte):
        shifts.open_shift(0)
        held = cart.snapshot()
        cart.add_item(latte)

        with pytest.raises(EmptyCartError):
            recorder.commit(cart, shifts, gate, PaymentMethod.DIGITAL, snapshot=held)
        assert cart.item_count == 1

    def test_records_everything(self, recorder, cart, shifts, gate, store, latte, croissant, clock):
        shifts.open_shift(Decimal("100.00"))
        cart.add_item(latte)
        cart.add_item(latte)
        cart.add_item(croissant)
        cart.attach_customer(Customer(id="c1", name="Budi"))

        tx = recorder.commit(cart, shifts, gate, PaymentMethod.CASH)

        assert tx.id == "tx_1"
        assert tx.subtotal == Decimal("18.50")
        assert tx.discount == Decimal("1.85")
        assert tx.total == Decimal("16.65")
        assert tx.item_count == 3
        assert tx.customer.name == "Budi"
        assert tx.shift_id == "shift_1"
        assert tx.created_at == clock.now()

        assert shifts.current_shift.transactions == (tx,)
        assert gate.monthly_transaction_count == 1
        assert cart.is_empty
        assert cart.customer is None
        assert store.get("tx_1") == tx

    def test_snapshot_isolated_from_cart(self, recorder, cart, shifts, gate, latte):
        shifts.open_shift(0)
        cart.add_item(latte)
        tx = recorder.commit(cart, shifts, gate, PaymentMethod.CARD)

        cart.add_item(latte)
        cart.set_quantity("1", 9)

        assert tx.items[0].quantity == 1
        assert tx.total == Decimal("6.30")

    def test_shift_membership_follows_commit_order(self, recorder, cart, shifts, gate, latte, clock):
        shifts.open_shift(0)
        for _ in range(3):
            cart.add_item(latte)
            recorder.commit(cart, shifts, gate, PaymentMethod.CASH)
            clock.advance(60)

        transactions = shifts.current_shift.transactions
        assert [tx.id for tx in transactions] == ["tx_1", "tx_2", "tx_3"]
        assert all(a.created_at < b.created_at for a, b in zip(transactions, transactions[1:]))

        summary = shifts.close_shift(Decimal("18.90"))
        assert all(tx.created_at <= summary.closed_at for tx in transactions)


class TestValidation:
    def test_empty_cart(self, recorder, cart, shifts, gate):
        """Empty cart raises EmptyCartError and leaves usage unchanged."""
        shifts.open_shift(0)
        with pytest.raises(EmptyCartError):
            recorder.commit(cart, shifts, gate, PaymentMethod.CASH)
        assert gate.monthly_transaction_count == 0

    def test_quota_exhausted(self, recorder, cart, shifts, latte):
        """Free plan at 25/25: commit raises and nothing changes."""
        gate = SubscriptionGate(
            plan=SubscriptionPlan.FREE,
            usage=UsageCounter(monthly_transaction_count=25),
        )
        shifts.open_shift(0)
        cart.add_item(latte)
        before = _state(cart, shifts, gate)

        assert not gate.can_transact()
        with pytest.raises(QuotaExceededError):
            recorder.commit(cart, shifts, gate, PaymentMethod.CASH)

        assert _state(cart, shifts, gate) == before

    def test_no_open_shift(self, recorder, cart, shifts, gate, store, latte):
        cart.add_item(latte)
        before = _state(cart, shifts, gate)

        with pytest.raises(ShiftRequiredError):
            recorder.commit(cart, shifts, gate, PaymentMethod.CASH)

        assert _state(cart, shifts, gate) == before
        assert store.count() == 0

    def test_closed_shift_counts_as_no_shift(self, recorder, cart, shifts, gate, latte):
        shifts.open_shift(0)
        shifts.close_shift(0)
        cart.add_item(latte)
        with pytest.raises(ShiftRequiredError):
            recorder.commit(cart, shifts, gate, PaymentMethod.CASH)

    def test_check_order_empty_cart_first(self, recorder, cart, shifts):
        gate = SubscriptionGate(usage=UsageCounter(monthly_transaction_count=25))
        with pytest.raises(EmptyCartError):
            recorder.commit(cart, shifts, gate, PaymentMethod.CASH)

    def test_check_order_quota_before_shift(self, recorder, cart, shifts, latte):
        gate = SubscriptionGate(usage=UsageCounter(monthly_transaction_count=25))
        cart.add_item(latte)
        with pytest.raises(QuotaExceededError):
            recorder.commit(cart, shifts, gate, PaymentMethod.CASH)


class TestAtomicity:
    def test_shift_failure_rolls_back_history(self, recorder, cart, shifts, gate, store, latte):
        shifts.open_shift(0)
        cart.add_item(latte)
        before = _state(cart, shifts, gate)

        original = shifts.record_transaction
        shifts.record_transaction = MagicMock(side_effect=ShiftClosedError("shift_1"))
        try:
            with pytest.raises(ShiftClosedError):
                recorder.commit(cart, shifts, gate, PaymentMethod.CASH)
        finally:
            shifts.record_transaction = original

        assert _state(cart, shifts, gate) == before
        assert store.count() == 0

    def test_quota_cannot_be_overrun_concurrently(self, pricing, store, clock, ids, shifts, latte):
        """Many threads, one slot left: exactly one commit succeeds."""
        gate = SubscriptionGate(usage=UsageCounter(monthly_transaction_count=24))
        recorder = TransactionRecorder(pricing=pricing, store=store, clock=clock, id_generator=ids)
        shifts.open_shift(0)
        carts = [CartLedger() for _ in range(8)]
        for c in carts:
            c.add_item(latte)

        results: list[str] = []
        barrier = threading.Barrier(len(carts))

        def attempt(c: CartLedger) -> None:
            barrier.wait()
            try:
                recorder.commit(c, shifts, gate, PaymentMethod.CASH)
                results.append("ok")
            except QuotaExceededError:
                results.append("quota")

        threads = [threading.Thread(target=attempt, args=(c,)) for c in carts]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results.count("ok") == 1
        assert gate.monthly_transaction_count == 25
        assert shifts.current_shift.transaction_count == 1


class TestShiftGatingDisabled:
    def test_commit_without_shift(self, pricing, store, clock, ids, cart, shifts, gate, latte):
        recorder = TransactionRecorder(
            pricing=pricing,
            store=store,
            clock=clock,
            id_generator=ids,
            require_open_shift=False,
        )
        cart.add_item(latte)

        tx = recorder.commit(cart, shifts, gate, PaymentMethod.CASH)

        assert tx.shift_id is None
        assert store.list_transactions() == [tx]
        assert gate.monthly_transaction_count == 1
        assert shifts.current_shift is None
