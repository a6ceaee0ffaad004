"""
Shift manager: cashier shift lifecycle and cash reconciliation.

NO_SHIFT -> OPEN -> CLOSED. A closed shift is never reopened; the next
open_shift() starts a fresh one and the closed shift moves to history.
"""

import threading
from collections.abc import Iterable
from decimal import Decimal

from quickpos.config import get_logger
from quickpos.core.entities.shift import BestSeller, Shift, ShiftState, ShiftSummary
from quickpos.core.entities.transaction import PaymentMethod, Transaction
from quickpos.core.exceptions import (
    InvalidAmountError,
    InvalidTransitionError,
    ShiftClosedError,
    ShiftNotFoundError,
    ShiftRequiredError,
)
from quickpos.core.interfaces.clock import IClock, IIdGenerator
from quickpos.core.money import ZERO, money_sum, to_money

logger = get_logger(__name__)


class ShiftManager:
    """Owns the current shift and the list of closed shifts."""

    def __init__(
        self,
        clock: IClock,
        id_generator: IIdGenerator,
        best_seller_limit: int = 5,
    ):
        self._clock = clock
        self._ids = id_generator
        self._best_seller_limit = best_seller_limit
        self._current: Shift | None = None
        self._history: list[Shift] = []
        self.lock = threading.RLock()

    @property
    def current_shift(self) -> Shift | None:
        """The open shift, or the most recently closed one, or None."""
        return self._current

    @property
    def state(self) -> ShiftState:
        if self._current is None:
            return ShiftState.NO_SHIFT
        return ShiftState.OPEN if self._current.is_open else ShiftState.CLOSED

    @property
    def has_open_shift(self) -> bool:
        return self.state is ShiftState.OPEN

    @property
    def history(self) -> tuple[Shift, ...]:
        """Closed shifts, oldest first."""
        return tuple(self._history)

    def open_shift(self, opening_cash: Decimal | int | float | str) -> Shift:
        """
        Open a new shift with a starting cash float.

        Raises:
            InvalidAmountError: If opening_cash is negative
            InvalidTransitionError: If a shift is already open
        """
        amount = to_money(opening_cash)
        if amount < 0:
            raise InvalidAmountError("opening_cash", amount)

        with self.lock:
            if self.state is ShiftState.OPEN:
                raise InvalidTransitionError("shift", self.state.value, "open")

            shift = Shift(
                id=self._ids.new_id("shift_"),
                opened_at=self._clock.now(),
                opening_cash=amount,
            )
            self._current = shift

        logger.info("shift_opened", shift_id=shift.id, opening_cash=amount)
        return shift

    def record_transaction(self, transaction: Transaction) -> Shift:
        """
        Append a transaction to the open shift.

        Raises:
            ShiftRequiredError: If no shift was ever opened
            ShiftClosedError: If the current shift is closed
        """
        with self.lock:
            shift = self._current
            if shift is None:
                raise ShiftRequiredError()
            if not shift.is_open:
                raise ShiftClosedError(shift.id)

            self._current = shift.model_copy(
                update={"transactions": shift.transactions + (transaction,)}
            )
            return self._current

    def close_shift(self, closing_cash: Decimal | int | float | str) -> ShiftSummary:
        """
        Close the open shift with the counted drawer amount.

        Raises:
            InvalidAmountError: If closing_cash is negative
            InvalidTransitionError: If no shift is open
        """
        amount = to_money(closing_cash)
        if amount < 0:
            raise InvalidAmountError("closing_cash", amount)

        with self.lock:
            current = self._current
            if current is None or not current.is_open:
                raise InvalidTransitionError("shift", self.state.value, "close")

            closed = current.model_copy(
                update={
                    "closed_at": self._clock.now(),
                    "closing_cash": amount,
                    "is_open": False,
                }
            )
            self._current = closed
            self._history.append(closed)

        summary = self.summarize(closed)
        logger.info(
            "shift_closed",
            shift_id=closed.id,
            total_sales=summary.total_sales,
            transactions=summary.transaction_count,
            cash_variance=summary.cash_variance,
        )
        return summary

    def summary(self, shift_id: str | None = None) -> ShiftSummary:
        """
        Summary of the current shift, or of a closed shift by id.

        Raises:
            ShiftRequiredError: If shift_id is None and no shift exists
            ShiftNotFoundError: If shift_id is unknown
        """
        if shift_id is None:
            if self._current is None:
                raise ShiftRequiredError()
            return self.summarize(self._current)

        if self._current is not None and self._current.id == shift_id:
            return self.summarize(self._current)
        for shift in self._history:
            if shift.id == shift_id:
                return self.summarize(shift)
        raise ShiftNotFoundError(shift_id)

    def summarize(self, shift: Shift) -> ShiftSummary:
        """Compute totals, best sellers and cash variance for a shift."""
        transactions = shift.transactions

        by_method = {
            method: money_sum(
                tx.total for tx in transactions if tx.payment_method is method
            )
            for method in PaymentMethod
        }
        cash_sales = by_method[PaymentMethod.CASH]
        expected_cash = to_money(shift.opening_cash + cash_sales)

        variance = None
        if shift.closing_cash is not None:
            variance = to_money(shift.closing_cash - expected_cash)

        return ShiftSummary(
            shift_id=shift.id,
            opened_at=shift.opened_at,
            closed_at=shift.closed_at,
            is_open=shift.is_open,
            opening_cash=shift.opening_cash,
            closing_cash=shift.closing_cash,
            total_sales=money_sum(tx.total for tx in transactions),
            transaction_count=len(transactions),
            items_sold=sum(tx.item_count for tx in transactions),
            cash_sales=cash_sales,
            expected_cash=expected_cash,
            cash_variance=variance,
            sales_by_method=by_method,
            best_sellers=best_sellers(transactions, self._best_seller_limit),
        )


def best_sellers(transactions: Iterable[Transaction], limit: int = 5) -> list[BestSeller]:
    """Products ranked by units sold, then revenue, then name."""
    totals: dict[str, BestSeller] = {}
    for tx in transactions:
        for line in tx.items:
            entry = totals.get(line.product_id)
            if entry is None:
                entry = BestSeller(
                    product_id=line.product_id,
                    name=line.name,
                    quantity=0,
                    revenue=ZERO,
                )
                totals[line.product_id] = entry
            entry.quantity += line.quantity
            entry.revenue = to_money(entry.revenue + line.line_total)

    ranked = sorted(
        totals.values(),
        key=lambda e: (-e.quantity, -e.revenue, e.name),
    )
    return ranked[:limit]
