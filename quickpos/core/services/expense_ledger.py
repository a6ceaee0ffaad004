"""Expense ledger: cash paid out for running costs."""

import threading
from datetime import date
from decimal import Decimal

from quickpos.config import get_logger
from quickpos.core.entities.expense import Expense
from quickpos.core.exceptions import ExpenseNotFoundError, InvalidAmountError, ValidationError
from quickpos.core.interfaces.clock import IClock, IIdGenerator
from quickpos.core.money import money_sum, to_money

logger = get_logger(__name__)


class ExpenseLedger:
    def __init__(self, clock: IClock, id_generator: IIdGenerator):
        self._clock = clock
        self._ids = id_generator
        self._expenses: list[Expense] = []
        self._lock = threading.Lock()

    def add(self, description: str, amount: Decimal | int | float | str) -> Expense:
        """
        Record an expense.

        Raises:
            ValidationError: If description is blank
            InvalidAmountError: If amount is not positive
        """
        text = description.strip()
        if not text:
            raise ValidationError("description", "must not be blank", description)
        value = to_money(amount)
        if value <= 0:
            raise InvalidAmountError("amount", value, "must be greater than 0")

        expense = Expense(
            id=self._ids.new_id("exp_"),
            description=text,
            amount=value,
            created_at=self._clock.now(),
        )
        with self._lock:
            self._expenses.append(expense)

        logger.info("expense_added", expense_id=expense.id, amount=value)
        return expense

    def remove(self, expense_id: str) -> None:
        """
        Raises:
            ExpenseNotFoundError: If the id is unknown
        """
        with self._lock:
            for i, expense in enumerate(self._expenses):
                if expense.id == expense_id:
                    del self._expenses[i]
                    break
            else:
                raise ExpenseNotFoundError(expense_id)

        logger.info("expense_removed", expense_id=expense_id)

    def list_expenses(self, day: date | None = None) -> list[Expense]:
        """All expenses, or those created on `day`, oldest first."""
        with self._lock:
            expenses = list(self._expenses)
        if day is None:
            return expenses
        return [e for e in expenses if e.created_at.date() == day]

    def total(self, day: date | None = None) -> Decimal:
        return money_sum(e.amount for e in self.list_expenses(day))
