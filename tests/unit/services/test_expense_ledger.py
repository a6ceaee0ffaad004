"""Tests for ExpenseLedger."""

from decimal import Decimal

import pytest

from quickpos.core.exceptions import ExpenseNotFoundError, InvalidAmountError, ValidationError
from quickpos.core.services import ExpenseLedger


@pytest.fixture
def expenses(clock, ids) -> ExpenseLedger:
    return ExpenseLedger(clock=clock, id_generator=ids)


class TestExpenseLedger:
    def test_add(self, expenses, clock):
        expense = expenses.add("  Ice delivery ", "12.5")
        assert expense.id == "exp_1"
        assert expense.description == "Ice delivery"
        assert expense.amount == Decimal("12.50")
        assert expense.created_at == clock.now()

    def test_blank_description(self, expenses):
        with pytest.raises(ValidationError):
            expenses.add("   ", 5)

    @pytest.mark.parametrize("amount", [0, "-3"])
    def test_amount_must_be_positive(self, expenses, amount):
        with pytest.raises(InvalidAmountError):
            expenses.add("Milk", amount)
        assert expenses.list_expenses() == []

    def test_remove(self, expenses):
        first = expenses.add("Milk", 4)
        expenses.add("Cups", 3)
        expenses.remove(first.id)
        assert [e.description for e in expenses.list_expenses()] == ["Cups"]

    def test_remove_unknown(self, expenses):
        with pytest.raises(ExpenseNotFoundError):
            expenses.remove("exp_404")

    def test_filter_and_total_by_day(self, expenses, clock):
        expenses.add("Milk", "4.00")
        clock.advance(86400)
        expenses.add("Cups", "3.25")
        expenses.add("Ice", "1.00")

        today = clock.now().date()
        assert [e.description for e in expenses.list_expenses(today)] == ["Cups", "Ice"]
        assert expenses.total(today) == Decimal("4.25")
        assert expenses.total() == Decimal("8.25")
