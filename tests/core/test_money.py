"""Tests for money helpers."""

from decimal import Decimal

from quickpos.core.money import ZERO, money_sum, to_money


class TestToMoney:
    def test_rounds_half_up_to_cents(self):
        assert to_money(Decimal("1.005")) == Decimal("1.01")
        assert to_money(Decimal("1.004")) == Decimal("1.00")

    def test_float_without_binary_noise(self):
        assert to_money(23.5) == Decimal("23.50")
        assert to_money(0.1 + 0.2) == Decimal("0.30")

    def test_int_and_str(self):
        assert to_money(100) == Decimal("100.00")
        assert to_money("7") == Decimal("7.00")


class TestMoneySum:
    def test_empty_is_zero(self):
        assert money_sum([]) == ZERO

    def test_sum(self):
        assert money_sum([Decimal("7.00"), Decimal("4.50")]) == Decimal("11.50")
