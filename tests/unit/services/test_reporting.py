"""Tests for ReportService.daily_report()."""

from decimal import Decimal

import pytest

from quickpos.core.entities import PaymentMethod, SubscriptionPlan
from quickpos.core.exceptions import FeatureLockedError
from quickpos.core.services import ExpenseLedger, ReportService


@pytest.fixture
def expenses(clock, ids) -> ExpenseLedger:
    return ExpenseLedger(clock=clock, id_generator=ids)


@pytest.fixture
def reports(store, expenses, gate, clock) -> ReportService:
    return ReportService(store=store, expenses=expenses, gate=gate, clock=clock)


def _sell(recorder, cart, shifts, gate, item, method, times=1):
    for _ in range(times):
        cart.add_item(item)
    return recorder.commit(cart, shifts, gate, method)


class TestDailyReport:
    def test_requires_daily_report_feature(self, reports, gate):
        with pytest.raises(FeatureLockedError) as exc_info:
            reports.daily_report()
        assert exc_info.value.details["required_plan"] == "basic"

    def test_figures(self, reports, recorder, cart, shifts, gate, expenses, latte, croissant):
        gate.set_plan(SubscriptionPlan.BASIC)
        shifts.open_shift(0)
        _sell(recorder, cart, shifts, gate, latte, PaymentMethod.CASH, times=2)  # 12.60
        _sell(recorder, cart, shifts, gate, croissant, PaymentMethod.CARD)  # 4.05
        expenses.add("Milk", "5.00")

        report = reports.daily_report()

        assert report.transaction_count == 2
        assert report.total_sales == Decimal("16.65")
        assert report.items_sold == 3
        assert report.average_transaction == Decimal("8.33")
        assert report.sales_by_method[PaymentMethod.CASH] == Decimal("12.60")
        assert report.sales_by_method[PaymentMethod.CARD] == Decimal("4.05")
        assert report.sales_by_method[PaymentMethod.DIGITAL] == Decimal("0.00")
        assert report.expenses_total == Decimal("5.00")
        assert report.net == Decimal("11.65")

    def test_only_counts_the_requested_day(
        self, reports, recorder, cart, shifts, gate, clock, latte
    ):
        gate.set_plan(SubscriptionPlan.PRO)
        shifts.open_shift(0)
        yesterday = clock.now().date()
        _sell(recorder, cart, shifts, gate, latte, PaymentMethod.CASH)
        clock.advance(86400)
        _sell(recorder, cart, shifts, gate, latte, PaymentMethod.CASH)
        _sell(recorder, cart, shifts, gate, latte, PaymentMethod.CASH)

        assert reports.daily_report().transaction_count == 2
        assert reports.daily_report(yesterday).transaction_count == 1

    def test_empty_day(self, reports, gate):
        gate.set_plan(SubscriptionPlan.BASIC)
        report = reports.daily_report()
        assert report.transaction_count == 0
        assert report.average_transaction == Decimal("0.00")
        assert report.net == Decimal("0.00")
