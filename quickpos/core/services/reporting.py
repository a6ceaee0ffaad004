"""Daily sales reporting over the transaction history."""

from datetime import date, datetime, time, timedelta

from quickpos.core.entities.report import DailyReport
from quickpos.core.entities.subscription import Feature
from quickpos.core.entities.transaction import PaymentMethod
from quickpos.core.interfaces.clock import IClock
from quickpos.core.interfaces.transaction_store import ITransactionStore
from quickpos.core.money import ZERO, money_sum, to_money
from quickpos.core.services.expense_ledger import ExpenseLedger
from quickpos.core.services.subscription_gate import SubscriptionGate


class ReportService:
    """Builds daily reports. Requires the daily_report feature."""

    def __init__(
        self,
        store: ITransactionStore,
        expenses: ExpenseLedger,
        gate: SubscriptionGate,
        clock: IClock,
    ):
        self._store = store
        self._expenses = expenses
        self._gate = gate
        self._clock = clock

    def daily_report(self, day: date | None = None) -> DailyReport:
        """
        Figures for `day` (today by default, in the clock's timezone).

        Raises:
            FeatureLockedError: If the plan lacks daily reports
        """
        self._gate.require_feature(Feature.DAILY_REPORT)

        now = self._clock.now()
        day = day or now.date()
        start = datetime.combine(day, time.min, tzinfo=now.tzinfo)
        transactions = self._store.list_transactions(
            since=start, until=start + timedelta(days=1)
        )

        total_sales = money_sum(tx.total for tx in transactions)
        count = len(transactions)
        expenses_total = self._expenses.total(day)

        return DailyReport(
            day=day,
            transaction_count=count,
            total_sales=total_sales,
            items_sold=sum(tx.item_count for tx in transactions),
            average_transaction=to_money(total_sales / count) if count else ZERO,
            sales_by_method={
                method: money_sum(
                    tx.total for tx in transactions if tx.payment_method is method
                )
                for method in PaymentMethod
            },
            expenses_total=expenses_total,
            net=to_money(total_sales - expenses_total),
        )
