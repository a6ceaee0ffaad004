"""Reporting domain entities."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from quickpos.core.entities.transaction import PaymentMethod


class DailyReport(BaseModel):
    """Sales and expense figures for one calendar day."""

    day: date
    transaction_count: int = 0
    total_sales: Decimal = Decimal("0.00")
    items_sold: int = 0
    average_transaction: Decimal = Decimal("0.00")
    sales_by_method: dict[PaymentMethod, Decimal] = Field(default_factory=dict)
    expenses_total: Decimal = Decimal("0.00")
    net: Decimal = Decimal("0.00")  # total_sales - expenses_total
