"""Cashier shift domain entities."""

from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from quickpos.core.entities.transaction import PaymentMethod, Transaction


class ShiftState(str, Enum):
    """Lifecycle of the shift manager."""

    NO_SHIFT = "no_shift"
    OPEN = "open"
    CLOSED = "closed"


class Shift(BaseModel):
    """A bounded cash-drawer session.

    Frozen: the shift manager replaces the whole object on every append,
    so a reference handed out earlier never changes underneath its holder.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    opened_at: datetime
    closed_at: datetime | None = None
    opening_cash: Decimal = Field(..., ge=0)
    closing_cash: Decimal | None = Field(default=None, ge=0)
    transactions: tuple[Transaction, ...] = ()
    is_open: bool = True

    @property
    def total_sales(self) -> Decimal:
        return sum((tx.total for tx in self.transactions), Decimal("0.00"))

    @property
    def transaction_count(self) -> int:
        return len(self.transactions)


class BestSeller(BaseModel):
    """Aggregated sales of one product within a shift."""

    product_id: str
    name: str
    quantity: int
    revenue: Decimal


class ShiftSummary(BaseModel):
    """Figures computed when a shift is closed (or on demand while open)."""

    shift_id: str
    opened_at: datetime
    closed_at: datetime | None = None
    is_open: bool
    opening_cash: Decimal
    closing_cash: Decimal | None = None
    total_sales: Decimal
    transaction_count: int
    items_sold: int
    cash_sales: Decimal
    expected_cash: Decimal  # opening_cash + cash_sales
    cash_variance: Decimal | None = None  # closing_cash - expected_cash, once closed
    sales_by_method: dict[PaymentMethod, Decimal] = Field(default_factory=dict)
    best_sellers: list[BestSeller] = Field(default_factory=list)
