"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization. Most are read
straight off core entities with from_attributes.
"""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from quickpos.core.entities.payment import PaymentState
from quickpos.core.entities.transaction import PaymentMethod


class CustomerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    phone: str | None = None


class CartLineResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    product_id: str
    name: str
    unit_price: Decimal
    quantity: int
    notes: str | None = None
    line_total: Decimal


class QuoteResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    subtotal: Decimal
    discount: Decimal
    tax: Decimal
    total: Decimal


class CartResponse(BaseModel):
    lines: list[CartLineResponse] = Field(default_factory=list)
    customer: CustomerResponse | None = None
    subtotal: Decimal
    item_count: int
    quote: QuoteResponse


class TransactionLineResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    product_id: str
    name: str
    unit_price: Decimal
    quantity: int
    notes: str | None = None
    line_total: Decimal


class TransactionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    items: list[TransactionLineResponse]
    customer: CustomerResponse | None = None
    subtotal: Decimal
    discount: Decimal
    tax: Decimal
    total: Decimal
    payment_method: PaymentMethod
    created_at: datetime
    shift_id: str | None = None


class CheckoutResponse(BaseModel):
    transaction: TransactionResponse
    remaining_transactions: int | None = Field(
        default=None, description="Quota left this month; null when unlimited"
    )


class ShiftResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    opened_at: datetime
    closed_at: datetime | None = None
    opening_cash: Decimal
    closing_cash: Decimal | None = None
    is_open: bool
    transaction_count: int
    total_sales: Decimal


class BestSellerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    product_id: str
    name: str
    quantity: int
    revenue: Decimal


class ShiftSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

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
    expected_cash: Decimal
    cash_variance: Decimal | None = None
    sales_by_method: dict[PaymentMethod, Decimal]
    best_sellers: list[BestSellerResponse]


class SubscriptionResponse(BaseModel):
    plan: str
    name: str
    price: str
    transaction_limit: int | None
    monthly_transaction_count: int
    remaining_transactions: int | None
    can_transact: bool
    features: dict[str, bool]


class FeatureCheckResponse(BaseModel):
    feature: str
    enabled: bool
    required_plan: str | None = None


class PaymentSessionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    session_id: str | None = None
    state: PaymentState
    amount: Decimal | None = None
    code: str | None = None
    started_at: datetime | None = None
    expires_at: datetime | None = None
    seconds_remaining: int = 0
    transaction_id: str | None = None


class DailyReportResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    day: date
    transaction_count: int
    total_sales: Decimal
    items_sold: int
    average_transaction: Decimal
    sales_by_method: dict[PaymentMethod, Decimal]
    expenses_total: Decimal
    net: Decimal


class ExpenseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    description: str
    amount: Decimal
    created_at: datetime


class HealthResponse(BaseModel):
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")
    uptime_seconds: float = Field(..., description="Seconds since startup")
    shift_state: str | None = Field(default=None, description="Current shift state")
    plan: str | None = Field(default=None, description="Active subscription plan")


class ErrorResponse(BaseModel):
    """Body of every non-2xx answer. error_code is stable across releases (e.g. QUOTA_EXCEEDED)."""

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
