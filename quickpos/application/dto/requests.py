"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
Money amounts are not range-checked here; the core raises INVALID_AMOUNT.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from quickpos.core.entities.subscription import SubscriptionPlan
from quickpos.core.entities.transaction import PaymentMethod


class AddCartItemRequest(BaseModel):
    """Catalog item to add to the cart (one unit)."""

    product_id: str = Field(..., min_length=1, examples=["1"])
    name: str = Field(..., examples=["Iced Latte"])
    unit_price: Decimal = Field(..., ge=0, examples=["7.00"])
    notes: str | None = Field(default=None, examples=["less sugar"])


class SetQuantityRequest(BaseModel):
    quantity: int = Field(..., description="New quantity; 0 or less removes the line")


class AttachCustomerRequest(BaseModel):
    id: str
    name: str
    phone: str | None = None


class SetPlanRequest(BaseModel):
    plan: SubscriptionPlan


class OpenShiftRequest(BaseModel):
    opening_cash: Decimal = Field(..., description="Starting cash float")


class CloseShiftRequest(BaseModel):
    closing_cash: Decimal = Field(..., description="Counted drawer amount")


class CheckoutRequest(BaseModel):
    """Instant checkout. Digital payments go through /api/payments/qris."""

    payment_method: PaymentMethod = PaymentMethod.CASH


class AddExpenseRequest(BaseModel):
    description: str
    amount: Decimal
