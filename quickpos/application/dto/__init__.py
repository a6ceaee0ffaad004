"""Data transfer objects for the API boundary."""

from quickpos.application.dto.requests import (
    AddCartItemRequest,
    AddExpenseRequest,
    AttachCustomerRequest,
    CheckoutRequest,
    CloseShiftRequest,
    OpenShiftRequest,
    SetPlanRequest,
    SetQuantityRequest,
)
from quickpos.application.dto.responses import (
    BestSellerResponse,
    CartLineResponse,
    CartResponse,
    CheckoutResponse,
    CustomerResponse,
    DailyReportResponse,
    ErrorResponse,
    ExpenseResponse,
    FeatureCheckResponse,
    HealthResponse,
    PaymentSessionResponse,
    QuoteResponse,
    ShiftResponse,
    ShiftSummaryResponse,
    SubscriptionResponse,
    TransactionLineResponse,
    TransactionResponse,
)

__all__ = [
    # Requests
    "AddCartItemRequest",
    "AddExpenseRequest",
    "AttachCustomerRequest",
    "CheckoutRequest",
    "CloseShiftRequest",
    "OpenShiftRequest",
    "SetPlanRequest",
    "SetQuantityRequest",
    # Responses
    "BestSellerResponse",
    "CartLineResponse",
    "CartResponse",
    "CheckoutResponse",
    "CustomerResponse",
    "DailyReportResponse",
    "ErrorResponse",
    "ExpenseResponse",
    "FeatureCheckResponse",
    "HealthResponse",
    "PaymentSessionResponse",
    "QuoteResponse",
    "ShiftResponse",
    "ShiftSummaryResponse",
    "SubscriptionResponse",
    "TransactionLineResponse",
    "TransactionResponse",
]
