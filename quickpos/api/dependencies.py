"""
Dependency injection container for FastAPI.

Provides service instances to route handlers. Tests swap any of these
through app.dependency_overrides.
"""

from quickpos.application import services
from quickpos.application.use_cases import CheckoutUseCase, QRPaymentUseCase
from quickpos.config import Settings, get_settings
from quickpos.core.interfaces import ITransactionStore
from quickpos.core.services import (
    CartLedger,
    ExpenseLedger,
    PricingPolicy,
    ReportService,
    ShiftManager,
    SubscriptionGate,
)


def get_app_settings() -> Settings:
    return get_settings()


def get_cart() -> CartLedger:
    return services.get_cart_ledger()


def get_gate() -> SubscriptionGate:
    return services.get_subscription_gate()


def get_shifts() -> ShiftManager:
    return services.get_shift_manager()


def get_pricing() -> PricingPolicy:
    return services.get_pricing_policy()


def get_store() -> ITransactionStore:
    return services.get_transaction_store()


def get_expenses() -> ExpenseLedger:
    return services.get_expense_ledger()


def get_reports() -> ReportService:
    return services.get_report_service()


def get_checkout_use_case() -> CheckoutUseCase:
    return CheckoutUseCase()


def get_qr_payment_use_case() -> QRPaymentUseCase:
    return services.get_qr_payment_use_case()
