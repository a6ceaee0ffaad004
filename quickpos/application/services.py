"""
Service factory functions for dependency injection.

This module provides factory functions that wire infrastructure
implementations to core services. Use cases should import from here.

One terminal runs one cart, one shift and one subscription, so every
stateful service is a process-wide singleton.
"""

from typing import TYPE_CHECKING

from quickpos.config import get_logger, get_settings
from quickpos.core.entities.subscription import SubscriptionPlan
from quickpos.core.services import (
    CartLedger,
    ExpenseLedger,
    PaymentSession,
    PricingPolicy,
    QRISMerchant,
    ReportService,
    ShiftManager,
    SubscriptionGate,
    TransactionRecorder,
)

if TYPE_CHECKING:
    from quickpos.application.use_cases.qr_payment import QRPaymentUseCase
    from quickpos.core.interfaces import (
        IClock,
        IIdGenerator,
        IPaymentProcessor,
        ITransactionStore,
    )
    from quickpos.core.services.payment_session import ConfirmedHandler

logger = get_logger(__name__)


# Singleton service instances
_clock: "IClock | None" = None
_id_generator: "IIdGenerator | None" = None
_cart_ledger: CartLedger | None = None
_subscription_gate: SubscriptionGate | None = None
_shift_manager: ShiftManager | None = None
_transaction_store: "ITransactionStore | None" = None
_pricing_policy: PricingPolicy | None = None
_transaction_recorder: TransactionRecorder | None = None
_expense_ledger: ExpenseLedger | None = None
_report_service: ReportService | None = None
_payment_processor: "IPaymentProcessor | None" = None
_qr_payment_use_case: "QRPaymentUseCase | None" = None


def get_clock() -> "IClock":
    global _clock
    if _clock is None:
        from quickpos.infrastructure.clock import SystemClock

        _clock = SystemClock()
    return _clock


def get_id_generator() -> "IIdGenerator":
    global _id_generator
    if _id_generator is None:
        from quickpos.infrastructure.clock import UUIDGenerator

        _id_generator = UUIDGenerator()
    return _id_generator


def get_cart_ledger() -> CartLedger:
    global _cart_ledger
    if _cart_ledger is None:
        _cart_ledger = CartLedger()
    return _cart_ledger


def get_subscription_gate() -> SubscriptionGate:
    """Get or create the subscription gate on the configured default plan."""
    global _subscription_gate
    if _subscription_gate is None:
        plan = SubscriptionPlan(get_settings().subscription.default_plan)
        _subscription_gate = SubscriptionGate(plan=plan, clock=get_clock())
    return _subscription_gate


def get_shift_manager() -> ShiftManager:
    global _shift_manager
    if _shift_manager is None:
        _shift_manager = ShiftManager(
            clock=get_clock(),
            id_generator=get_id_generator(),
            best_seller_limit=get_settings().report.best_seller_limit,
        )
    return _shift_manager


def get_transaction_store() -> "ITransactionStore":
    global _transaction_store
    if _transaction_store is None:
        # Lazy import infrastructure to avoid circular imports
        from quickpos.infrastructure.storage.memory import InMemoryTransactionStore

        _transaction_store = InMemoryTransactionStore()
    return _transaction_store


def get_pricing_policy() -> PricingPolicy:
    """Pricing policy built from PRICING_DISCOUNT_RATE and PRICING_TAX_RATE."""
    global _pricing_policy
    if _pricing_policy is None:
        pricing = get_settings().pricing
        _pricing_policy = PricingPolicy.from_rates(pricing.discount_rate, pricing.tax_rate)
    return _pricing_policy


def get_transaction_recorder() -> TransactionRecorder:
    global _transaction_recorder
    if _transaction_recorder is None:
        _transaction_recorder = TransactionRecorder(
            pricing=get_pricing_policy(),
            store=get_transaction_store(),
            clock=get_clock(),
            id_generator=get_id_generator(),
            require_open_shift=get_settings().checkout.require_open_shift,
        )
    return _transaction_recorder


def get_expense_ledger() -> ExpenseLedger:
    global _expense_ledger
    if _expense_ledger is None:
        _expense_ledger = ExpenseLedger(clock=get_clock(), id_generator=get_id_generator())
    return _expense_ledger


def get_report_service() -> ReportService:
    global _report_service
    if _report_service is None:
        _report_service = ReportService(
            store=get_transaction_store(),
            expenses=get_expense_ledger(),
            gate=get_subscription_gate(),
            clock=get_clock(),
        )
    return _report_service


def get_payment_processor() -> "IPaymentProcessor":
    """Get or create the payment processor adapter."""
    global _payment_processor
    if _payment_processor is None:
        from quickpos.infrastructure.payments import create_payment_processor

        _payment_processor = create_payment_processor()
    return _payment_processor


def get_qris_merchant() -> QRISMerchant:
    payment = get_settings().payment
    return QRISMerchant(
        merchant_id=payment.merchant_id,
        name=payment.merchant_name,
        city=payment.merchant_city,
        postal_code=payment.postal_code,
    )


def create_payment_session(
    on_confirmed: "ConfirmedHandler | None" = None,
) -> PaymentSession:
    """Create a fresh payment session; one per checkout attempt."""
    payment = get_settings().payment
    return PaymentSession(
        processor=get_payment_processor(),
        clock=get_clock(),
        id_generator=get_id_generator(),
        merchant=get_qris_merchant(),
        ttl_seconds=payment.session_ttl_seconds,
        tick_interval=payment.tick_interval,
        on_confirmed=on_confirmed,
    )


def get_qr_payment_use_case() -> "QRPaymentUseCase":
    """The terminal's QR payment desk. Holds the current session across requests."""
    global _qr_payment_use_case
    if _qr_payment_use_case is None:
        from quickpos.application.use_cases.qr_payment import QRPaymentUseCase

        _qr_payment_use_case = QRPaymentUseCase()
    return _qr_payment_use_case


def reset_services() -> None:
    """Reset all service singletons (for testing)."""
    global _clock, _id_generator, _cart_ledger, _subscription_gate, _shift_manager
    global _transaction_store, _pricing_policy, _transaction_recorder
    global _expense_ledger, _report_service, _payment_processor, _qr_payment_use_case

    _clock = None
    _id_generator = None
    _cart_ledger = None
    _subscription_gate = None
    _shift_manager = None
    _transaction_store = None
    _pricing_policy = None
    _transaction_recorder = None
    _expense_ledger = None
    _report_service = None
    _payment_processor = None
    _qr_payment_use_case = None
    logger.debug("services_reset")
