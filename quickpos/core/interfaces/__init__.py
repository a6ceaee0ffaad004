"""Core interfaces (ports) for dependency injection."""

from quickpos.core.interfaces.clock import IClock, IIdGenerator
from quickpos.core.interfaces.payment_processor import (
    IPaymentProcessor,
    PaymentCheckResult,
)
from quickpos.core.interfaces.pricing import IDiscountRule, ITaxRule
from quickpos.core.interfaces.transaction_store import ITransactionStore

__all__ = [
    "IClock",
    "IIdGenerator",
    "IPaymentProcessor",
    "PaymentCheckResult",
    "IDiscountRule",
    "ITaxRule",
    "ITransactionStore",
]
