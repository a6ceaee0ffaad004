"""Payment processor adapters."""

from quickpos.infrastructure.payments.acquirer import AcquirerPaymentProcessor
from quickpos.infrastructure.payments.base import BasePaymentProcessor
from quickpos.infrastructure.payments.factory import create_payment_processor
from quickpos.infrastructure.payments.simulated import SimulatedPaymentProcessor

__all__ = [
    "AcquirerPaymentProcessor",
    "BasePaymentProcessor",
    "SimulatedPaymentProcessor",
    "create_payment_processor",
]
