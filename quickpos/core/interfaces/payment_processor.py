"""
Abstract interface for the external payment processor.

A real implementation polls a QRIS acquirer; the shipped one simulates it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal


@dataclass
class PaymentCheckResult:
    """Answer to a payment status poll."""

    paid: bool
    reference: str | None = None
    error: str | None = None


class IPaymentProcessor(ABC):
    """Interface for payment status polling."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Processor name for logs and errors."""
        pass

    @abstractmethod
    async def check_payment(self, code: str, amount: Decimal) -> PaymentCheckResult:
        """
        Ask whether the payment behind `code` has been settled.

        Raises:
            PaymentProcessorError: If the processor cannot be reached
        """
        pass
