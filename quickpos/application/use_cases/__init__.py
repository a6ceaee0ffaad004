"""
Application use cases.

Each use case orchestrates core services for a single terminal action.
"""

from quickpos.application.use_cases.checkout import CheckoutResult, CheckoutUseCase
from quickpos.application.use_cases.qr_payment import QRPaymentUseCase

__all__ = [
    "CheckoutResult",
    "CheckoutUseCase",
    "QRPaymentUseCase",
]
