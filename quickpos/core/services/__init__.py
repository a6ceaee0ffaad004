"""
Core business logic services.

Layer-pure services that depend only on:
- quickpos/core/entities/*
- quickpos/core/interfaces/*
- quickpos/core/exceptions.py

NO infrastructure imports. All dependencies injected via constructor.
"""

from quickpos.core.services.cart_ledger import CartLedger
from quickpos.core.services.expense_ledger import ExpenseLedger
from quickpos.core.services.payment_session import PaymentSession
from quickpos.core.services.pricing import (
    NoDiscount,
    NoTax,
    PercentageDiscount,
    PercentageTax,
    PricingPolicy,
)
from quickpos.core.services.qris import QRISMerchant, build_qris_payload
from quickpos.core.services.reporting import ReportService
from quickpos.core.services.shift_manager import ShiftManager, best_sellers
from quickpos.core.services.subscription_gate import SubscriptionGate
from quickpos.core.services.transaction_recorder import TransactionRecorder

__all__ = [
    "CartLedger",
    "ExpenseLedger",
    "PaymentSession",
    "PricingPolicy",
    "NoDiscount",
    "NoTax",
    "PercentageDiscount",
    "PercentageTax",
    "QRISMerchant",
    "build_qris_payload",
    "ReportService",
    "ShiftManager",
    "best_sellers",
    "SubscriptionGate",
    "TransactionRecorder",
]
