"""Core domain entities."""

from quickpos.core.entities.cart import CartLine, CartSnapshot, CatalogItem, Customer
from quickpos.core.entities.expense import Expense
from quickpos.core.entities.payment import PaymentSnapshot, PaymentState
from quickpos.core.entities.report import DailyReport
from quickpos.core.entities.shift import BestSeller, Shift, ShiftState, ShiftSummary
from quickpos.core.entities.subscription import (
    PLAN_FEATURES,
    Feature,
    PlanFeatures,
    SubscriptionPlan,
    UsageCounter,
    features_for,
    required_plan,
)
from quickpos.core.entities.transaction import (
    PaymentMethod,
    PriceQuote,
    Transaction,
    TransactionLine,
)

__all__ = [
    # Cart entities
    "CatalogItem",
    "CartLine",
    "CartSnapshot",
    "Customer",
    # Transaction entities
    "PaymentMethod",
    "PriceQuote",
    "Transaction",
    "TransactionLine",
    # Shift entities
    "Shift",
    "ShiftState",
    "ShiftSummary",
    "BestSeller",
    # Subscription entities
    "SubscriptionPlan",
    "Feature",
    "PlanFeatures",
    "PLAN_FEATURES",
    "UsageCounter",
    "features_for",
    "required_plan",
    # Payment entities
    "PaymentState",
    "PaymentSnapshot",
    # Other
    "Expense",
    "DailyReport",
]
