"""API route modules."""

from quickpos.api.routes.cart import router as cart_router
from quickpos.api.routes.checkout import router as checkout_router
from quickpos.api.routes.expenses import router as expenses_router
from quickpos.api.routes.health import router as health_router
from quickpos.api.routes.payments import router as payments_router
from quickpos.api.routes.reports import router as reports_router
from quickpos.api.routes.shifts import router as shifts_router
from quickpos.api.routes.subscription import router as subscription_router
from quickpos.api.routes.transactions import router as transactions_router

__all__ = [
    "health_router",
    "cart_router",
    "subscription_router",
    "shifts_router",
    "checkout_router",
    "payments_router",
    "reports_router",
    "transactions_router",
    "expenses_router",
]
