#!/usr/bin/env python3
"""
QuickPOS management CLI.

Usage:
    python manage.py serve       Start the API server
    python manage.py plans       Print the subscription plan table
    python manage.py demo        Run a shift end to end in-process
"""

import argparse
import asyncio
import sys
from decimal import Decimal

from quickpos.config import configure_logging, get_settings


def cmd_serve(args: argparse.Namespace) -> None:
    """Start uvicorn on the configured host and port."""
    import uvicorn

    settings = get_settings()
    host = args.host or settings.api.host
    port = args.port or settings.api.port

    print(f"Starting {settings.app_name} on {host}:{port}...")
    uvicorn.run(
        "quickpos.api.main:app",
        host=host,
        port=port,
        reload=args.reload,
    )


def cmd_plans(args: argparse.Namespace) -> None:
    """Print every plan with its limits and feature flags."""
    from quickpos.core.entities import PLAN_FEATURES, Feature, SubscriptionPlan

    flags = [f for f in Feature if f not in (Feature.TRANSACTION_LIMIT, Feature.MAX_USERS)]
    for plan in SubscriptionPlan:
        features = PLAN_FEATURES[plan]
        limit = features.transaction_limit
        print(f"{features.name} ({plan.value}) - {features.price}")
        print(f"  transactions/month: {'unlimited' if limit is None else limit}")
        print(f"  max users:          {features.max_users}")
        enabled = [f.value for f in flags if features.allows(f)]
        print(f"  features:           {', '.join(enabled) or '-'}")


async def _run_demo(payment_method: str) -> None:
    from quickpos.application import services
    from quickpos.application.dto.requests import CheckoutRequest
    from quickpos.application.use_cases import CheckoutUseCase
    from quickpos.core.entities import CatalogItem, PaymentMethod

    cart = services.get_cart_ledger()
    shifts = services.get_shift_manager()
    shifts.open_shift(Decimal("100.00"))

    cart.add_item(CatalogItem(product_id="1", name="Iced Latte", unit_price=Decimal("7.00")))
    cart.add_item(CatalogItem(product_id="1", name="Iced Latte", unit_price=Decimal("7.00")))
    cart.add_item(CatalogItem(product_id="2", name="Croissant", unit_price=Decimal("4.50")))

    method = PaymentMethod(payment_method)
    if method.is_instant:
        use_case = CheckoutUseCase()
        result = await use_case.execute(CheckoutRequest(payment_method=method))
        transaction = result.transaction
    else:
        qr = services.get_qr_payment_use_case()
        snapshot = await qr.start()
        print(f"QR payload: {snapshot.code}")
        await qr.force_confirm()
        transaction = qr.last_transaction
        await qr.aclose()

    if transaction is None:
        raise SystemExit("demo payment was not recorded")
    print(
        f"Transaction {transaction.id}: subtotal {transaction.subtotal}, "
        f"discount {transaction.discount}, total {transaction.total}"
    )

    summary = shifts.close_shift(Decimal("100.00") + transaction.total)
    print(
        f"Shift {summary.shift_id} closed: sales {summary.total_sales}, "
        f"expected cash {summary.expected_cash}, variance {summary.cash_variance}"
    )


def cmd_demo(args: argparse.Namespace) -> None:
    """Open a shift, sell three items and close the shift."""
    asyncio.run(_run_demo(args.method))


def main() -> None:
    parser = argparse.ArgumentParser(
        description="QuickPOS management CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # serve
    p_serve = sub.add_parser("serve", help="Start the API server")
    p_serve.add_argument("--host", default=None, help="Bind host (default: API_HOST)")
    p_serve.add_argument("--port", type=int, default=None, help="Bind port (default: API_PORT)")
    p_serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    p_serve.set_defaults(func=cmd_serve)

    # plans
    p_plans = sub.add_parser("plans", help="Print the subscription plan table")
    p_plans.set_defaults(func=cmd_plans)

    # demo
    p_demo = sub.add_parser("demo", help="Run a shift end to end in-process")
    p_demo.add_argument(
        "--method",
        choices=["cash", "card", "digital"],
        default="cash",
        help="Payment method (default: cash)",
    )
    p_demo.set_defaults(func=cmd_demo)

    args = parser.parse_args()
    configure_logging()
    args.func(args)


if __name__ == "__main__":
    sys.exit(main())
