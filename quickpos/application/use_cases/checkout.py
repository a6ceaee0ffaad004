"""Checkout Use Case: instant (cash/card) payment of the current cart."""

from dataclasses import dataclass

from quickpos.application.dto.requests import CheckoutRequest
from quickpos.application.dto.responses import CheckoutResponse, TransactionResponse
from quickpos.config import get_logger
from quickpos.core.entities.transaction import PaymentMethod, PriceQuote, Transaction
from quickpos.core.exceptions import ValidationError
from quickpos.core.services import (
    CartLedger,
    ShiftManager,
    SubscriptionGate,
    TransactionRecorder,
)

logger = get_logger(__name__)


@dataclass
class CheckoutResult:
    """Result of an instant checkout."""

    transaction: Transaction
    remaining_transactions: int | None


class CheckoutUseCase:
    """Price the cart and commit it with an instant payment method."""

    def __init__(
        self,
        cart: CartLedger | None = None,
        subscription_gate: SubscriptionGate | None = None,
        shift_manager: ShiftManager | None = None,
        recorder: TransactionRecorder | None = None,
    ):
        # Lazy import to avoid circular imports
        from quickpos.application import services

        self._cart = cart if cart is not None else services.get_cart_ledger()
        self._gate = (
            subscription_gate
            if subscription_gate is not None
            else services.get_subscription_gate()
        )
        self._shifts = (
            shift_manager if shift_manager is not None else services.get_shift_manager()
        )
        self._recorder = (
            recorder if recorder is not None else services.get_transaction_recorder()
        )

    def quote(self) -> PriceQuote:
        """What the current cart would cost if committed now."""
        return self._recorder.pricing.quote(self._cart.lines)

    async def execute(self, request: CheckoutRequest) -> CheckoutResult:
        """
        Commit the cart.

        Raises:
            ValidationError: If the method is digital (use the QR flow)
            EmptyCartError, QuotaExceededError, ShiftRequiredError: From commit
        """
        method = request.payment_method
        if not method.is_instant:
            raise ValidationError(
                "payment_method",
                "digital payments must go through the QR payment flow",
                method.value,
            )

        logger.info("checkout_started", payment_method=method, lines=len(self._cart.lines))

        transaction = self._recorder.commit(
            cart=self._cart,
            shift_manager=self._shifts,
            subscription_gate=self._gate,
            payment_method=method,
        )
        return CheckoutResult(
            transaction=transaction,
            remaining_transactions=self._gate.remaining(),
        )

    def to_response(self, result: CheckoutResult) -> CheckoutResponse:
        return CheckoutResponse(
            transaction=TransactionResponse.model_validate(result.transaction),
            remaining_transactions=result.remaining_transactions,
        )
