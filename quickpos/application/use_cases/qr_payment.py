"""
QR Payment Use Case: the terminal's QRIS payment desk.

Holds at most one live PaymentSession. Showing a new QR code supersedes
the previous session. The cart is frozen when the code is shown, and a
confirmed session records exactly that snapshot once, so the amount paid
is the amount recorded.
"""

from collections.abc import Callable
from functools import partial

from quickpos.application.dto.responses import PaymentSessionResponse
from quickpos.config import get_logger
from quickpos.core.entities.cart import CartSnapshot
from quickpos.core.entities.payment import PaymentSnapshot, PaymentState
from quickpos.core.entities.transaction import PaymentMethod, Transaction
from quickpos.core.exceptions import (
    EmptyCartError,
    InvalidTransitionError,
    ShiftRequiredError,
)
from quickpos.core.services import (
    CartLedger,
    PaymentSession,
    ShiftManager,
    SubscriptionGate,
    TransactionRecorder,
)
from quickpos.core.services.payment_session import ConfirmedHandler

logger = get_logger(__name__)

SessionFactory = Callable[[ConfirmedHandler], PaymentSession]


class QRPaymentUseCase:
    """Drives PaymentSession for the current cart."""

    def __init__(
        self,
        cart: CartLedger | None = None,
        subscription_gate: SubscriptionGate | None = None,
        shift_manager: ShiftManager | None = None,
        recorder: TransactionRecorder | None = None,
        session_factory: SessionFactory | None = None,
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
        self._session_factory = session_factory or services.create_payment_session
        self._session: PaymentSession | None = None
        self.last_transaction: Transaction | None = None

    @property
    def session(self) -> PaymentSession | None:
        return self._session

    def snapshot(self) -> PaymentSnapshot:
        if self._session is None:
            return PaymentSnapshot(state=PaymentState.IDLE)
        return self._session.snapshot()

    async def start(self) -> PaymentSnapshot:
        """
        Show a QR code for the current cart total.

        The same preconditions as commit are checked up front so a code is
        never shown for a cart that could not be recorded.

        Raises:
            EmptyCartError: If the cart has no lines
            QuotaExceededError: If the plan's monthly limit is reached
            ShiftRequiredError: If shift gating is on and no shift is open
        """
        held = self._cart.snapshot()
        if held.is_empty:
            raise EmptyCartError()
        self._gate.ensure_can_transact()
        if self._recorder.require_open_shift and not self._shifts.has_open_shift:
            raise ShiftRequiredError()

        quote = self._recorder.pricing.quote(held.lines)

        if self._session is not None:
            await self._session.aclose()

        self._session = self._session_factory(partial(self._commit, held))
        snapshot = await self._session.start(quote.total)
        logger.info("qr_payment_shown", session_id=snapshot.session_id, total=quote.total)
        return snapshot

    async def check_status(self) -> PaymentSnapshot:
        """
        Raises:
            InvalidTransitionError: If no session was started
            SessionExpiredError: If the session expired
            PaymentProcessorError: If the processor could not be reached
        """
        await self._require_session().check_status()
        return self.snapshot()

    async def force_confirm(self) -> PaymentSnapshot:
        await self._require_session().force_confirm()
        return self.snapshot()

    def cancel(self) -> PaymentSnapshot:
        """Close the QR drawer. Cart and shift are left untouched."""
        if self._session is not None:
            self._session.cancel()
        return self.snapshot()

    async def aclose(self) -> None:
        if self._session is not None:
            await self._session.aclose()

    def to_response(self, snapshot: PaymentSnapshot) -> PaymentSessionResponse:
        return PaymentSessionResponse.model_validate(snapshot, from_attributes=True)

    def _require_session(self) -> PaymentSession:
        if self._session is None:
            raise InvalidTransitionError("payment session", PaymentState.IDLE.value, "check")
        return self._session

    async def _commit(self, held: CartSnapshot, session: PaymentSession) -> Transaction:
        transaction = self._recorder.commit(
            cart=self._cart,
            shift_manager=self._shifts,
            subscription_gate=self._gate,
            payment_method=PaymentMethod.DIGITAL,
            snapshot=held,
        )
        self.last_transaction = transaction
        logger.info(
            "qr_payment_committed",
            session_id=session.session_id,
            transaction_id=transaction.id,
        )
        return transaction
