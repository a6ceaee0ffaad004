"""
QR payment session state machine.

One checkout attempt paid by QRIS:

    IDLE -> PENDING -> CONFIRMING -> CONFIRMED
    PENDING or CONFIRMING -> EXPIRED    (countdown reached zero)
    PENDING or CONFIRMING -> CANCELLED  (drawer closed)

The countdown and the processor poll run as asyncio tasks. Every start,
cancel, expiry and confirmation bumps a generation counter; a task that
wakes up holding an older generation does nothing, so a late poll can
never confirm a superseded session.
"""

import asyncio
from collections.abc import Awaitable, Callable
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any

from quickpos.config import get_logger
from quickpos.core.entities.payment import PaymentSnapshot, PaymentState
from quickpos.core.exceptions import (
    InvalidAmountError,
    InvalidTransitionError,
    SessionExpiredError,
)
from quickpos.core.interfaces.clock import IClock, IIdGenerator
from quickpos.core.interfaces.payment_processor import IPaymentProcessor
from quickpos.core.money import to_money
from quickpos.core.services.qris import QRISMerchant, build_qris_payload

logger = get_logger(__name__)

StateListener = Callable[[PaymentState, PaymentState], None]
ConfirmedHandler = Callable[["PaymentSession"], Awaitable[Any]]

MACHINE = "payment session"


def _running_task() -> asyncio.Task | None:
    try:
        return asyncio.current_task()
    except RuntimeError:
        return None


class PaymentSession:
    """
    State machine for a single QR payment attempt.

    `on_confirmed` is awaited exactly once per started session, when it
    reaches CONFIRMED; its return value is kept on `result`.
    """

    def __init__(
        self,
        processor: IPaymentProcessor,
        clock: IClock,
        id_generator: IIdGenerator,
        merchant: QRISMerchant,
        ttl_seconds: int = 300,
        tick_interval: float = 1.0,
        on_confirmed: ConfirmedHandler | None = None,
    ):
        self._processor = processor
        self._clock = clock
        self._ids = id_generator
        self._merchant = merchant
        self._ttl = ttl_seconds
        self._tick_interval = tick_interval
        self._on_confirmed = on_confirmed
        self._listeners: list[StateListener] = []

        self._state = PaymentState.IDLE
        self._session_id: str | None = None
        self._amount: Decimal | None = None
        self._code: str | None = None
        self._started_at: datetime | None = None
        self._expires_at: datetime | None = None
        self._seconds_remaining = 0

        self._generation = 0
        self._countdown_task: asyncio.Task | None = None
        self._check_task: asyncio.Task | None = None
        self._confirm_fired = False
        self.result: Any = None

    # -- read side ---------------------------------------------------------

    @property
    def state(self) -> PaymentState:
        return self._state

    @property
    def session_id(self) -> str | None:
        return self._session_id

    @property
    def amount(self) -> Decimal | None:
        return self._amount

    @property
    def code(self) -> str | None:
        return self._code

    @property
    def expires_at(self) -> datetime | None:
        return self._expires_at

    @property
    def seconds_remaining(self) -> int:
        return self._seconds_remaining if self._state.is_active else 0

    def add_listener(self, listener: StateListener) -> None:
        """Call `listener(previous, new)` on every state change, timer-driven ones included."""
        self._listeners.append(listener)

    def snapshot(self) -> PaymentSnapshot:
        return PaymentSnapshot(
            session_id=self._session_id,
            state=self._state,
            amount=self._amount,
            code=self._code,
            started_at=self._started_at,
            expires_at=self._expires_at,
            seconds_remaining=self.seconds_remaining,
            transaction_id=getattr(self.result, "id", None),
        )

    # -- transitions -------------------------------------------------------

    async def start(self, amount: Decimal | int | float | str) -> PaymentSnapshot:
        """
        Begin a new session for `amount`, superseding any unfinished one.

        Raises:
            InvalidAmountError: If amount is not positive
            InvalidTransitionError: If this session was already confirmed
        """
        value = to_money(amount)
        if value <= 0:
            raise InvalidAmountError("amount", value, "must be positive")
        if self._state is PaymentState.CONFIRMED:
            raise InvalidTransitionError(MACHINE, self._state.value, "start")

        self._invalidate()

        self._session_id = self._ids.new_id("pay_")
        self._amount = value
        self._code = build_qris_payload(value, self._session_id, self._merchant)
        self._started_at = self._clock.now()
        self._expires_at = self._started_at + timedelta(seconds=self._ttl)
        self._seconds_remaining = self._ttl
        self._confirm_fired = False
        self.result = None
        self._set_state(PaymentState.PENDING)

        if self._tick_interval > 0:
            self._countdown_task = asyncio.create_task(
                self._run_countdown(self._generation)
            )

        logger.info(
            "payment_session_started",
            session_id=self._session_id,
            amount=value,
            expires_at=self._expires_at.isoformat(),
        )
        return self.snapshot()

    def tick(self, seconds: int = 1) -> PaymentState:
        """Advance the countdown. An active session expires when it reaches zero."""
        if not self._state.is_active:
            return self._state

        self._seconds_remaining = max(0, self._seconds_remaining - seconds)
        if self._seconds_remaining == 0:
            self._invalidate()
            self._set_state(PaymentState.EXPIRED)
            logger.info("payment_session_expired", session_id=self._session_id)
        return self._state

    async def check_status(self) -> PaymentState:
        """
        Poll the processor. PENDING -> CONFIRMING -> CONFIRMED.

        Concurrent callers share one in-flight poll, so confirmation fires once.

        Raises:
            SessionExpiredError: If the session expired
            InvalidTransitionError: If no session is active
            PaymentProcessorError: If the processor could not be reached
        """
        state = self._state
        if state is PaymentState.CONFIRMED:
            return state
        if state is PaymentState.EXPIRED:
            raise SessionExpiredError(self._session_id or "")
        if state in (PaymentState.IDLE, PaymentState.CANCELLED):
            raise InvalidTransitionError(MACHINE, state.value, "check")

        if state is PaymentState.PENDING:
            if self._code is None or self._amount is None:
                raise InvalidTransitionError(MACHINE, state.value, "check")
            self._set_state(PaymentState.CONFIRMING)
            self._check_task = asyncio.create_task(
                self._poll(self._generation, self._code, self._amount)
            )

        task = self._check_task
        if task is None:
            raise InvalidTransitionError(MACHINE, self._state.value, "check")
        await asyncio.wait({task})

        if not task.cancelled():
            error = task.exception()
            if error is not None:
                raise error
        if self._state is PaymentState.EXPIRED:
            raise SessionExpiredError(self._session_id or "")
        return self._state

    async def force_confirm(self) -> PaymentState:
        """
        Confirm without polling, as a processor webhook would.

        Raises:
            SessionExpiredError: If the session expired
            InvalidTransitionError: If no session is active
        """
        state = self._state
        if state is PaymentState.CONFIRMED:
            return state
        if state is PaymentState.EXPIRED:
            raise SessionExpiredError(self._session_id or "")
        if state in (PaymentState.IDLE, PaymentState.CANCELLED):
            raise InvalidTransitionError(MACHINE, state.value, "confirm")

        await self._confirm(source="webhook")
        return self._state

    def cancel(self) -> PaymentState:
        """
        Abandon the session and stop its timers. Never touches cart or shift.

        Idle, expired and cancelled sessions are left as they are.

        Raises:
            InvalidTransitionError: If the session was already confirmed
        """
        state = self._state
        if state is PaymentState.CONFIRMED:
            raise InvalidTransitionError(MACHINE, state.value, "cancel")

        self._invalidate()
        if state.is_active:
            self._set_state(PaymentState.CANCELLED)
            logger.info("payment_session_cancelled", session_id=self._session_id)
        return self._state

    async def aclose(self) -> None:
        """Cancel if still active and wait for background tasks to finish."""
        pending = [
            task
            for task in (self._countdown_task, self._check_task)
            if task is not None and not task.done() and task is not _running_task()
        ]
        if self._state is PaymentState.CONFIRMED:
            self._invalidate()
        else:
            self.cancel()
        if pending:
            await asyncio.wait(pending)

    # -- internals ---------------------------------------------------------

    async def _run_countdown(self, generation: int) -> None:
        while generation == self._generation and self._state.is_active:
            await asyncio.sleep(self._tick_interval)
            if generation != self._generation:
                return
            self.tick()

    async def _poll(self, generation: int, code: str, amount: Decimal) -> None:
        try:
            result = await self._processor.check_payment(code, amount)
        except Exception:
            if generation == self._generation and self._state is PaymentState.CONFIRMING:
                self._set_state(PaymentState.PENDING)
            raise

        if generation != self._generation or self._state is not PaymentState.CONFIRMING:
            return

        if result.paid:
            await self._confirm(source="poll")
        else:
            logger.info("payment_not_yet_received", session_id=self._session_id)
            self._set_state(PaymentState.PENDING)

    async def _confirm(self, source: str) -> None:
        self._invalidate()
        self._set_state(PaymentState.CONFIRMED)
        logger.info(
            "payment_session_confirmed",
            session_id=self._session_id,
            amount=self._amount,
            source=source,
        )

        if self._on_confirmed is not None and not self._confirm_fired:
            self._confirm_fired = True
            self.result = await self._on_confirmed(self)

    def _invalidate(self) -> None:
        """Bump the generation and cancel background tasks other than the caller."""
        self._generation += 1
        current = _running_task()
        for task in (self._countdown_task, self._check_task):
            if task is not None and task is not current and not task.done():
                task.cancel()
        self._countdown_task = None
        self._check_task = None

    def _set_state(self, new: PaymentState) -> None:
        previous = self._state
        if previous is new:
            return
        self._state = new
        for listener in list(self._listeners):
            try:
                listener(previous, new)
            except Exception:
                logger.exception(
                    "payment_state_listener_failed",
                    previous=previous,
                    state=new,
                )
