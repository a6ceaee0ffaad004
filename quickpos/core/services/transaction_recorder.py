"""
Transaction recorder: the single commit path from cart to history.

Validation order is fixed: empty cart, quota, open shift. All three run
while holding the cart, gate and shift locks, and the mutations that
follow happen under the same locks, so a quota check can never be
separated from the usage increment it guards.
"""

from quickpos.config import get_logger
from quickpos.core.entities.cart import CartSnapshot
from quickpos.core.entities.transaction import PaymentMethod, Transaction, TransactionLine
from quickpos.core.exceptions import EmptyCartError, ShiftRequiredError
from quickpos.core.interfaces.clock import IClock, IIdGenerator
from quickpos.core.interfaces.transaction_store import ITransactionStore
from quickpos.core.services.cart_ledger import CartLedger
from quickpos.core.services.pricing import PricingPolicy
from quickpos.core.services.shift_manager import ShiftManager
from quickpos.core.services.subscription_gate import SubscriptionGate

logger = get_logger(__name__)


class TransactionRecorder:
    """Turns the current cart into an immutable Transaction."""

    def __init__(
        self,
        pricing: PricingPolicy,
        store: ITransactionStore,
        clock: IClock,
        id_generator: IIdGenerator,
        require_open_shift: bool = True,
    ):
        self._pricing = pricing
        self._store = store
        self._clock = clock
        self._ids = id_generator
        self.require_open_shift = require_open_shift

    @property
    def pricing(self) -> PricingPolicy:
        return self._pricing

    def commit(
        self,
        cart: CartLedger,
        shift_manager: ShiftManager,
        subscription_gate: SubscriptionGate,
        payment_method: PaymentMethod,
        snapshot: CartSnapshot | None = None,
    ) -> Transaction:
        """
        Record the cart as a transaction, all or nothing.

        With `snapshot`, the snapshot is recorded instead of the live cart and
        only its quantities are taken out of the cart afterwards.

        Raises:
            EmptyCartError: If the cart has no lines
            QuotaExceededError: If the plan's monthly limit is reached
            ShiftRequiredError: If shift gating is on and no shift is open
        """
        # Fixed acquisition order: cart, gate, shift
        with cart.lock, subscription_gate.lock, shift_manager.lock:
            held = snapshot if snapshot is not None else cart.snapshot()
            if held.is_empty:
                logger.warning("commit_rejected", reason="empty_cart")
                raise EmptyCartError()

            subscription_gate.ensure_can_transact()

            shift = shift_manager.current_shift
            if shift is None or not shift.is_open:
                if self.require_open_shift:
                    logger.warning("commit_rejected", reason="no_open_shift")
                    raise ShiftRequiredError()
                shift = None

            lines = held.lines
            quote = self._pricing.quote(lines)
            transaction = Transaction(
                id=self._ids.new_id("tx_"),
                items=tuple(TransactionLine.from_cart_line(line) for line in lines),
                customer=held.customer,
                subtotal=quote.subtotal,
                discount=quote.discount,
                tax=quote.tax,
                total=quote.total,
                payment_method=payment_method,
                created_at=self._clock.now(),
                shift_id=shift.id if shift else None,
            )

            self._store.add(transaction)
            try:
                if shift is not None:
                    shift_manager.record_transaction(transaction)
            except Exception:
                self._store.discard(transaction.id)
                raise

            used = subscription_gate.record_usage()
            if snapshot is None:
                cart.clear()
            else:
                cart.settle(snapshot)

        logger.info(
            "transaction_committed",
            transaction_id=transaction.id,
            shift_id=transaction.shift_id,
            total=transaction.total,
            payment_method=payment_method,
            items=transaction.item_count,
            monthly_count=used,
        )
        return transaction
