"""QR payment session domain entities."""

from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel


class PaymentState(str, Enum):
    """States of a QR payment session.

    IDLE -> PENDING -> CONFIRMING -> CONFIRMED
    PENDING/CONFIRMING -> EXPIRED | CANCELLED
    """

    IDLE = "idle"
    PENDING = "pending"
    CONFIRMING = "confirming"
    CONFIRMED = "confirmed"
    EXPIRED = "expired"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (
            PaymentState.CONFIRMED,
            PaymentState.EXPIRED,
            PaymentState.CANCELLED,
        )

    @property
    def is_active(self) -> bool:
        """Waiting on the customer or the processor."""
        return self in (PaymentState.PENDING, PaymentState.CONFIRMING)


class PaymentSnapshot(BaseModel):
    """Point-in-time view of a payment session for display."""

    session_id: str | None = None
    state: PaymentState
    amount: Decimal | None = None
    code: str | None = None
    started_at: datetime | None = None
    expires_at: datetime | None = None
    seconds_remaining: int = 0
    transaction_id: str | None = None
