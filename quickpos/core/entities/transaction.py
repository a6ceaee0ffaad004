"""Transaction domain entities.

A Transaction is the immutable record of a completed sale. Its lines and
customer are snapshots taken at commit time; nothing in the cart is shared.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict

from quickpos.core.entities.cart import CartLine, Customer
from quickpos.core.money import to_money


class PaymentMethod(str, Enum):
    """Accepted payment methods."""

    CASH = "cash"
    CARD = "card"
    DIGITAL = "digital"  # QRIS, confirmed asynchronously

    @property
    def is_instant(self) -> bool:
        return self is not PaymentMethod.DIGITAL


class TransactionLine(BaseModel):
    """Frozen copy of a cart line."""

    model_config = ConfigDict(frozen=True)

    product_id: str
    name: str
    unit_price: Decimal
    quantity: int
    notes: str | None = None

    @property
    def line_total(self) -> Decimal:
        return to_money(self.unit_price * self.quantity)

    @classmethod
    def from_cart_line(cls, line: CartLine) -> "TransactionLine":
        return cls(
            product_id=line.product_id,
            name=line.name,
            unit_price=line.unit_price,
            quantity=line.quantity,
            notes=line.notes,
        )


class PriceQuote(BaseModel):
    """Amounts computed by the pricing policy for a set of lines."""

    model_config = ConfigDict(frozen=True)

    subtotal: Decimal
    discount: Decimal
    tax: Decimal
    total: Decimal


class Transaction(BaseModel):
    """A committed sale."""

    model_config = ConfigDict(frozen=True)

    id: str
    items: tuple[TransactionLine, ...]
    customer: Customer | None = None
    subtotal: Decimal
    discount: Decimal
    tax: Decimal
    total: Decimal
    payment_method: PaymentMethod
    created_at: datetime
    shift_id: str | None = None

    @property
    def item_count(self) -> int:
        """Total units sold in this transaction."""
        return sum(line.quantity for line in self.items)
