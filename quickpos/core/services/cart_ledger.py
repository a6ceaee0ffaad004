"""
Cart ledger: the working set of lines for the next transaction.

Totals are derived from the current lines on every read; nothing is cached.
"""

import threading
from decimal import Decimal

from quickpos.config import get_logger
from quickpos.core.entities.cart import CartLine, CartSnapshot, CatalogItem, Customer
from quickpos.core.money import money_sum

logger = get_logger(__name__)


class CartLedger:
    """Owns the cart lines and the attached customer."""

    def __init__(self) -> None:
        self._lines: list[CartLine] = []
        self._customer: Customer | None = None
        self.lock = threading.RLock()

    @property
    def lines(self) -> tuple[CartLine, ...]:
        """Copies of the current lines, in insertion order."""
        with self.lock:
            return tuple(line.model_copy() for line in self._lines)

    @property
    def customer(self) -> Customer | None:
        return self._customer

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def subtotal(self) -> Decimal:
        """Sum of unit_price * quantity over all lines."""
        with self.lock:
            return money_sum(line.unit_price * line.quantity for line in self._lines)

    @property
    def item_count(self) -> int:
        """Sum of quantities over all lines."""
        with self.lock:
            return sum(line.quantity for line in self._lines)

    def _find(self, product_id: str) -> CartLine | None:
        for line in self._lines:
            if line.product_id == product_id:
                return line
        return None

    def add_item(self, item: CatalogItem) -> CartLine:
        """Add one unit of `item`, merging with an existing line for the product."""
        with self.lock:
            line = self._find(item.product_id)
            if line is not None:
                line.quantity += 1
            else:
                line = CartLine(
                    product_id=item.product_id,
                    name=item.name,
                    unit_price=item.unit_price,
                    quantity=1,
                    notes=item.notes,
                )
                self._lines.append(line)

            logger.debug(
                "cart_item_added",
                product_id=item.product_id,
                quantity=line.quantity,
            )
            return line.model_copy()

    def remove_item(self, product_id: str) -> None:
        """Remove the line for `product_id`. Absent ids are ignored."""
        with self.lock:
            self._lines = [
                line for line in self._lines if line.product_id != product_id
            ]

    def set_quantity(self, product_id: str, quantity: int) -> None:
        """Replace the quantity of a line. quantity <= 0 removes it."""
        with self.lock:
            if quantity <= 0:
                self.remove_item(product_id)
                return

            line = self._find(product_id)
            if line is not None:
                line.quantity = quantity

    def attach_customer(self, customer: Customer | None) -> None:
        """Attach a customer, or detach with None."""
        with self.lock:
            self._customer = customer

    def clear(self) -> None:
        """Empty the cart and detach the customer."""
        with self.lock:
            self._lines = []
            self._customer = None

    def snapshot(self) -> CartSnapshot:
        """Copy of the lines and customer as they are right now."""
        with self.lock:
            return CartSnapshot(lines=self.lines, customer=self._customer)

    def settle(self, snapshot: CartSnapshot) -> None:
        """
        Take the quantities in `snapshot` out of the cart.

        Lines added after the snapshot stay for the next sale; once nothing
        is left the cart is cleared, customer included.
        """
        with self.lock:
            for sold in snapshot.lines:
                line = self._find(sold.product_id)
                if line is None:
                    continue
                if line.quantity > sold.quantity:
                    line.quantity -= sold.quantity
                else:
                    self.remove_item(sold.product_id)

            if not self._lines:
                self.clear()
