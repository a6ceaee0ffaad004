"""Pluggable pricing rules evaluated at commit time."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from decimal import Decimal

from quickpos.core.entities.cart import CartLine


class IDiscountRule(ABC):
    """Computes the discount for a set of lines."""

    @abstractmethod
    def discount(self, subtotal: Decimal, lines: Sequence[CartLine]) -> Decimal:
        pass


class ITaxRule(ABC):
    """Computes tax on the discounted amount."""

    @abstractmethod
    def tax(self, taxable: Decimal) -> Decimal:
        pass
