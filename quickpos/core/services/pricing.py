"""Discount and tax rules, and the policy that combines them into a quote."""

from collections.abc import Sequence
from decimal import Decimal

from quickpos.core.entities.cart import CartLine
from quickpos.core.entities.transaction import PriceQuote
from quickpos.core.interfaces.pricing import IDiscountRule, ITaxRule
from quickpos.core.money import ZERO, money_sum, to_money


class NoDiscount(IDiscountRule):
    def discount(self, subtotal: Decimal, lines: Sequence[CartLine]) -> Decimal:
        return ZERO


class PercentageDiscount(IDiscountRule):
    """Fixed share of the subtotal."""

    def __init__(self, rate: Decimal | str):
        self.rate = Decimal(rate)
        if not ZERO <= self.rate <= 1:
            raise ValueError(f"discount rate out of range: {rate}")

    def discount(self, subtotal: Decimal, lines: Sequence[CartLine]) -> Decimal:
        return to_money(subtotal * self.rate)


class NoTax(ITaxRule):
    def tax(self, taxable: Decimal) -> Decimal:
        return ZERO


class PercentageTax(ITaxRule):
    """Flat rate on the discounted amount."""

    def __init__(self, rate: Decimal | str):
        self.rate = Decimal(rate)
        if self.rate < 0:
            raise ValueError(f"tax rate out of range: {rate}")

    def tax(self, taxable: Decimal) -> Decimal:
        return to_money(taxable * self.rate)


class PricingPolicy:
    """total = subtotal - discount + tax, with tax charged after discount."""

    def __init__(
        self,
        discount_rule: IDiscountRule | None = None,
        tax_rule: ITaxRule | None = None,
    ):
        self.discount_rule = discount_rule or NoDiscount()
        self.tax_rule = tax_rule or NoTax()

    @classmethod
    def from_rates(cls, discount_rate: Decimal, tax_rate: Decimal) -> "PricingPolicy":
        return cls(
            discount_rule=PercentageDiscount(discount_rate) if discount_rate else NoDiscount(),
            tax_rule=PercentageTax(tax_rate) if tax_rate else NoTax(),
        )

    def quote(self, lines: Sequence[CartLine]) -> PriceQuote:
        subtotal = money_sum(line.unit_price * line.quantity for line in lines)
        # A rule may never discount below zero
        discount = min(to_money(self.discount_rule.discount(subtotal, lines)), subtotal)
        tax = to_money(self.tax_rule.tax(subtotal - discount))
        return PriceQuote(
            subtotal=subtotal,
            discount=discount,
            tax=tax,
            total=to_money(subtotal - discount + tax),
        )
