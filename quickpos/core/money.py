"""Money helpers. All amounts are Decimal rounded half-up to two places."""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def to_money(value: Decimal | int | float | str) -> Decimal:
    """Quantize a value to cents."""
    if not isinstance(value, Decimal):
        # str() keeps floats like 23.5 from dragging binary noise along
        value = Decimal(str(value))
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def money_sum(values) -> Decimal:
    """Sum an iterable of amounts, returning cents."""
    return to_money(sum(values, ZERO))
