"""Unit tests for CheckoutUseCase."""

from decimal import Decimal

import pytest

from quickpos.application.dto.requests import CheckoutRequest
from quickpos.application.use_cases.checkout import CheckoutResult, CheckoutUseCase
from quickpos.core.entities import PaymentMethod
from quickpos.core.exceptions import EmptyCartError, ValidationError


@pytest.fixture
def use_case(cart, gate, shifts, recorder) -> CheckoutUseCase:
    return CheckoutUseCase(
        cart=cart,
        subscription_gate=gate,
        shift_manager=shifts,
        recorder=recorder,
    )


class TestCheckoutUseCase:
    def test_quote(self, use_case, cart, latte):
        cart.add_item(latte)
        quote = use_case.quote()
        assert quote.subtotal == Decimal("7.00")
        assert quote.total == Decimal("6.30")

    async def test_execute_cash(self, use_case, cart, shifts, latte):
        shifts.open_shift(0)
        cart.add_item(latte)

        result = await use_case.execute(CheckoutRequest(payment_method=PaymentMethod.CASH))

        assert isinstance(result, CheckoutResult)
        assert result.transaction.payment_method is PaymentMethod.CASH
        assert result.remaining_transactions == 24
        assert cart.is_empty

    async def test_digital_is_refused(self, use_case, cart, shifts, gate, latte):
        shifts.open_shift(0)
        cart.add_item(latte)

        with pytest.raises(ValidationError):
            await use_case.execute(CheckoutRequest(payment_method=PaymentMethod.DIGITAL))

        assert not cart.is_empty
        assert gate.monthly_transaction_count == 0

    async def test_errors_propagate(self, use_case, shifts):
        shifts.open_shift(0)
        with pytest.raises(EmptyCartError):
            await use_case.execute(CheckoutRequest())

    async def test_to_response(self, use_case, cart, shifts, latte, croissant):
        shifts.open_shift(0)
        cart.add_item(latte)
        cart.add_item(croissant)
        result = await use_case.execute(CheckoutRequest(payment_method=PaymentMethod.CARD))

        response = use_case.to_response(result)

        assert response.transaction.id == result.transaction.id
        assert response.transaction.items[1].line_total == Decimal("4.50")
        assert response.remaining_transactions == 24
