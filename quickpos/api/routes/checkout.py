"""
Instant checkout endpoints (cash and card).
"""

from fastapi import APIRouter, Depends, status

from quickpos.api.dependencies import get_checkout_use_case
from quickpos.application.dto.requests import CheckoutRequest
from quickpos.application.dto.responses import CheckoutResponse, QuoteResponse
from quickpos.application.use_cases import CheckoutUseCase

router = APIRouter(prefix="/api/checkout", tags=["checkout"])


@router.get("/quote", response_model=QuoteResponse)
async def quote(use_case: CheckoutUseCase = Depends(get_checkout_use_case)) -> QuoteResponse:
    """Subtotal, discount, tax and total for the current cart."""
    return QuoteResponse.model_validate(use_case.quote())


@router.post("", response_model=CheckoutResponse, status_code=status.HTTP_201_CREATED)
async def checkout(
    request: CheckoutRequest,
    use_case: CheckoutUseCase = Depends(get_checkout_use_case),
) -> CheckoutResponse:
    """Commit the cart as a transaction paid by cash or card."""
    result = await use_case.execute(request)
    return use_case.to_response(result)
