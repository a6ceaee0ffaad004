"""
QRIS payment endpoints.

The session lives on the server; clients poll GET for the countdown and
POST /check to ask the processor whether the code was paid.
"""

from fastapi import APIRouter, Depends, status

from quickpos.api.dependencies import get_qr_payment_use_case
from quickpos.application.dto.responses import PaymentSessionResponse
from quickpos.application.use_cases import QRPaymentUseCase

router = APIRouter(prefix="/api/payments/qris", tags=["payments"])


@router.post("", response_model=PaymentSessionResponse, status_code=status.HTTP_201_CREATED)
async def start_payment(
    use_case: QRPaymentUseCase = Depends(get_qr_payment_use_case),
) -> PaymentSessionResponse:
    """Show a QR code for the current cart total."""
    return use_case.to_response(await use_case.start())


@router.get("", response_model=PaymentSessionResponse)
async def payment_status(
    use_case: QRPaymentUseCase = Depends(get_qr_payment_use_case),
) -> PaymentSessionResponse:
    return use_case.to_response(use_case.snapshot())


@router.post("/check", response_model=PaymentSessionResponse)
async def check_payment(
    use_case: QRPaymentUseCase = Depends(get_qr_payment_use_case),
) -> PaymentSessionResponse:
    return use_case.to_response(await use_case.check_status())


@router.post("/confirm", response_model=PaymentSessionResponse)
async def confirm_payment(
    use_case: QRPaymentUseCase = Depends(get_qr_payment_use_case),
) -> PaymentSessionResponse:
    """Confirm without polling, as the processor's webhook would."""
    return use_case.to_response(await use_case.force_confirm())


@router.delete("", response_model=PaymentSessionResponse)
async def cancel_payment(
    use_case: QRPaymentUseCase = Depends(get_qr_payment_use_case),
) -> PaymentSessionResponse:
    return use_case.to_response(use_case.cancel())
