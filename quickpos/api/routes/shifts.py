"""
Shift endpoints: open, close, summaries and history.
"""

from fastapi import APIRouter, Depends, HTTPException

from quickpos.api.dependencies import get_shifts
from quickpos.application.dto.requests import CloseShiftRequest, OpenShiftRequest
from quickpos.application.dto.responses import ShiftResponse, ShiftSummaryResponse
from quickpos.core.services import ShiftManager

router = APIRouter(prefix="/api/shifts", tags=["shifts"])


@router.get("/current", response_model=ShiftResponse)
async def current_shift(shifts: ShiftManager = Depends(get_shifts)) -> ShiftResponse:
    shift = shifts.current_shift
    if shift is None:
        raise HTTPException(status_code=404, detail="No shift has been opened")
    return ShiftResponse.model_validate(shift)


@router.post("/open", response_model=ShiftResponse, status_code=201)
async def open_shift(
    request: OpenShiftRequest,
    shifts: ShiftManager = Depends(get_shifts),
) -> ShiftResponse:
    return ShiftResponse.model_validate(shifts.open_shift(request.opening_cash))


@router.post("/close", response_model=ShiftSummaryResponse)
async def close_shift(
    request: CloseShiftRequest,
    shifts: ShiftManager = Depends(get_shifts),
) -> ShiftSummaryResponse:
    """Close the open shift and return its reconciliation."""
    return ShiftSummaryResponse.model_validate(shifts.close_shift(request.closing_cash))


@router.get("/summary", response_model=ShiftSummaryResponse)
async def current_summary(shifts: ShiftManager = Depends(get_shifts)) -> ShiftSummaryResponse:
    return ShiftSummaryResponse.model_validate(shifts.summary())


@router.get("/history", response_model=list[ShiftResponse])
async def shift_history(shifts: ShiftManager = Depends(get_shifts)) -> list[ShiftResponse]:
    """Closed shifts, oldest first."""
    return [ShiftResponse.model_validate(shift) for shift in shifts.history]


@router.get("/{shift_id}/summary", response_model=ShiftSummaryResponse)
async def shift_summary(
    shift_id: str,
    shifts: ShiftManager = Depends(get_shifts),
) -> ShiftSummaryResponse:
    return ShiftSummaryResponse.model_validate(shifts.summary(shift_id))
