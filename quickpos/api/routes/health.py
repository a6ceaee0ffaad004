"""
Health check endpoints.
"""

import time

from fastapi import APIRouter, Depends

from quickpos import __version__
from quickpos.api.dependencies import get_gate, get_shifts
from quickpos.application.dto.responses import HealthResponse
from quickpos.core.services import ShiftManager, SubscriptionGate

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


@router.get("", response_model=HealthResponse)
async def health_check(
    shifts: ShiftManager = Depends(get_shifts),
    gate: SubscriptionGate = Depends(get_gate),
) -> HealthResponse:
    """Service status, uptime, shift state and active plan."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        uptime_seconds=time.time() - _start_time,
        shift_state=shifts.state.value,
        plan=gate.current_plan.value,
    )
