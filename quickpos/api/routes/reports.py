"""
Report endpoints.
"""

from datetime import date

from fastapi import APIRouter, Depends, Query

from quickpos.api.dependencies import get_reports
from quickpos.application.dto.responses import DailyReportResponse
from quickpos.core.services import ReportService

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.get("/daily", response_model=DailyReportResponse)
async def daily_report(
    day: date | None = Query(default=None, description="Day to report; today if omitted"),
    reports: ReportService = Depends(get_reports),
) -> DailyReportResponse:
    """Sales, expenses and net for one day. Requires the daily_report feature."""
    return DailyReportResponse.model_validate(reports.daily_report(day))
