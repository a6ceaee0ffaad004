"""
Error translation for the HTTP surface.

Every failure leaves the API as an ErrorResponse carrying a stable
error_code, a message, a recovery hint and the request path. POS errors
are mapped to statuses by family; anything unexpected becomes a 500.
"""

import traceback
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from quickpos.application.dto.responses import ErrorResponse
from quickpos.config import get_logger
from quickpos.core.exceptions import (
    ConfigurationError,
    EmptyCartError,
    InvalidTransitionError,
    NotFoundError,
    PaymentProcessorError,
    POSError,
    SessionExpiredError,
    ShiftError,
    SubscriptionError,
    ValidationError,
)

logger = get_logger(__name__)


# Ordered: subclasses before their families, first isinstance match wins
EXCEPTION_STATUS_MAP: dict[type[Exception], int] = {
    EmptyCartError: 422,
    SubscriptionError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ShiftError: status.HTTP_409_CONFLICT,
    InvalidTransitionError: status.HTTP_409_CONFLICT,
    SessionExpiredError: status.HTTP_410_GONE,
    PaymentProcessorError: status.HTTP_502_BAD_GATEWAY,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    ConfigurationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ValueError: status.HTTP_400_BAD_REQUEST,
    KeyError: status.HTTP_404_NOT_FOUND,
}

HINT_MAP: dict[str, str] = {
    "EMPTY_CART": "Add at least one item with POST /api/cart/items before paying.",
    "QUOTA_EXCEEDED": "The monthly transaction limit is used up. Upgrade the plan or wait for the next period.",
    "FEATURE_LOCKED": "Upgrade to the plan named in the error detail (required_plan).",
    "SHIFT_REQUIRED": "Open a shift with POST /api/shifts/open first.",
    "SHIFT_CLOSED": "The shift is closed. Open a new shift to keep selling.",
    "SHIFT_NOT_FOUND": "Check the shift ID and try GET /api/shifts/history.",
    "EXPENSE_NOT_FOUND": "Check the expense ID and try GET /api/expenses.",
    "TRANSACTION_NOT_FOUND": "Check the transaction ID and try GET /api/transactions.",
    "SESSION_EXPIRED": "The QR code expired. Start a new one with POST /api/payments/qris.",
    "PAYMENT_PROCESSOR_ERROR": "The payment processor is unreachable. Retry the status check.",
    "INVALID_TRANSITION": "The action is not allowed in the current state.",
    "INVALID_AMOUNT": "Amounts must be valid non-negative numbers.",
    "VALIDATION_ERROR": "Compare the request body with the endpoint schema.",
}

# Used when an error code has no hint of its own
STATUS_HINTS: dict[int, str] = {
    400: "Fix the request parameters and send it again.",
    403: "The current subscription plan does not allow this.",
    404: "Nothing exists at this ID or path.",
    409: "The request conflicts with the current state.",
    422: "The request is well-formed but cannot be processed yet.",
    500: "Unexpected server failure; see the request_error log entry.",
    502: "An upstream service failed. Retry later.",
}


def _get_hint(error_code: str, status_code: int) -> str:
    return HINT_MAP.get(error_code) or STATUS_HINTS.get(status_code, "")


def status_for(exc: Exception) -> int:
    """HTTP status for an exception raised while serving a request."""
    return next(
        (code for exc_type, code in EXCEPTION_STATUS_MAP.items() if isinstance(exc, exc_type)),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _render(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    detail: str | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        error_code=error_code,
        message=message,
        hint=_get_hint(error_code, status_code),
        detail=detail,
        path=request.url.path,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def error_response(request: Request, exc: Exception) -> JSONResponse:
    """Log `exc` and turn it into an ErrorResponse."""
    status_code = status_for(exc)

    if isinstance(exc, POSError):
        error_code, message = exc.code, exc.message
        detail = ", ".join(f"{k}={v}" for k, v in exc.details.items()) or None
    else:
        error_code, message, detail = type(exc).__name__, str(exc), None

    server_fault = status_code >= 500
    (logger.error if server_fault else logger.warning)(
        "request_error",
        request_id=getattr(request.state, "request_id", None),
        path=request.url.path,
        error_type=error_code,
        error=message,
        status=status_code,
        traceback=traceback.format_exc() if server_fault else None,
    )
    return _render(request, status_code, error_code, message, detail)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Last line of defence: whatever escapes the route handlers is rendered here."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            return error_response(request, e)


def setup_exception_handlers(app: FastAPI) -> None:
    """Register handlers for POS errors, body validation and HTTPException."""

    @app.exception_handler(POSError)
    async def pos_exception_handler(request: Request, exc: POSError) -> JSONResponse:
        return error_response(request, exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        problems = [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        ]
        logger.warning("request_invalid", path=request.url.path, problems=problems)
        return _render(
            request,
            422,
            "VALIDATION_ERROR",
            "Request body or parameters failed validation",
            "; ".join(problems),
        )

    @app.exception_handler(HTTPException)
    async def http_error_handler(request: Request, exc: HTTPException) -> JSONResponse:
        error_code = "NOT_FOUND" if exc.status_code == status.HTTP_404_NOT_FOUND else "HTTP_ERROR"
        return _render(request, exc.status_code, error_code, str(exc.detail or "Request failed"))
