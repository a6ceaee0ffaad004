"""API middleware."""

from quickpos.api.middleware.error_handler import ErrorHandlerMiddleware
from quickpos.api.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware", "ErrorHandlerMiddleware"]
