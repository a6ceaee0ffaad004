"""
Base payment processor with retry.

Transient network failures are retried with exponential backoff; once
retries are exhausted the failure surfaces as PaymentProcessorError.
"""

from abc import ABC
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar, cast

from tenacity import (
    RetryCallState,
    RetryError,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from quickpos.config import get_logger, get_settings
from quickpos.core.exceptions import PaymentProcessorError
from quickpos.core.interfaces import IPaymentProcessor

logger = get_logger(__name__)

T = TypeVar("T")


class BasePaymentProcessor(IPaymentProcessor, ABC):
    """Shared retry behaviour for processor adapters."""

    def __init__(
        self,
        max_retries: int | None = None,
        retry_delay: float | None = None,
        retry_multiplier: float | None = None,
    ) -> None:
        settings = get_settings().payment
        self.max_retries = max_retries if max_retries is not None else settings.max_retries
        self.retry_delay = retry_delay if retry_delay is not None else settings.retry_delay
        self.retry_multiplier = (
            retry_multiplier if retry_multiplier is not None else settings.retry_multiplier
        )

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def _get_retry_decorator(self) -> Any:
        return retry(
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(
                multiplier=self.retry_delay,
                min=self.retry_delay,
                max=self.retry_delay * (self.retry_multiplier**3),
            ),
            retry=retry_if_exception_type((TimeoutError, ConnectionError)),
            before_sleep=self._log_retry,
        )

    @staticmethod
    def _log_retry(retry_state: RetryCallState) -> None:
        logger.warning(
            "payment_check_retry",
            attempt=retry_state.attempt_number,
            error=str(retry_state.outcome.exception()) if retry_state.outcome else None,
        )

    async def _with_retry(
        self,
        operation: Callable[..., Awaitable[T]],
        *args: Any,
        **kwargs: Any,
    ) -> T:
        """
        Run `operation` with retries.

        Raises:
            PaymentProcessorError: If every attempt failed
        """
        try:
            result = await self._get_retry_decorator()(operation)(*args, **kwargs)
            return cast(T, result)

        except RetryError as e:
            cause = e.last_attempt.exception()
            raise PaymentProcessorError(self.name, str(cause)) from cause

        except (TimeoutError, ConnectionError, OSError) as e:
            raise PaymentProcessorError(self.name, str(e)) from e
