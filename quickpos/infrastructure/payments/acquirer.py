"""
HTTP payment processor.

Polls a QRIS acquirer's status endpoint. Timeouts, connection errors and
5xx answers are retried; anything else fails the check immediately.
"""

import time
from decimal import Decimal

import httpx

from quickpos.config import get_logger, get_settings
from quickpos.core.exceptions import PaymentProcessorError
from quickpos.core.interfaces import PaymentCheckResult
from quickpos.infrastructure.payments.base import BasePaymentProcessor

logger = get_logger(__name__)


class AcquirerPaymentProcessor(BasePaymentProcessor):
    """
    Acquirer HTTP API client.

    POST {api_url}/qris/status with {"code", "amount"}; the acquirer
    answers {"paid": bool, "reference": str | null}.
    """

    def __init__(
        self,
        api_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        max_retries: int | None = None,
        retry_delay: float | None = None,
    ) -> None:
        super().__init__(max_retries=max_retries, retry_delay=retry_delay)
        settings = get_settings().payment
        self.api_url = (api_url or settings.api_url).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.api_key
        self.timeout = timeout if timeout is not None else settings.timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def check_payment(self, code: str, amount: Decimal) -> PaymentCheckResult:
        return await self._with_retry(self._request_status, code, amount)

    async def _request_status(self, code: str, amount: Decimal) -> PaymentCheckResult:
        url = f"{self.api_url}/qris/status"
        payload = {"code": code, "amount": str(amount)}
        start_time = time.time()

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(url, json=payload, headers=self._headers())
        except httpx.TimeoutException as e:
            raise TimeoutError(f"acquirer timed out after {self.timeout}s") from e
        except httpx.TransportError as e:
            raise ConnectionError(str(e)) from e

        if response.status_code >= 500:
            raise ConnectionError(f"HTTP {response.status_code}")
        if response.status_code != 200:
            raise PaymentProcessorError(
                self.name, f"HTTP {response.status_code}: {response.text[:200]}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise PaymentProcessorError(self.name, "invalid JSON response") from e

        logger.info(
            "acquirer_status_polled",
            paid=bool(data.get("paid")),
            elapsed_ms=int((time.time() - start_time) * 1000),
        )
        return PaymentCheckResult(
            paid=bool(data.get("paid")),
            reference=data.get("reference"),
            error=data.get("error"),
        )
