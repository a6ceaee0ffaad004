"""Simulated QRIS processor for demos and tests."""

import asyncio
from decimal import Decimal

from quickpos.config import get_logger
from quickpos.core.interfaces import PaymentCheckResult
from quickpos.infrastructure.payments.base import BasePaymentProcessor

logger = get_logger(__name__)


class SimulatedPaymentProcessor(BasePaymentProcessor):
    """
    Answers every poll after a fixed latency.

    `transient_failures` makes the first N attempts raise ConnectionError,
    which exercises the retry path.
    """

    def __init__(
        self,
        latency_seconds: float = 2.0,
        approve: bool = True,
        transient_failures: int = 0,
        max_retries: int | None = None,
        retry_delay: float | None = None,
    ) -> None:
        super().__init__(max_retries=max_retries, retry_delay=retry_delay)
        self.latency_seconds = latency_seconds
        self.approve = approve
        self.transient_failures = transient_failures
        self.attempts = 0

    async def check_payment(self, code: str, amount: Decimal) -> PaymentCheckResult:
        return await self._with_retry(self._poll, code, amount)

    async def _poll(self, code: str, amount: Decimal) -> PaymentCheckResult:
        self.attempts += 1
        await asyncio.sleep(self.latency_seconds)

        if self.attempts <= self.transient_failures:
            raise ConnectionError("simulated processor unreachable")

        logger.debug("simulated_payment_polled", amount=amount, paid=self.approve)
        return PaymentCheckResult(
            paid=self.approve,
            reference=f"SIM-{code[-8:]}" if self.approve else None,
        )
