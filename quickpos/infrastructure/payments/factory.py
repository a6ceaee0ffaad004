"""
Payment processor factory.

Creates the processor adapter named in configuration.
"""

from quickpos.config import get_logger, get_settings
from quickpos.core.exceptions import ConfigurationError
from quickpos.core.interfaces import IPaymentProcessor

logger = get_logger(__name__)


def create_payment_processor(processor_type: str | None = None) -> IPaymentProcessor:
    """
    Build a payment processor.

    Args:
        processor_type: "simulated" or "http" (default from settings)

    Raises:
        ConfigurationError: If the processor type is unknown
    """
    settings = get_settings().payment
    processor_type = processor_type or settings.processor

    if processor_type == "simulated":
        from quickpos.infrastructure.payments.simulated import SimulatedPaymentProcessor

        processor: IPaymentProcessor = SimulatedPaymentProcessor(
            latency_seconds=settings.check_latency
        )

    elif processor_type == "http":
        from quickpos.infrastructure.payments.acquirer import AcquirerPaymentProcessor

        processor = AcquirerPaymentProcessor()

    else:
        raise ConfigurationError(
            f"Unknown payment processor: {processor_type}",
            code="UNKNOWN_PROCESSOR",
        )

    logger.info("payment_processor_created", processor=processor.name)
    return processor
