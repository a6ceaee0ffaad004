"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables with sensible defaults.
"""

from decimal import Decimal
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CheckoutSettings(BaseSettings):
    """Checkout gating configuration."""

    model_config = SettingsConfigDict(env_prefix="CHECKOUT_")

    # When False, commits are recorded in history without a shift
    require_open_shift: bool = True


class PricingSettings(BaseSettings):
    """Discount and tax rules applied at commit time."""

    model_config = SettingsConfigDict(env_prefix="PRICING_")

    discount_rate: Decimal = Decimal("0.10")
    tax_rate: Decimal = Decimal("0")

    @field_validator("discount_rate", "tax_rate")
    @classmethod
    def check_rate(cls, v: Decimal) -> Decimal:
        if v < 0 or v > 1:
            raise ValueError("rate must be between 0 and 1")
        return v


class SubscriptionSettings(BaseSettings):
    """Subscription plan defaults."""

    model_config = SettingsConfigDict(env_prefix="SUBSCRIPTION_")

    default_plan: Literal["free", "basic", "pro", "advance"] = "free"


class PaymentSettings(BaseSettings):
    """QR payment session and processor configuration."""

    model_config = SettingsConfigDict(env_prefix="PAYMENT_")

    # "simulated" answers locally; "http" polls the acquirer at api_url
    processor: Literal["simulated", "http"] = "simulated"
    api_url: str = "http://localhost:9000"
    api_key: str | None = None
    timeout: float = 10.0

    session_ttl_seconds: int = 300
    tick_interval: float = 1.0  # 0 disables the background countdown
    check_latency: float = 2.0  # simulated processor round trip

    # Retry settings
    max_retries: int = 3
    retry_delay: float = 0.5
    retry_multiplier: float = 2.0

    # QRIS merchant data
    merchant_id: str = "ID2020123456789"
    merchant_name: str = "QuickPOS Store"
    merchant_city: str = "Jakarta Selatan"
    postal_code: str = "12340"


class ReportSettings(BaseSettings):
    """Reporting configuration."""

    model_config = SettingsConfigDict(env_prefix="REPORT_")

    best_seller_limit: int = 5


class APISettings(BaseSettings):
    """API server configuration."""

    model_config = SettingsConfigDict(env_prefix="API_")

    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    cors_origins: list[str] = ["*"]


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "QuickPOS"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Sub-settings
    checkout: CheckoutSettings = Field(default_factory=CheckoutSettings)
    pricing: PricingSettings = Field(default_factory=PricingSettings)
    subscription: SubscriptionSettings = Field(default_factory=SubscriptionSettings)
    payment: PaymentSettings = Field(default_factory=PaymentSettings)
    report: ReportSettings = Field(default_factory=ReportSettings)
    api: APISettings = Field(default_factory=APISettings)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
