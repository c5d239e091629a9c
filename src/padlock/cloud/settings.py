from __future__ import annotations

"""Centralized configuration using pydantic-settings.

All configuration is loaded from environment variables and .env files.
Nested settings use a double underscore: BILLING__STRIPE_API_KEY=sk_live_...
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from padlock.cloud.billing.config import PLAN_MONTHLY


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TEST = "test"


class LogLevel(str, Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Main application settings.

    All settings can be overridden via environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )

    app_name: str = Field("padlock-cloud", description="Application name")
    environment: Environment = Field(Environment.DEVELOPMENT, description="Deployment environment")
    debug: bool = Field(False, description="Debug mode")
    testing: bool = Field(False, description="Testing mode")

    # ============================================================
    # Billing Configuration
    # ============================================================

    class BillingSettings(BaseModel):
        """Stripe billing configuration."""

        stripe_api_key: str = Field("", description="Stripe secret API key")
        stripe_api_version: str | None = Field(
            None, description="Pinned Stripe API version (account default when unset)"
        )
        plan_id: str = Field(PLAN_MONTHLY, description="Plan new customers are subscribed to")
        expand_subscriptions: bool = Field(
            True, description="Ask Stripe to inline the customer's subscriptions"
        )

        @field_validator("plan_id")
        @classmethod
        def validate_plan_id(cls, v: str) -> str:
            if not v.strip():
                raise ValueError("plan_id must not be empty")
            return v.strip()

    billing: BillingSettings = BillingSettings()  # type: ignore[call-arg]

    # ============================================================
    # Observability
    # ============================================================

    class ObservabilitySettings(BaseModel):
        """Logging configuration."""

        log_level: LogLevel = Field(LogLevel.INFO, description="Log level")
        log_format: str = Field("json", description="Log format (json or text)")

        @field_validator("log_format")
        @classmethod
        def validate_log_format(cls, v: str) -> str:
            v = v.lower()
            if v not in ("json", "text"):
                raise ValueError("log_format must be 'json' or 'text'")
            return v

    observability: ObservabilitySettings = ObservabilitySettings()  # type: ignore[call-arg]

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        """Check if running in test mode."""
        return self.testing or self.environment == Environment.TEST


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get global settings instance (singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings()  # type: ignore
    return _settings


def reset_settings() -> None:
    """Reset settings (mainly for testing)."""
    global _settings
    _settings = None
