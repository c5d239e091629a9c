"""
Billing module configuration
"""

from pydantic import BaseModel, ConfigDict, Field

from padlock.cloud.billing.exceptions import BillingConfigurationError

PLAN_MONTHLY = "padlock-cloud-monthly"


class StripeConfig(BaseModel):
    """Stripe configuration"""

    model_config = ConfigDict()

    api_key: str = Field(..., min_length=1, description="Stripe API key")
    api_version: str | None = Field(None, description="Pinned Stripe API version")


class BillingConfig(BaseModel):
    """Main billing configuration"""

    model_config = ConfigDict()

    stripe: StripeConfig | None = None
    plan_id: str = Field(PLAN_MONTHLY, description="Plan new customers are subscribed to")
    expand_subscriptions: bool = Field(True, description="Inline subscriptions on customers")

    @classmethod
    def from_env(cls) -> "BillingConfig":
        """Create configuration from settings"""
        from padlock.cloud.settings import get_settings

        billing = get_settings().billing
        stripe_config = None
        if billing.stripe_api_key:
            stripe_config = StripeConfig(
                api_key=billing.stripe_api_key,
                api_version=billing.stripe_api_version,
            )

        return cls(
            stripe=stripe_config,
            plan_id=billing.plan_id,
            expand_subscriptions=billing.expand_subscriptions,
        )

    def require_stripe(self) -> StripeConfig:
        if self.stripe is None:
            raise BillingConfigurationError(
                "Stripe API key is not configured", config_key="BILLING__STRIPE_API_KEY"
            )
        return self.stripe


# Global config instance
_billing_config: BillingConfig | None = None


def get_billing_config() -> BillingConfig:
    """Get the global billing configuration"""
    global _billing_config
    if _billing_config is None:
        _billing_config = BillingConfig.from_env()
    return _billing_config


def set_billing_config(config: BillingConfig | None) -> None:
    """Replace the global billing configuration (mainly for testing)"""
    global _billing_config
    _billing_config = config
