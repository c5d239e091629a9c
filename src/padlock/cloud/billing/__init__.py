"""
Billing module.

Mirrors customer and subscription state held by the payment provider:
- Provider configuration
- Customer and subscription snapshots
- Stripe-backed provider
"""

from padlock.cloud.billing.config import (
    PLAN_MONTHLY,
    BillingConfig,
    StripeConfig,
    get_billing_config,
    set_billing_config,
)
from padlock.cloud.billing.exceptions import (
    BillingConfigurationError,
    BillingError,
    InvalidStateError,
    ProviderError,
)
from padlock.cloud.billing.models import ACTIVE_STATUS, CustomerSnapshot, SubscriptionSnapshot
from padlock.cloud.billing.providers import (
    BillingProvider,
    StripeBillingProvider,
    get_billing_provider,
)

__all__ = [
    # Config
    "PLAN_MONTHLY",
    "BillingConfig",
    "StripeConfig",
    "get_billing_config",
    "set_billing_config",
    # Exceptions
    "BillingError",
    "BillingConfigurationError",
    "InvalidStateError",
    "ProviderError",
    # Models
    "ACTIVE_STATUS",
    "CustomerSnapshot",
    "SubscriptionSnapshot",
    # Providers
    "BillingProvider",
    "StripeBillingProvider",
    "get_billing_provider",
]
