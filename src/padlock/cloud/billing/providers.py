"""
Billing provider implementations.

A provider creates, fetches and updates remote customers and hands back
``CustomerSnapshot`` objects. Requests are made once; retries and timeouts
belong to the provider SDK configuration.
"""

from abc import ABC, abstractmethod
from typing import Any

import stripe

from padlock.cloud.billing.config import BillingConfig, get_billing_config
from padlock.cloud.billing.exceptions import ProviderError
from padlock.cloud.billing.models import CustomerSnapshot


class BillingProvider(ABC):
    """Abstract base class for billing providers"""

    @abstractmethod
    def create_customer(self, email: str, plan: str) -> CustomerSnapshot:
        """Create a remote customer subscribed to ``plan``"""
        pass

    @abstractmethod
    def get_customer(self, customer_id: str) -> CustomerSnapshot:
        """Fetch the latest snapshot of a remote customer"""
        pass

    @abstractmethod
    def update_customer_source(self, customer_id: str, token: str) -> CustomerSnapshot:
        """Attach a payment source token to a remote customer"""
        pass


class StripeBillingProvider(BillingProvider):
    """Stripe billing provider implementation"""

    def __init__(
        self,
        api_key: str,
        api_version: str | None = None,
        expand_subscriptions: bool = True,
    ) -> None:
        self.api_key = api_key
        self.api_version = api_version
        self.expand_subscriptions = expand_subscriptions

        stripe.api_key = api_key
        if api_version:
            stripe.api_version = api_version

    def _expand(self) -> dict[str, Any]:
        return {"expand": ["subscriptions"]} if self.expand_subscriptions else {}

    def _wrap(
        self, error: stripe.StripeError, operation: str, customer_id: str | None = None
    ) -> ProviderError:
        return ProviderError(
            f"Stripe {operation} failed: {getattr(error, 'user_message', None) or error}",
            operation=operation,
            provider_code=getattr(error, "code", None),
            http_status=getattr(error, "http_status", None),
            customer_id=customer_id,
        )

    def create_customer(self, email: str, plan: str) -> CustomerSnapshot:
        try:
            customer = stripe.Customer.create(email=email, plan=plan, **self._expand())
        except stripe.StripeError as e:
            raise self._wrap(e, "create_customer") from e

        return CustomerSnapshot.from_provider(customer)

    def get_customer(self, customer_id: str) -> CustomerSnapshot:
        try:
            customer = stripe.Customer.retrieve(customer_id, **self._expand())
        except stripe.StripeError as e:
            raise self._wrap(e, "get_customer", customer_id) from e

        return CustomerSnapshot.from_provider(customer)

    def update_customer_source(self, customer_id: str, token: str) -> CustomerSnapshot:
        try:
            customer = stripe.Customer.modify(customer_id, source=token, **self._expand())
        except stripe.StripeError as e:
            raise self._wrap(e, "update_customer_source", customer_id) from e

        return CustomerSnapshot.from_provider(customer)


def get_billing_provider(config: BillingConfig | None = None) -> BillingProvider:
    """Build the configured billing provider.

    Raises:
        BillingConfigurationError: no Stripe API key is configured
    """
    config = config or get_billing_config()
    stripe_config = config.require_stripe()
    return StripeBillingProvider(
        api_key=stripe_config.api_key,
        api_version=stripe_config.api_version,
        expand_subscriptions=config.expand_subscriptions,
    )
