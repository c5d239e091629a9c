"""
Global pytest configuration and fixtures for Padlock Cloud tests.
"""

import os
import sys
from unittest.mock import Mock

import pytest

# Environment variables take precedence over a developer .env
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("BILLING__STRIPE_API_KEY", "sk_test_padlock")

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from padlock.cloud.billing.config import set_billing_config  # noqa: E402
from padlock.cloud.billing.models import CustomerSnapshot  # noqa: E402
from padlock.cloud.billing.providers import BillingProvider  # noqa: E402
from padlock.cloud.settings import reset_settings  # noqa: E402


@pytest.fixture(autouse=True)
def reset_global_config():
    """Drop cached settings and billing config between tests."""
    reset_settings()
    set_billing_config(None)
    yield
    reset_settings()
    set_billing_config(None)


@pytest.fixture
def make_customer():
    """Factory for customer snapshots shaped like Stripe responses."""

    def _make(
        customer_id: str = "cus_test_123",
        email: str = "user@example.com",
        status: str | None = "trialing",
        trial_end: int | None = None,
        with_subscription: bool = True,
    ) -> CustomerSnapshot:
        subscriptions = []
        if with_subscription:
            subscriptions.append(
                {
                    "id": "sub_test_123",
                    "object": "subscription",
                    "status": status,
                    "trial_end": trial_end,
                    "plan": {"id": "padlock-cloud-monthly", "object": "plan"},
                }
            )
        return CustomerSnapshot.model_validate(
            {
                "id": customer_id,
                "object": "customer",
                "email": email,
                "created": 1700000000,
                "subscriptions": {"object": "list", "data": subscriptions},
            }
        )

    return _make


@pytest.fixture
def mock_provider():
    """Billing provider test double."""
    return Mock(spec=BillingProvider)


# Pytest configuration
def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line("markers", "unit: Unit test")
    config.addinivalue_line("markers", "integration: Integration test")
