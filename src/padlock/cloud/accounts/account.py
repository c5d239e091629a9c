"""
Account records.

An account pairs a local identity (email, creation time) with the last
snapshot of its billing customer. Snapshots are only ever replaced whole,
by ``create_customer``, ``update_customer`` or ``set_payment_source``.
"""

from datetime import UTC, datetime, timedelta
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic_core import PydanticSerializationError

from padlock.cloud.billing.config import get_billing_config
from padlock.cloud.billing.exceptions import InvalidStateError
from padlock.cloud.billing.models import CustomerSnapshot, SubscriptionSnapshot
from padlock.cloud.billing.providers import BillingProvider, get_billing_provider
from padlock.cloud.storage.exceptions import DecodingError, EncodingError
from padlock.cloud.storage.interfaces import Storable

logger = structlog.get_logger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_MAX_SECONDS = int(timedelta.max.total_seconds())


def _as_utc(value: datetime) -> datetime:
    # naive values are taken to be UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class AccountRecord(BaseModel):
    """Persisted form of an account."""

    model_config = ConfigDict(extra="ignore")

    email: str
    created: datetime
    customer: CustomerSnapshot | None = None


class Account(Storable):
    """Local account with a cached billing customer.

    Not thread safe: remote operations replace ``customer`` in place.
    """

    def __init__(
        self,
        email: str,
        provider: BillingProvider | None = None,
        created: datetime | None = None,
        customer: CustomerSnapshot | None = None,
    ) -> None:
        self._email = email
        self.created = _as_utc(created) if created else datetime.now(UTC)
        self.customer = customer
        self._provider = provider

    @property
    def email(self) -> str:
        return self._email

    @property
    def provider(self) -> BillingProvider:
        if self._provider is None:
            self._provider = get_billing_provider()
        return self._provider

    @classmethod
    def from_bytes(cls, data: bytes, provider: BillingProvider | None = None) -> "Account":
        """Decode an account produced by ``serialize``."""
        account = cls("", provider=provider)
        account.deserialize(data)
        return account

    # ------------------------------------------------------------------
    # Storable
    # ------------------------------------------------------------------

    def key(self) -> bytes:
        return self._email.encode("utf-8")

    def serialize(self) -> bytes:
        record = AccountRecord(email=self._email, created=self.created, customer=self.customer)
        try:
            return record.model_dump_json().encode("utf-8")
        except PydanticSerializationError as e:
            raise EncodingError(
                f"Failed to encode account: {e}", context={"email": self._email}
            ) from e

    def deserialize(self, data: bytes) -> None:
        try:
            record = AccountRecord.model_validate_json(data)
        except ValidationError as e:
            raise DecodingError(
                f"Failed to decode account: {e.error_count()} error(s)",
                context={"errors": [err["msg"] for err in e.errors()]},
            ) from e

        self._email = record.email
        self.created = _as_utc(record.created)
        self.customer = record.customer

    # ------------------------------------------------------------------
    # Remote synchronization
    # ------------------------------------------------------------------

    def create_customer(self, plan: str | None = None) -> None:
        """Create the billing customer for this account.

        Raises:
            ProviderError: the provider rejected the request; ``customer`` is unchanged
        """
        plan = plan or get_billing_config().plan_id
        self.customer = self.provider.create_customer(self._email, plan)
        logger.info(
            "account.customer_created",
            email=self._email,
            customer_id=self.customer.id,
            plan=plan,
        )

    def update_customer(self) -> None:
        """Refresh the customer snapshot. Does nothing without a customer."""
        if self.customer is None:
            return

        self.customer = self.provider.get_customer(self.customer.id)
        logger.debug(
            "account.customer_refreshed",
            email=self._email,
            customer_id=self.customer.id,
        )

    def set_payment_source(self, token: str) -> None:
        """Attach a payment source token to the customer.

        Raises:
            InvalidStateError: the account has no customer yet
            ProviderError: the provider rejected the token; ``customer`` is unchanged
        """
        if self.customer is None:
            raise InvalidStateError(
                "Cannot set a payment source before the customer exists", email=self._email
            )

        self.customer = self.provider.update_customer_source(self.customer.id, token)
        logger.info(
            "account.payment_source_set",
            email=self._email,
            customer_id=self.customer.id,
        )

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    def subscription(self) -> SubscriptionSnapshot | None:
        if self.customer is None or not self.customer.subscriptions:
            return None
        return self.customer.subscriptions[0]

    def has_active_subscription(self) -> bool:
        sub = self.subscription()
        return sub is not None and sub.is_active

    def remaining_trial_period(self) -> timedelta:
        sub = self.subscription()
        if sub is None or sub.trial_end is None:
            return timedelta(0)

        elapsed = datetime.now(UTC) - _EPOCH
        if sub.trial_end <= elapsed.total_seconds():
            return timedelta(0)
        if sub.trial_end >= _MAX_SECONDS:
            return timedelta.max
        return timedelta(seconds=sub.trial_end) - elapsed

    def remaining_trial_days(self) -> int:
        """Whole days left in the trial, plus one. Never less than 1."""
        return self.remaining_trial_period() // timedelta(days=1) + 1

    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "email": self._email,
            "created": self.created.isoformat(),
            "customer_id": self.customer.id if self.customer else None,
            "has_active_subscription": self.has_active_subscription(),
            "remaining_trial_days": self.remaining_trial_days(),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Account):
            return NotImplemented
        return (
            self._email == other._email
            and self.created == other.created
            and self.customer == other.customer
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        customer_id = self.customer.id if self.customer else None
        return f"Account(email={self._email!r}, customer_id={customer_id!r})"


def create_account(email: str, provider: BillingProvider | None = None) -> Account:
    """Create a new account with no billing customer."""
    return Account(email, provider=provider)
