"""
Snapshots of provider billing objects.

Only the fields accounts read are declared; everything else the provider
returns is kept as extra data so a stored snapshot round-trips unchanged.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

ACTIVE_STATUS = "active"


class SubscriptionSnapshot(BaseModel):
    """A subscription as last reported by the provider."""

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    status: str | None = None
    trial_end: int | None = Field(None, description="Trial end, epoch seconds")
    plan: str | None = None

    @field_validator("plan", mode="before")
    @classmethod
    def flatten_plan(cls, v: Any) -> Any:
        # Stripe returns the plan as a nested object
        if isinstance(v, Mapping):
            return v.get("id")
        return v

    @property
    def is_active(self) -> bool:
        return self.status == ACTIVE_STATUS


class CustomerSnapshot(BaseModel):
    """A billing customer as last reported by the provider."""

    model_config = ConfigDict(extra="allow")

    id: str
    email: str | None = None
    created: int | None = Field(None, description="Creation time, epoch seconds")
    subscriptions: list[SubscriptionSnapshot] = Field(default_factory=list)

    @field_validator("subscriptions", mode="before")
    @classmethod
    def unwrap_list_object(cls, v: Any) -> Any:
        # {"object": "list", "data": [...]} -> [...]
        if v is None:
            return []
        if isinstance(v, Mapping):
            return v.get("data") or []
        return v

    @classmethod
    def from_provider(cls, obj: Any) -> "CustomerSnapshot":
        """Build a snapshot from a provider response object or plain mapping."""
        if hasattr(obj, "to_dict"):
            obj = obj.to_dict()
        return cls.model_validate(obj)
