"""
Billing exceptions.

Errors raised while synchronizing accounts with the payment provider.
Each carries an error code, context and a recovery hint for API responses.
"""

from typing import Any


class BillingError(Exception):
    """
    Base billing error with enhanced context.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code for API responses
        status_code: HTTP status code for this error type
        context: Additional context data about the error
        recovery_hint: Suggested action to resolve the error
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        status_code: int = 400,
        context: dict[str, Any] | None = None,
        recovery_hint: str | None = None,
    ):
        self.message = message
        self.error_code = error_code or "BILLING_ERROR"
        self.status_code = status_code
        self.context = context or {}
        self.recovery_hint = recovery_hint
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for API responses."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "status_code": self.status_code,
            "context": self.context,
            "recovery_hint": self.recovery_hint,
        }


class ProviderError(BillingError):
    """The payment provider rejected or failed a request.

    The provider's own exception is kept as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        provider_code: str | None = None,
        http_status: int | None = None,
        customer_id: str | None = None,
    ):
        context: dict[str, Any] = {}
        if operation:
            context["operation"] = operation
        if provider_code:
            context["provider_code"] = provider_code
        if http_status:
            context["http_status"] = http_status
        if customer_id:
            context["customer_id"] = customer_id

        super().__init__(
            message,
            "PROVIDER_ERROR",
            status_code=502,
            context=context,
            recovery_hint="Check the payment provider status and request parameters",
        )
        self.operation = operation
        self.provider_code = provider_code
        self.http_status = http_status


class InvalidStateError(BillingError):
    """Operation requires a remote customer the account does not have yet."""

    def __init__(self, message: str, email: str | None = None) -> None:
        super().__init__(
            message,
            "INVALID_ACCOUNT_STATE",
            status_code=409,
            context={"email": email} if email else None,
            recovery_hint="Create the billing customer before updating it",
        )


class BillingConfigurationError(BillingError):
    """Billing configuration errors."""

    def __init__(self, message: str, config_key: str | None = None) -> None:
        super().__init__(
            message,
            "BILLING_CONFIG_ERROR",
            status_code=500,
            context={"config_key": config_key} if config_key else None,
            recovery_hint="Check billing configuration settings",
        )
