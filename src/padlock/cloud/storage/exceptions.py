"""Storage-related exceptions."""

from typing import Any


class StorageError(Exception):
    """Base exception for storage operations."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code or "STORAGE_ERROR"
        self.context = context or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for API responses."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context,
        }


class EncodingError(StorageError):
    """Raised when a record cannot be serialized."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message, "ENCODING_ERROR", context=context)


class DecodingError(StorageError):
    """Raised when stored bytes cannot be decoded into a record.

    The target record is left in an undefined state and must be discarded.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message, "DECODING_ERROR", context=context)


class NotFoundError(StorageError):
    """Raised when no value is stored under a key."""

    def __init__(self, message: str, key: bytes | None = None) -> None:
        context: dict[str, Any] = {}
        if key is not None:
            context["key"] = key.decode("utf-8", errors="replace")
        super().__init__(message, "NOT_FOUND", context=context)
