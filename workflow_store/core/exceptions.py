"""
Exception hierarchy for the workflow instance store.

Provides layered exception structure for store-specific errors.
All exceptions include context for observability and debugging.

Driver failures (pymongo, botocore) are not wrapped here; they reach the
caller unmodified.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the store
"""

from typing import Any


class WorkflowStoreException(Exception):
    """Base exception for all workflow instance store errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(WorkflowStoreException):
    """Raised when a query argument (paging, ordering) is invalid."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class SerializationError(WorkflowStoreException):
    """
    Raised when a record cannot be encoded or a raw document cannot be decoded.

    Fatal and never retried: a malformed or foreign-shaped document is
    reported, not coerced.
    """

    def __init__(
        self,
        message: str,
        instance_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize serialization error.

        Args:
            message: Error message
            instance_id: ID of the workflow instance being converted
            details: Additional context
        """
        details = details or {}
        if instance_id:
            details["instance_id"] = instance_id
        super().__init__(message, details)


class ConfigurationError(WorkflowStoreException):
    """Raised when settings cannot be turned into a working store."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            setting: Name of the offending setting
            details: Additional context
        """
        details = details or {}
        if setting:
            details["setting"] = setting
        super().__init__(message, details)
