"""Domain exceptions for the rights registry.

Defines domain-level exceptions that represent business rule violations
and backend failures already translated at the infrastructure boundary.
Presentation layer maps them to HTTP responses in exception handlers;
callers never see raw transport exceptions.
"""

from typing import Any


class RegistryException(Exception):
    """Base exception for all registry application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by the API exception handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(RegistryException):
    """Raised when input validation fails (e.g. required field missing)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(RegistryException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'writer').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class DataAccessException(RegistryException):
    """Raised when the relational backend fails (transport error or non-2xx).

    The message is fixed per operation; the backend text is kept in
    ``reason`` and details for logs only.
    """

    def __init__(
        self,
        operation: str,
        reason: str,
        status_code: int | None = None,
    ) -> None:
        """Initialize with the failed operation and reason.

        Args:
            operation: Accessor operation (e.g. 'count', 'page', 'update').
            reason: Backend or transport error text.
            status_code: HTTP status from the backend, if a response was received.
        """
        self.reason = reason
        details: dict[str, Any] = {"operation": operation, "reason": reason}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(
            f"Backend {operation} failed",
            "DATA_ACCESS_ERROR",
            details,
        )


class WriteFailedException(RegistryException):
    """Raised when a create/update/delete could not be persisted.

    Carries a user-facing message; the underlying backend error is kept in
    details for logs only.
    """

    def __init__(
        self,
        message: str,
        action: str,
        resource_id: str | None = None,
        reason: str | None = None,
    ) -> None:
        details: dict[str, Any] = {"action": action}
        if resource_id:
            details["resource_id"] = resource_id
        if reason:
            details["reason"] = reason
        super().__init__(message, "WRITE_FAILED", details)


class SyncFailedException(RegistryException):
    """Raised when an awaited index sync (full reindex) fails. Backend text stays in reason."""

    def __init__(self, action: str, reason: str) -> None:
        self.reason = reason
        super().__init__(
            f"Search index sync failed ({action})",
            "SYNC_FAILED",
            {"action": action, "reason": reason},
        )
