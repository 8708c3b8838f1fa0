"""Domain exceptions for the Pink Beam service layer.

Search and email dispatch let these propagate; the notification service
never raises them (it reports failures as results instead). The presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class PinkBeamException(Exception):
    """Base exception for all Pink Beam application errors.

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
        """Return a JSON-serialisable error body."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(PinkBeamException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(PinkBeamException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'email_template').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class SqlNotConfiguredException(PinkBeamException):
    """Raised when an operation requires Postgres but DATABASE_URL is not set."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )


class EmailDeliveryException(PinkBeamException):
    """Raised when the email provider answers with a non-2xx status."""

    def __init__(self, status_code: int, body: str) -> None:
        """Initialize with the provider's status code and response body.

        Args:
            status_code: HTTP status returned by the provider.
            body: Raw response body text.
        """
        super().__init__(
            f"Resend API error ({status_code}): {body}",
            "EMAIL_DELIVERY_ERROR",
            {"status_code": status_code, "body": body},
        )
        self.status_code = status_code
        self.body = body
