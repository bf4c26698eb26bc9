"""Domain exceptions for the document service.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class DocumentServiceException(Exception):
    """Base exception for all document service errors.

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
        """Return a JSON-serializable representation for API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class InvalidDocumentStateException(DocumentServiceException):
    """Raised when a document invariant or business rule is violated.

    Covers empty fields, bad status transitions, access-code rule violations
    and malformed pagination cursors. Always client-correctable.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        error_code: str = "INVALID_DOCUMENT_STATE",
    ) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the violated rule.
            field: Optional field or attribute that failed validation.
            error_code: Machine-readable code; subclasses narrow it.
        """
        details = {"field": field} if field else {}
        super().__init__(message, error_code, details)


class InvalidCursorException(InvalidDocumentStateException):
    """Raised when a pagination cursor cannot be decoded."""

    def __init__(self, message: str = "Invalid pagination cursor") -> None:
        super().__init__(message, field="cursor", error_code="INVALID_CURSOR")


class ResourceNotFoundException(DocumentServiceException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'document').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type.capitalize()} {resource_id} not found",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ExternalServiceException(DocumentServiceException):
    """Raised when the client backend call fails or returns a malformed response.

    status_code carries the upstream classification the presentation layer
    responds with (500 for upstream server errors or missing configuration,
    502 for everything else).
    """

    def __init__(self, message: str, status_code: int = 502) -> None:
        self.status_code = status_code
        super().__init__(
            message,
            "EXTERNAL_SERVICE_ERROR",
            {"status_code": status_code},
        )
