"""Tests for domain exceptions (error_code, message, details)."""

from app.domain.exceptions import (
    DocumentServiceException,
    ExternalServiceException,
    InvalidCursorException,
    InvalidDocumentStateException,
    ResourceNotFoundException,
)


def test_base_exception_default_error_code() -> None:
    """Base DocumentServiceException uses class name as error_code when not provided."""
    exc = DocumentServiceException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "DocumentServiceException"
    assert exc.details == {}
    assert str(exc) == "Something failed"


def test_to_dict() -> None:
    exc = DocumentServiceException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_invalid_document_state_with_field() -> None:
    exc = InvalidDocumentStateException("Title cannot be empty", field="title")
    assert exc.error_code == "INVALID_DOCUMENT_STATE"
    assert exc.details == {"field": "title"}


def test_invalid_document_state_without_field() -> None:
    exc = InvalidDocumentStateException("Bad state")
    assert exc.details == {}


def test_invalid_cursor_is_invalid_document_state() -> None:
    exc = InvalidCursorException()
    assert isinstance(exc, InvalidDocumentStateException)
    assert exc.error_code == "INVALID_CURSOR"
    assert exc.message == "Invalid pagination cursor"
    assert exc.details == {"field": "cursor"}


def test_resource_not_found() -> None:
    exc = ResourceNotFoundException("document", "doc-1")
    assert exc.message == "Document doc-1 not found"
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "document", "resource_id": "doc-1"}


def test_external_service_default_status() -> None:
    exc = ExternalServiceException("Failed")
    assert exc.status_code == 502
    assert exc.error_code == "EXTERNAL_SERVICE_ERROR"
    assert exc.details == {"status_code": 502}


def test_external_service_custom_status() -> None:
    exc = ExternalServiceException("Upstream down", status_code=500)
    assert exc.status_code == 500
