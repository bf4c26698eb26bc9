"""Pydantic request/response schemas for the API."""

from app.schemas.document import (
    CreateDocumentRequest,
    CreateDocumentResponse,
    DocumentResponse,
    ListDocumentsResponse,
    SendDocumentRequest,
    SendDocumentResponse,
    UpdateDocumentRequest,
)
from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

__all__ = [
    "CreateDocumentRequest",
    "CreateDocumentResponse",
    "DocumentResponse",
    "HealthResponse",
    "ListDocumentsResponse",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "SendDocumentRequest",
    "SendDocumentResponse",
    "UpdateDocumentRequest",
]
