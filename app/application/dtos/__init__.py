"""Application DTOs (no ORM dependency)."""

from app.application.dtos.document import (
    UNSET,
    ClientDocumentPayload,
    ClientDocumentResponse,
    CreateDocumentInput,
    CreateDocumentOutput,
    DocumentOutput,
    DocumentPage,
    GetDocumentInput,
    ListDocumentsInput,
    ListDocumentsOutput,
    SendDocumentInput,
    SendDocumentOutput,
    UpdateDocumentInput,
    map_document_to_output,
)

__all__ = [
    "UNSET",
    "ClientDocumentPayload",
    "ClientDocumentResponse",
    "CreateDocumentInput",
    "CreateDocumentOutput",
    "DocumentOutput",
    "DocumentPage",
    "GetDocumentInput",
    "ListDocumentsInput",
    "ListDocumentsOutput",
    "SendDocumentInput",
    "SendDocumentOutput",
    "UpdateDocumentInput",
    "map_document_to_output",
]
