"""Application use cases: one entry point per workflow."""

from app.application.use_cases.documents import (
    CreateDocumentUseCase,
    GetDocumentUseCase,
    ListDocumentsUseCase,
    SendDocumentUseCase,
    UpdateDocumentUseCase,
)

__all__ = [
    "CreateDocumentUseCase",
    "GetDocumentUseCase",
    "ListDocumentsUseCase",
    "SendDocumentUseCase",
    "UpdateDocumentUseCase",
]
