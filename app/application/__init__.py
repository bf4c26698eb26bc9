"""Application layer: interfaces, DTOs, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repository, clock, id generator, client gateway).
"""

from app.application.interfaces import (
    IClientGateway,
    IClock,
    IDocumentRepository,
    IIdGenerator,
)
from app.application.use_cases import (
    CreateDocumentUseCase,
    GetDocumentUseCase,
    ListDocumentsUseCase,
    SendDocumentUseCase,
    UpdateDocumentUseCase,
)

__all__ = [
    "CreateDocumentUseCase",
    "GetDocumentUseCase",
    "IClientGateway",
    "IClock",
    "IDocumentRepository",
    "IIdGenerator",
    "ListDocumentsUseCase",
    "SendDocumentUseCase",
    "UpdateDocumentUseCase",
]
