"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.document_repo import DocumentRepository
from app.infrastructure.persistence.repositories.memory_document_repo import (
    InMemoryDocumentRepository,
)

__all__ = [
    "BaseRepository",
    "DocumentRepository",
    "InMemoryDocumentRepository",
]
