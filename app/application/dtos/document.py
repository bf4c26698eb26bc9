"""DTOs for document use cases (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Final

from app.domain.entities.document import DocumentEntity
from app.domain.enums import DocumentStatus


class _Unset(Enum):
    """Marker type for "field not provided" where None is a meaningful value."""

    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Final = _Unset.UNSET


@dataclass(frozen=True)
class CreateDocumentInput:
    """Input for CreateDocumentUseCase. expires_in is in seconds."""

    title: str
    content: str
    expires_in: int | None = None


@dataclass(frozen=True)
class CreateDocumentOutput:
    id: str


@dataclass(frozen=True)
class GetDocumentInput:
    id: str


@dataclass(frozen=True)
class UpdateDocumentInput:
    """Input for UpdateDocumentUseCase (full replace computed from partial input).

    title, content and status are None when omitted. access_code distinguishes
    "omitted" (UNSET, keeps the current code) from an explicit None (clears it).
    """

    id: str
    title: str | None = None
    content: str | None = None
    status: DocumentStatus | None = None
    access_code: str | None | _Unset = UNSET


@dataclass(frozen=True)
class ListDocumentsInput:
    cursor: str | None = None
    limit: float | None = None


@dataclass(frozen=True)
class SendDocumentInput:
    document_id: str


@dataclass(frozen=True)
class SendDocumentOutput:
    access_code: str


@dataclass(frozen=True)
class DocumentOutput:
    """Document read-model returned by get, update and list."""

    id: str
    title: str
    content: str
    status: DocumentStatus
    access_code: str | None
    created_at: datetime


@dataclass(frozen=True)
class ListDocumentsOutput:
    items: list[DocumentOutput] = field(default_factory=list)
    next_cursor: str | None = None


@dataclass(frozen=True)
class DocumentPage:
    """One page of documents from IDocumentRepository.get_paginated."""

    items: list[DocumentEntity] = field(default_factory=list)
    next_cursor: str | None = None


@dataclass(frozen=True)
class ClientDocumentPayload:
    """Body sent to the client backend when a finalized document is transferred."""

    id: str
    title: str
    content: str


@dataclass(frozen=True)
class ClientDocumentResponse:
    access_code: str


def map_document_to_output(document: DocumentEntity) -> DocumentOutput:
    """Map a DocumentEntity to the DocumentOutput read-model."""
    return DocumentOutput(
        id=document.id,
        title=document.title,
        content=document.content,
        status=document.status,
        access_code=document.access_code,
        created_at=document.created_at,
    )
