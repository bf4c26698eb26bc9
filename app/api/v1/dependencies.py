"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the document store and application use cases.
All use cases are built from infrastructure implementations here;
routes depend only on these dependencies, not on infra directly.

When database_backend is 'memory', the process-wide InMemoryDocumentRepository
created in the lifespan is used. When it is 'postgres', each request gets a
SQLAlchemy DocumentRepository bound to a transactional session.
Switch backends via DATABASE_BACKEND in config.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends, Request

from app.application.interfaces.repositories import IDocumentRepository
from app.application.interfaces.services import IClientGateway, IClock, IIdGenerator
from app.application.use_cases.documents import (
    CreateDocumentUseCase,
    GetDocumentUseCase,
    ListDocumentsUseCase,
    SendDocumentUseCase,
    UpdateDocumentUseCase,
)
from app.core.config import get_settings
from app.infrastructure.external.client_backend import HttpClientGateway
from app.infrastructure.persistence.database import transactional_session
from app.infrastructure.persistence.repositories import DocumentRepository
from app.infrastructure.services import CuidIdGenerator, SystemClock


async def get_document_repo(request: Request) -> AsyncIterator[IDocumentRepository]:
    """Document store for the configured backend (memory singleton or SQL per request)."""
    memory_repo = getattr(request.app.state, "memory_document_repo", None)
    if memory_repo is not None:
        yield memory_repo
        return
    async with transactional_session() as session:
        yield DocumentRepository(session)


def get_clock() -> IClock:
    return SystemClock()


def get_id_generator() -> IIdGenerator:
    return CuidIdGenerator()


def get_client_gateway(request: Request) -> IClientGateway:
    """Client backend gateway using the shared HTTP client from the lifespan."""
    settings = get_settings()
    return HttpClientGateway(
        settings.client_backend_url,
        http_client=getattr(request.app.state, "client_http_client", None),
        timeout_seconds=settings.client_backend_timeout_seconds,
    )


DocumentRepoDep = Annotated[IDocumentRepository, Depends(get_document_repo)]


def get_create_document_use_case(
    document_repo: DocumentRepoDep,
    clock: Annotated[IClock, Depends(get_clock)],
    id_generator: Annotated[IIdGenerator, Depends(get_id_generator)],
) -> CreateDocumentUseCase:
    return CreateDocumentUseCase(
        document_repo=document_repo, clock=clock, id_generator=id_generator
    )


def get_get_document_use_case(document_repo: DocumentRepoDep) -> GetDocumentUseCase:
    return GetDocumentUseCase(document_repo=document_repo)


def get_update_document_use_case(
    document_repo: DocumentRepoDep,
) -> UpdateDocumentUseCase:
    return UpdateDocumentUseCase(document_repo=document_repo)


def get_list_documents_use_case(
    document_repo: DocumentRepoDep,
) -> ListDocumentsUseCase:
    return ListDocumentsUseCase(document_repo=document_repo)


def get_send_document_use_case(
    document_repo: DocumentRepoDep,
    client_gateway: Annotated[IClientGateway, Depends(get_client_gateway)],
) -> SendDocumentUseCase:
    """Send use case: document store plus client backend gateway (composition root)."""
    return SendDocumentUseCase(
        document_repo=document_repo, client_gateway=client_gateway
    )
