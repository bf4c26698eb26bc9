"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (logging, shared
HTTP client for the client backend, document store, DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from app.core.config import get_settings
from app.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, shared HTTP client, document store (in-memory
    repository, or none for postgres). Shutdown order: HTTP client close, SQL engine
    dispose.
    """
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    # Shared HTTP client for the client backend (connection reuse).
    app.state.client_http_client = httpx.AsyncClient(
        timeout=settings.client_backend_timeout_seconds
    )

    if settings.database_backend == "memory":
        from app.infrastructure.persistence.repositories import (
            InMemoryDocumentRepository,
        )

        app.state.memory_document_repo = InMemoryDocumentRepository()
        logger.info("Using in-memory document store (data is lost on restart)")
    else:
        # Schema is owned by Alembic (alembic upgrade head), not created here.
        app.state.memory_document_repo = None
        logger.info("Using PostgreSQL document store")

    if not settings.client_backend_url:
        logger.warning("CLIENT_BACKEND_URL is not set; sending documents will fail")

    yield

    # ---- Shutdown ----
    if getattr(app.state, "client_http_client", None) is not None:
        await app.state.client_http_client.aclose()
        app.state.client_http_client = None
        logger.info("Client backend HTTP client closed")

    from app.infrastructure.persistence import database

    await database.dispose_engine()
