"""Pytest configuration and fixtures for the document service.

Uses app.main:app for HTTP tests with the in-memory document store. The
lifespan is entered explicitly because ASGITransport does not run it.
All imports use app.*.
"""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_BACKEND", "memory")
os.environ.setdefault("CLIENT_BACKEND_URL", "http://client-backend.test")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from app.infrastructure.persistence import database  # noqa: E402

from app.infrastructure.persistence.repositories import (  # noqa: E402
    InMemoryDocumentRepository,
)
from app.main import app  # noqa: E402

from tests.fakes import FakeClock, FakeIdGenerator  # noqa: E402


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI), lifespan included."""
    async with app.router.lifespan_context(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def memory_repo() -> InMemoryDocumentRepository:
    """Fresh in-memory document repository."""
    return InMemoryDocumentRepository()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def id_generator() -> FakeIdGenerator:
    return FakeIdGenerator()



@pytest.fixture
async def pg_session() -> AsyncSession:
    """PostgreSQL session for repository tests. Rolls back after test.

    Requires DATABASE_BACKEND=postgres, DATABASE_URL and a migrated schema
    (alembic upgrade head). Skips when Postgres is not configured. Use
    @pytest.mark.requires_db to mark tests that need this fixture; run without
    DB via: pytest -m 'not requires_db'.
    """
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip(
            "Postgres not configured: set DATABASE_BACKEND=postgres and DATABASE_URL, "
            "then run: alembic upgrade head"
        )
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
    await database.dispose_engine()
