"""CreateDocumentUseCase and GetDocumentUseCase with the in-memory repository and fakes."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest

from app.application.dtos.document import CreateDocumentInput, GetDocumentInput
from app.application.use_cases.documents import (
    CreateDocumentUseCase,
    GetDocumentUseCase,
)
from app.domain.enums import DocumentStatus
from app.domain.exceptions import (
    InvalidDocumentStateException,
    ResourceNotFoundException,
)
from app.infrastructure.persistence.repositories import InMemoryDocumentRepository
from tests.fakes import FakeClock, FakeIdGenerator


@pytest.fixture
def create_use_case(
    memory_repo: InMemoryDocumentRepository,
    clock: FakeClock,
    id_generator: FakeIdGenerator,
) -> CreateDocumentUseCase:
    return CreateDocumentUseCase(
        document_repo=memory_repo, clock=clock, id_generator=id_generator
    )


class TestCreateDocument:
    async def test_creates_draft_with_generated_id_and_clock_time(
        self,
        create_use_case: CreateDocumentUseCase,
        memory_repo: InMemoryDocumentRepository,
        clock: FakeClock,
    ) -> None:
        result = await create_use_case.execute(
            CreateDocumentInput(title="  Contract  ", content="  Terms  ")
        )
        assert result.id == "test-id-001"

        stored = await memory_repo.get_by_id("test-id-001")
        assert stored.title == "Contract"
        assert stored.content == "Terms"
        assert stored.status is DocumentStatus.DRAFT
        assert stored.access_code is None
        assert stored.created_at == clock.now()

    async def test_sequential_ids(self, create_use_case: CreateDocumentUseCase) -> None:
        first = await create_use_case.execute(CreateDocumentInput(title="A", content="a"))
        second = await create_use_case.execute(CreateDocumentInput(title="B", content="b"))
        assert (first.id, second.id) == ("test-id-001", "test-id-002")

    @pytest.mark.parametrize(
        ("title", "content", "message"),
        [
            ("", "body", "Title cannot be empty"),
            ("   ", "body", "Title cannot be empty"),
            ("Title", "", "Content cannot be empty"),
            ("Title", " \n\t ", "Content cannot be empty"),
        ],
    )
    async def test_blank_fields_raise_and_nothing_is_saved(
        self, title: str, content: str, message: str
    ) -> None:
        repo = AsyncMock()
        use_case = CreateDocumentUseCase(
            document_repo=repo, clock=FakeClock(), id_generator=FakeIdGenerator()
        )
        with pytest.raises(InvalidDocumentStateException, match=message):
            await use_case.execute(CreateDocumentInput(title=title, content=content))
        repo.save.assert_not_called()

    @pytest.mark.parametrize("expires_in", [0, -5])
    async def test_non_positive_expiration_raises(
        self, create_use_case: CreateDocumentUseCase, expires_in: int
    ) -> None:
        with pytest.raises(InvalidDocumentStateException) as exc_info:
            await create_use_case.execute(
                CreateDocumentInput(title="T", content="C", expires_in=expires_in)
            )
        assert exc_info.value.message == "Expiration time must be positive"

    async def test_positive_expiration_is_accepted(
        self, create_use_case: CreateDocumentUseCase
    ) -> None:
        result = await create_use_case.execute(
            CreateDocumentInput(title="T", content="C", expires_in=3600)
        )
        assert result.id == "test-id-001"


class TestGetDocument:
    async def test_returns_output(
        self,
        create_use_case: CreateDocumentUseCase,
        memory_repo: InMemoryDocumentRepository,
    ) -> None:
        created = await create_use_case.execute(
            CreateDocumentInput(title="Title", content="Body")
        )
        output = await GetDocumentUseCase(document_repo=memory_repo).execute(
            GetDocumentInput(id=created.id)
        )
        assert output.id == created.id
        assert output.title == "Title"
        assert output.status is DocumentStatus.DRAFT
        assert output.access_code is None
        assert output.created_at == datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)

    async def test_missing_raises_not_found(
        self, memory_repo: InMemoryDocumentRepository
    ) -> None:
        with pytest.raises(ResourceNotFoundException) as exc_info:
            await GetDocumentUseCase(document_repo=memory_repo).execute(
                GetDocumentInput(id="nope")
            )
        assert exc_info.value.details["resource_id"] == "nope"
