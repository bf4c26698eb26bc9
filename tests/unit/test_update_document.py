"""UpdateDocumentUseCase: partial input, access-code rules, full replace."""

from datetime import UTC, datetime

import pytest

from app.application.dtos.document import UpdateDocumentInput
from app.application.use_cases.documents import UpdateDocumentUseCase
from app.domain.entities.document import DocumentEntity
from app.domain.enums import DocumentStatus
from app.domain.exceptions import (
    InvalidDocumentStateException,
    ResourceNotFoundException,
)
from app.infrastructure.persistence.repositories import InMemoryDocumentRepository

CREATED_AT = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def use_case(memory_repo: InMemoryDocumentRepository) -> UpdateDocumentUseCase:
    return UpdateDocumentUseCase(document_repo=memory_repo)


async def _seed(
    repo: InMemoryDocumentRepository,
    status: DocumentStatus = DocumentStatus.DRAFT,
    access_code: str | None = None,
) -> DocumentEntity:
    doc = DocumentEntity(
        id="doc-1",
        title="Original title",
        content="Original content",
        created_at=CREATED_AT,
        status=status,
        access_code=access_code,
    )
    await repo.save(doc)
    return doc


class TestUpdateDocument:
    async def test_missing_document_raises_not_found(
        self, use_case: UpdateDocumentUseCase
    ) -> None:
        with pytest.raises(ResourceNotFoundException):
            await use_case.execute(UpdateDocumentInput(id="missing", title="x"))

    async def test_omitted_fields_keep_current_values(
        self, use_case: UpdateDocumentUseCase, memory_repo: InMemoryDocumentRepository
    ) -> None:
        await _seed(memory_repo)
        output = await use_case.execute(UpdateDocumentInput(id="doc-1", title="  New  "))
        assert output.title == "New"
        assert output.content == "Original content"
        assert output.status is DocumentStatus.DRAFT
        assert output.created_at == CREATED_AT

        stored = await memory_repo.get_by_id("doc-1")
        assert stored.title == "New"

    @pytest.mark.parametrize("field", ["title", "content"])
    async def test_blank_provided_field_raises(
        self,
        use_case: UpdateDocumentUseCase,
        memory_repo: InMemoryDocumentRepository,
        field: str,
    ) -> None:
        await _seed(memory_repo)
        with pytest.raises(InvalidDocumentStateException) as exc_info:
            await use_case.execute(UpdateDocumentInput(id="doc-1", **{field: "   "}))
        assert exc_info.value.message == f"{field.capitalize()} cannot be empty"
        stored = await memory_repo.get_by_id("doc-1")
        assert stored.title == "Original title"

    async def test_finalize_and_set_access_code(
        self, use_case: UpdateDocumentUseCase, memory_repo: InMemoryDocumentRepository
    ) -> None:
        await _seed(memory_repo)
        output = await use_case.execute(
            UpdateDocumentInput(
                id="doc-1", status=DocumentStatus.FINAL, access_code="  CODE1  "
            )
        )
        assert output.status is DocumentStatus.FINAL
        assert output.access_code == "CODE1"

    async def test_access_code_on_draft_raises(
        self, use_case: UpdateDocumentUseCase, memory_repo: InMemoryDocumentRepository
    ) -> None:
        await _seed(memory_repo)
        with pytest.raises(
            InvalidDocumentStateException,
            match="Access code can only be set when document is final",
        ):
            await use_case.execute(UpdateDocumentInput(id="doc-1", access_code="ABC"))

    async def test_blank_access_code_raises(
        self, use_case: UpdateDocumentUseCase, memory_repo: InMemoryDocumentRepository
    ) -> None:
        await _seed(memory_repo, status=DocumentStatus.FINAL)
        with pytest.raises(InvalidDocumentStateException, match="Access code cannot be empty"):
            await use_case.execute(UpdateDocumentInput(id="doc-1", access_code="   "))

    async def test_explicit_null_clears_access_code(
        self, use_case: UpdateDocumentUseCase, memory_repo: InMemoryDocumentRepository
    ) -> None:
        await _seed(memory_repo, status=DocumentStatus.FINAL, access_code="ABC")
        output = await use_case.execute(UpdateDocumentInput(id="doc-1", access_code=None))
        assert output.access_code is None
        assert output.status is DocumentStatus.FINAL

    async def test_omitted_access_code_is_retained(
        self, use_case: UpdateDocumentUseCase, memory_repo: InMemoryDocumentRepository
    ) -> None:
        await _seed(memory_repo, status=DocumentStatus.FINAL, access_code="ABC")
        output = await use_case.execute(UpdateDocumentInput(id="doc-1", title="Renamed"))
        assert output.access_code == "ABC"

    async def test_back_to_draft_with_retained_code_raises(
        self, use_case: UpdateDocumentUseCase, memory_repo: InMemoryDocumentRepository
    ) -> None:
        await _seed(memory_repo, status=DocumentStatus.FINAL, access_code="ABC")
        with pytest.raises(InvalidDocumentStateException):
            await use_case.execute(
                UpdateDocumentInput(id="doc-1", status=DocumentStatus.DRAFT)
            )

    async def test_back_to_draft_clearing_code_is_allowed(
        self, use_case: UpdateDocumentUseCase, memory_repo: InMemoryDocumentRepository
    ) -> None:
        await _seed(memory_repo, status=DocumentStatus.FINAL, access_code="ABC")
        output = await use_case.execute(
            UpdateDocumentInput(
                id="doc-1", status=DocumentStatus.DRAFT, access_code=None
            )
        )
        assert output.status is DocumentStatus.DRAFT
        assert output.access_code is None

    async def test_status_string_is_coerced(
        self, use_case: UpdateDocumentUseCase, memory_repo: InMemoryDocumentRepository
    ) -> None:
        await _seed(memory_repo)
        output = await use_case.execute(UpdateDocumentInput(id="doc-1", status="final"))
        assert output.status is DocumentStatus.FINAL

    async def test_unknown_status_raises(
        self, use_case: UpdateDocumentUseCase, memory_repo: InMemoryDocumentRepository
    ) -> None:
        await _seed(memory_repo)
        with pytest.raises(InvalidDocumentStateException) as exc_info:
            await use_case.execute(UpdateDocumentInput(id="doc-1", status="archived"))
        assert exc_info.value.details == {"field": "status"}

    async def test_concurrent_updates_are_last_write_wins(
        self, memory_repo: InMemoryDocumentRepository
    ) -> None:
        await _seed(memory_repo)
        first = UpdateDocumentUseCase(document_repo=memory_repo)
        second = UpdateDocumentUseCase(document_repo=memory_repo)
        await first.execute(UpdateDocumentInput(id="doc-1", title="First"))
        await second.execute(UpdateDocumentInput(id="doc-1", title="Second"))
        stored = await memory_repo.get_by_id("doc-1")
        assert stored.title == "Second"
