"""Update a document: full replace computed from a partial input."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.application.dtos.document import (
    UNSET,
    DocumentOutput,
    UpdateDocumentInput,
    map_document_to_output,
)
from app.domain.entities.document import DocumentEntity
from app.domain.enums import DocumentStatus
from app.domain.exceptions import (
    InvalidDocumentStateException,
    ResourceNotFoundException,
)

if TYPE_CHECKING:
    from app.application.interfaces.repositories import IDocumentRepository

logger = logging.getLogger(__name__)


def _validate_field(name: str, value: str | None) -> None:
    """Omitted fields pass; provided fields must be non-blank."""
    if value is None:
        return
    if value.strip() == "":
        raise InvalidDocumentStateException(
            f"{name} cannot be empty", field=name.lower()
        )


def _coerce_status(value: DocumentStatus | str) -> DocumentStatus:
    try:
        return DocumentStatus(value)
    except ValueError:
        raise InvalidDocumentStateException(
            f"Invalid document status: {value!r}", field="status"
        ) from None


class UpdateDocumentUseCase:
    """Applies title/content/status/access-code changes to an existing document.

    Omitted fields keep their current value. The access code may only be
    non-empty when the resulting status is final; when the resulting status
    is not final the access code is cleared. id and created_at are preserved.
    No version check is made: concurrent updates are last-write-wins.
    """

    def __init__(self, document_repo: "IDocumentRepository") -> None:
        self._document_repo = document_repo

    async def execute(self, data: UpdateDocumentInput) -> DocumentOutput:
        """Update and persist the document; return the updated read-model.

        Raises:
            ResourceNotFoundException: Document does not exist.
            InvalidDocumentStateException: Blank title/content or access-code rule violated.
        """
        document = await self._document_repo.get_by_id(data.id)
        if not document:
            raise ResourceNotFoundException("document", data.id)

        _validate_field("Title", data.title)
        _validate_field("Content", data.content)

        next_title = data.title.strip() if data.title is not None else document.title
        next_content = (
            data.content.strip() if data.content is not None else document.content
        )
        next_status = (
            _coerce_status(data.status) if data.status is not None else document.status
        )

        next_access_code = (
            document.access_code if data.access_code is UNSET else data.access_code
        )
        if isinstance(next_access_code, str):
            next_access_code = next_access_code.strip()

        if next_access_code and next_status is not DocumentStatus.FINAL:
            raise InvalidDocumentStateException(
                "Access code can only be set when document is final",
                field="access_code",
            )
        if next_access_code == "":
            raise InvalidDocumentStateException(
                "Access code cannot be empty", field="access_code"
            )
        if next_status is not DocumentStatus.FINAL:
            next_access_code = None

        updated = DocumentEntity(
            id=document.id,
            title=next_title,
            content=next_content,
            created_at=document.created_at,
            status=next_status,
            access_code=next_access_code,
        )
        await self._document_repo.save(updated)
        logger.info(
            "Document updated: id=%s status=%s", updated.id, updated.status.value
        )
        return map_document_to_output(updated)
