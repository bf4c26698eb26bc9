"""Create a draft document from validated, trimmed title and content."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.application.dtos.document import CreateDocumentInput, CreateDocumentOutput
from app.domain.entities.document import DocumentEntity
from app.domain.exceptions import InvalidDocumentStateException

if TYPE_CHECKING:
    from app.application.interfaces.repositories import IDocumentRepository
    from app.application.interfaces.services import IClock, IIdGenerator

logger = logging.getLogger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or value.strip() == ""


class CreateDocumentUseCase:
    """Validates input, builds a draft DocumentEntity and persists it.

    Id and creation time come from the injected id generator and clock so
    tests can make them deterministic.
    """

    def __init__(
        self,
        document_repo: "IDocumentRepository",
        clock: "IClock",
        id_generator: "IIdGenerator",
    ) -> None:
        self._document_repo = document_repo
        self._clock = clock
        self._id_generator = id_generator

    async def execute(self, data: CreateDocumentInput) -> CreateDocumentOutput:
        """Create the document and return its id.

        Raises:
            InvalidDocumentStateException: Blank title/content or non-positive expires_in.
        """
        self._validate(data)

        document = DocumentEntity(
            id=self._id_generator.generate(),
            title=data.title.strip(),
            content=data.content.strip(),
            created_at=self._clock.now(),
        )
        await self._document_repo.save(document)
        logger.info("Document created: id=%s", document.id)
        return CreateDocumentOutput(id=document.id)

    @staticmethod
    def _validate(data: CreateDocumentInput) -> None:
        if _is_blank(data.title):
            raise InvalidDocumentStateException("Title cannot be empty", field="title")
        if _is_blank(data.content):
            raise InvalidDocumentStateException(
                "Content cannot be empty", field="content"
            )
        if data.expires_in is not None and data.expires_in <= 0:
            raise InvalidDocumentStateException(
                "Expiration time must be positive", field="expires_in"
            )
