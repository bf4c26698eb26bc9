"""Get a single document by id."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.application.dtos.document import (
    DocumentOutput,
    GetDocumentInput,
    map_document_to_output,
)
from app.domain.exceptions import ResourceNotFoundException

if TYPE_CHECKING:
    from app.application.interfaces.repositories import IDocumentRepository


class GetDocumentUseCase:
    def __init__(self, document_repo: "IDocumentRepository") -> None:
        self._document_repo = document_repo

    async def execute(self, data: GetDocumentInput) -> DocumentOutput:
        """Return the document; raise ResourceNotFoundException if it does not exist."""
        document = await self._document_repo.get_by_id(data.id)
        if not document:
            raise ResourceNotFoundException("document", data.id)
        return map_document_to_output(document)
