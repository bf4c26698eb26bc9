"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference domain entities or application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.document import DocumentPage
    from app.domain.entities.document import DocumentEntity


# Document repository interface
class IDocumentRepository(Protocol):
    """Protocol for document repository (DIP).

    Entities returned are detached values: mutating one does not change the
    store until save() is called with it.
    """

    async def save(self, document: DocumentEntity) -> DocumentEntity:
        """Upsert document by id (last write wins); return the stored value."""

    async def get_by_id(self, document_id: str) -> DocumentEntity | None:
        """Return document by ID, or None."""

    async def get_all(self) -> list[DocumentEntity]:
        """Return every document (diagnostics and tests; not paginated)."""

    async def get_paginated(
        self, *, cursor: str | None, limit: int
    ) -> DocumentPage:
        """Return up to limit documents ordered by (created_at desc, id desc).

        When cursor is set, only documents strictly after the cursor position
        are returned. next_cursor is set iff more documents remain. Raises
        InvalidCursorException if cursor cannot be decoded. limit is used as
        given; callers clamp it.
        """

    async def delete(self, document_id: str) -> bool:
        """Delete document by id. Returns True if a document was removed."""
