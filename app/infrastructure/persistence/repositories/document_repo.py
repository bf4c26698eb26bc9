"""Document repository (SQLAlchemy). Returns domain entities."""

from __future__ import annotations

from sqlalchemy import and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.document import DocumentPage
from app.domain.entities.document import DocumentEntity
from app.domain.exceptions import InvalidDocumentStateException
from app.infrastructure.persistence.models.document import Document
from app.infrastructure.persistence.pagination_cursor import (
    CursorPayload,
    decode_cursor,
    encode_cursor,
)
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils import ensure_utc


def _entity_to_document(d: DocumentEntity) -> Document:
    """Map DocumentEntity to ORM Document for persistence."""
    return Document(
        id=d.id,
        title=d.title,
        content=d.content,
        status=d.status.value,
        access_code=d.access_code,
        created_at=d.created_at,
    )


def _document_to_entity(d: Document) -> DocumentEntity:
    """Map ORM Document to domain DocumentEntity (validates invariants)."""
    return DocumentEntity(
        id=d.id,
        title=d.title,
        content=d.content,
        created_at=ensure_utc(d.created_at),
        status=d.status,
        access_code=d.access_code,
    )


class DocumentRepository(BaseRepository[Document]):
    """Document repository. save() upserts by id; get_paginated() uses keyset pagination."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Document)

    async def save(self, document: DocumentEntity) -> DocumentEntity:
        """Upsert document by id (last write wins); return the saved entity."""
        await self.upsert(_entity_to_document(document))
        return document

    async def get_by_id(self, document_id: str) -> DocumentEntity | None:
        row = await self.get_orm_by_id(document_id)
        return _document_to_entity(row) if row else None

    async def get_all(self) -> list[DocumentEntity]:
        result = await self.db.execute(
            select(Document).order_by(Document.created_at.desc(), Document.id.desc())
        )
        return [_document_to_entity(d) for d in result.scalars().all()]

    async def get_paginated(
        self, *, cursor: str | None, limit: int
    ) -> DocumentPage:
        """Return one page ordered by (created_at desc, id desc).

        Fetches limit + 1 rows to learn whether another page exists;
        next_cursor encodes the last returned row.
        """
        if limit < 1:
            raise InvalidDocumentStateException(
                "Limit must be a positive integer", field="limit"
            )
        q = select(Document)
        if cursor:
            position = decode_cursor(cursor)
            q = q.where(
                or_(
                    Document.created_at < position.created_at,
                    and_(
                        Document.created_at == position.created_at,
                        Document.id < position.id,
                    ),
                )
            )
        q = q.order_by(Document.created_at.desc(), Document.id.desc()).limit(limit + 1)
        result = await self.db.execute(q)
        rows = list(result.scalars().all())

        items = [_document_to_entity(d) for d in rows[:limit]]
        next_cursor = None
        if len(rows) > limit:
            last = items[-1]
            next_cursor = encode_cursor(
                CursorPayload(created_at=last.created_at, id=last.id)
            )
        return DocumentPage(items=items, next_cursor=next_cursor)

    async def delete(self, document_id: str) -> bool:
        """Delete document by id; returns False if it does not exist."""
        row = await self.get_orm_by_id(document_id)
        if not row:
            return False
        await self.delete_orm(row)
        return True
