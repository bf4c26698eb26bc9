"""In-memory document repository (single process; development and tests)."""

from __future__ import annotations

import asyncio
import copy

from app.application.dtos.document import DocumentPage
from app.domain.entities.document import DocumentEntity
from app.domain.exceptions import InvalidDocumentStateException
from app.infrastructure.persistence.pagination_cursor import (
    CursorPayload,
    decode_cursor,
    encode_cursor,
    is_after_cursor,
)


def _order_key(document: DocumentEntity) -> tuple:
    return (document.created_at, document.id)


class InMemoryDocumentRepository:
    """Document repository backed by a dict keyed by id.

    Writes and reads take an asyncio.Lock so a save is never observed half
    applied. Stored and returned entities are copies, so callers must call
    save() to commit changes.
    """

    def __init__(self) -> None:
        self._documents: dict[str, DocumentEntity] = {}
        self._lock = asyncio.Lock()

    async def save(self, document: DocumentEntity) -> DocumentEntity:
        async with self._lock:
            self._documents[document.id] = copy.copy(document)
        return document

    async def get_by_id(self, document_id: str) -> DocumentEntity | None:
        async with self._lock:
            stored = self._documents.get(document_id)
        return copy.copy(stored) if stored else None

    async def get_all(self) -> list[DocumentEntity]:
        async with self._lock:
            return [copy.copy(d) for d in self._documents.values()]

    async def get_paginated(
        self, *, cursor: str | None, limit: int
    ) -> DocumentPage:
        """Return one page ordered by (created_at desc, id desc).

        next_cursor encodes the last returned item, so the next page starts
        at the first document not returned here.
        """
        if limit < 1:
            raise InvalidDocumentStateException(
                "Limit must be a positive integer", field="limit"
            )
        position = decode_cursor(cursor) if cursor else None

        async with self._lock:
            ordered = sorted(self._documents.values(), key=_order_key, reverse=True)
        if position is not None:
            ordered = [
                d for d in ordered if is_after_cursor(d.created_at, d.id, position)
            ]

        items = [copy.copy(d) for d in ordered[:limit]]
        next_cursor = None
        if len(ordered) > limit:
            last = items[-1]
            next_cursor = encode_cursor(
                CursorPayload(created_at=last.created_at, id=last.id)
            )
        return DocumentPage(items=items, next_cursor=next_cursor)

    async def delete(self, document_id: str) -> bool:
        async with self._lock:
            return self._documents.pop(document_id, None) is not None

    async def clear(self) -> None:
        async with self._lock:
            self._documents.clear()

    async def count(self) -> int:
        async with self._lock:
            return len(self._documents)
