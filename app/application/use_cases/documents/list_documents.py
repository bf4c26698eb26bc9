"""List documents newest first with opaque cursor pagination."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from app.application.dtos.document import (
    ListDocumentsInput,
    ListDocumentsOutput,
    map_document_to_output,
)

if TYPE_CHECKING:
    from app.application.interfaces.repositories import IDocumentRepository

DEFAULT_LIMIT = 20
MIN_LIMIT = 1
MAX_LIMIT = 50


def normalize_limit(limit: float | None) -> int:
    """Return limit clamped to [MIN_LIMIT, MAX_LIMIT] and floored.

    None and NaN mean DEFAULT_LIMIT; infinities clamp to the nearest bound.
    """
    if limit is None or math.isnan(limit):
        return DEFAULT_LIMIT
    return math.floor(min(MAX_LIMIT, max(MIN_LIMIT, limit)))


class ListDocumentsUseCase:
    """Clamps the page size and delegates to the repository's keyset pagination.

    Cursor errors from the repository propagate; an invalid cursor is never
    treated as "start from the beginning".
    """

    def __init__(self, document_repo: "IDocumentRepository") -> None:
        self._document_repo = document_repo

    async def execute(self, data: ListDocumentsInput) -> ListDocumentsOutput:
        page = await self._document_repo.get_paginated(
            cursor=data.cursor,
            limit=normalize_limit(data.limit),
        )
        return ListDocumentsOutput(
            items=[map_document_to_output(d) for d in page.items],
            next_cursor=page.next_cursor,
        )
