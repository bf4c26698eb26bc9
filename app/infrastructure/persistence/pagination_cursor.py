"""Opaque pagination cursor: (created_at, id) <-> URL-safe string.

The pair is serialized as a compact JSON array ``[iso8601_utc, id]`` and
base64url-encoded without padding. JSON string quoting keeps the id
unambiguous whatever characters it contains, so no separator can collide.
"""

from __future__ import annotations

import base64
import json
from dataclasses import dataclass
from datetime import datetime

from app.domain.exceptions import InvalidCursorException
from app.shared.utils.datetime import ensure_utc


@dataclass(frozen=True)
class CursorPayload:
    """Position in the (created_at desc, id desc) document order."""

    created_at: datetime
    id: str


def encode_cursor(payload: CursorPayload) -> str:
    """Encode a cursor position. created_at is normalized to UTC."""
    created_at = ensure_utc(payload.created_at)
    raw = json.dumps(
        [created_at.isoformat(), payload.id],
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return base64.urlsafe_b64encode(raw.encode("utf-8")).decode("ascii").rstrip("=")


def _parse(cursor: str) -> CursorPayload:
    padded = cursor + "=" * (-len(cursor) % 4)
    raw = base64.b64decode(padded.encode("ascii"), altchars=b"-_", validate=True)
    decoded = json.loads(raw.decode("utf-8"))
    if not isinstance(decoded, list) or len(decoded) != 2:
        raise ValueError("Invalid cursor format")
    created_at_iso, document_id = decoded
    if not isinstance(created_at_iso, str) or not isinstance(document_id, str):
        raise ValueError("Invalid cursor format")
    if not document_id:
        raise ValueError("Cursor id is empty")
    created_at = datetime.fromisoformat(created_at_iso)
    if created_at.tzinfo is None:
        raise ValueError("Cursor date has no timezone")
    return CursorPayload(created_at=ensure_utc(created_at), id=document_id)


def decode_cursor(cursor: str) -> CursorPayload:
    """Decode a cursor produced by encode_cursor.

    Raises:
        InvalidCursorException: For any input that is not a valid cursor.
    """
    if not isinstance(cursor, str) or not cursor:
        raise InvalidCursorException()
    try:
        return _parse(cursor)
    except (ValueError, TypeError, RecursionError) as e:
        # binascii.Error, UnicodeError and JSONDecodeError are ValueErrors.
        raise InvalidCursorException() from e


def is_after_cursor(created_at: datetime, document_id: str, cursor: CursorPayload) -> bool:
    """Return whether (created_at, document_id) comes strictly after cursor in descending order."""
    return created_at < cursor.created_at or (
        created_at == cursor.created_at and document_id < cursor.id
    )
