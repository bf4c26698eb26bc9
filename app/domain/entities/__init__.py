"""Domain entities and aggregates.

Pure domain models; no ORM or persistence concerns.
"""

from app.domain.entities.document import DocumentEntity

__all__ = [
    "DocumentEntity",
]
