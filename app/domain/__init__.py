"""Domain layer: entities, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.entities import DocumentEntity
from app.domain.enums import DocumentStatus
from app.domain.exceptions import (
    DocumentServiceException,
    ExternalServiceException,
    InvalidCursorException,
    InvalidDocumentStateException,
    ResourceNotFoundException,
)

__all__ = [
    # Entities
    "DocumentEntity",
    # Enums
    "DocumentStatus",
    # Exceptions
    "DocumentServiceException",
    "ExternalServiceException",
    "InvalidCursorException",
    "InvalidDocumentStateException",
    "ResourceNotFoundException",
]
