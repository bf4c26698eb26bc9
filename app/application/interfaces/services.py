"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services (DIP).
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.document import (
        ClientDocumentPayload,
        ClientDocumentResponse,
    )


# Clock interface
class IClock(Protocol):
    """Protocol for the current time (deterministic in tests)."""

    def now(self) -> datetime:
        """Return the current timezone-aware UTC datetime."""


# Id generator interface
class IIdGenerator(Protocol):
    """Protocol for document id generation."""

    def generate(self) -> str:
        """Return a new unique id."""


# Client backend gateway interface
class IClientGateway(Protocol):
    """Protocol for delivering a finalized document to the client backend.

    Implementations apply their own request timeout and raise
    ExternalServiceException on failure; callers do not retry.
    """

    async def send_document(
        self, payload: ClientDocumentPayload
    ) -> ClientDocumentResponse:
        """Send the document and return the access code issued for it."""
