"""Send a finalized document to the client backend and store the issued access code."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.application.dtos.document import (
    ClientDocumentPayload,
    SendDocumentInput,
    SendDocumentOutput,
)
from app.domain.exceptions import (
    InvalidDocumentStateException,
    ResourceNotFoundException,
)

if TYPE_CHECKING:
    from app.application.interfaces.repositories import IDocumentRepository
    from app.application.interfaces.services import IClientGateway

logger = logging.getLogger(__name__)


class SendDocumentUseCase:
    """Transfers a final document without an access code to the client backend.

    The gateway is called at most once per execution; its errors propagate
    unchanged and leave the stored document untouched.
    """

    def __init__(
        self,
        document_repo: "IDocumentRepository",
        client_gateway: "IClientGateway",
    ) -> None:
        self._document_repo = document_repo
        self._client_gateway = client_gateway

    async def execute(self, data: SendDocumentInput) -> SendDocumentOutput:
        """Send the document and return the access code assigned to it.

        Raises:
            ResourceNotFoundException: Document does not exist.
            InvalidDocumentStateException: Not final, blank content, or already has a code.
            ExternalServiceException: Client backend call failed (from the gateway).
        """
        document = await self._document_repo.get_by_id(data.document_id)
        if not document:
            raise ResourceNotFoundException("document", data.document_id)

        if not document.is_final():
            raise InvalidDocumentStateException(
                "Document must be finalized before sending", field="status"
            )
        if not document.content or document.content.strip() == "":
            raise InvalidDocumentStateException(
                "Document content cannot be empty", field="content"
            )
        if document.access_code:
            raise InvalidDocumentStateException(
                "Document already has an access code", field="access_code"
            )

        response = await self._client_gateway.send_document(
            ClientDocumentPayload(
                id=document.id,
                title=document.title,
                content=document.content,
            )
        )

        document.assign_access_code(response.access_code)
        await self._document_repo.save(document)
        logger.info("Document sent to client backend: id=%s", document.id)
        return SendDocumentOutput(access_code=document.access_code)
