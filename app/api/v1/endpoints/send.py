"""Send API: transfer a finalized document to the client backend."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_send_document_use_case
from app.application.dtos.document import SendDocumentInput
from app.application.use_cases.documents import SendDocumentUseCase
from app.schemas.document import SendDocumentRequest, SendDocumentResponse

router = APIRouter()


@router.post("", response_model=SendDocumentResponse)
async def send_document(
    body: SendDocumentRequest,
    use_case: Annotated[SendDocumentUseCase, Depends(get_send_document_use_case)],
):
    """Send a final document; the access code issued by the client backend is stored and returned."""
    result = await use_case.execute(SendDocumentInput(document_id=body.document_id))
    return SendDocumentResponse(access_code=result.access_code)
