"""Document API: thin routes delegating to the document use cases."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.v1.dependencies import (
    get_create_document_use_case,
    get_get_document_use_case,
    get_list_documents_use_case,
    get_update_document_use_case,
)
from app.application.dtos.document import (
    UNSET,
    CreateDocumentInput,
    GetDocumentInput,
    ListDocumentsInput,
    UpdateDocumentInput,
)
from app.application.use_cases.documents import (
    CreateDocumentUseCase,
    GetDocumentUseCase,
    ListDocumentsUseCase,
    UpdateDocumentUseCase,
)
from app.schemas.document import (
    CreateDocumentRequest,
    CreateDocumentResponse,
    DocumentResponse,
    ListDocumentsResponse,
    UpdateDocumentRequest,
)

router = APIRouter()


@router.post("", response_model=CreateDocumentResponse, status_code=201)
async def create_document(
    body: CreateDocumentRequest,
    use_case: Annotated[CreateDocumentUseCase, Depends(get_create_document_use_case)],
):
    """Create a draft document; returns its generated id."""
    created = await use_case.execute(
        CreateDocumentInput(
            title=body.title, content=body.content, expires_in=body.expires_in
        )
    )
    return CreateDocumentResponse(id=created.id)


@router.get("", response_model=ListDocumentsResponse)
async def list_documents(
    use_case: Annotated[ListDocumentsUseCase, Depends(get_list_documents_use_case)],
    cursor: str | None = None,
    limit: Annotated[int | None, Query(ge=1, le=50)] = None,
):
    """List documents newest first. Pass next_cursor back as cursor for the next page."""
    if cursor is not None and not cursor.strip():
        cursor = None
    page = await use_case.execute(ListDocumentsInput(cursor=cursor, limit=limit))
    return ListDocumentsResponse.model_validate(page)


@router.get("/{document_id}", response_model=DocumentResponse)
async def get_document(
    document_id: str,
    use_case: Annotated[GetDocumentUseCase, Depends(get_get_document_use_case)],
):
    """Get document by id."""
    document = await use_case.execute(GetDocumentInput(id=document_id))
    return DocumentResponse.model_validate(document)


@router.put("/{document_id}", response_model=DocumentResponse)
async def update_document(
    document_id: str,
    body: UpdateDocumentRequest,
    use_case: Annotated[UpdateDocumentUseCase, Depends(get_update_document_use_case)],
):
    """Update title, content, status or access code (omitted fields unchanged)."""
    access_code = body.access_code if "access_code" in body.model_fields_set else UNSET
    document = await use_case.execute(
        UpdateDocumentInput(
            id=document_id,
            title=body.title,
            content=body.content,
            status=body.status,
            access_code=access_code,
        )
    )
    return DocumentResponse.model_validate(document)
