"""Document API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.enums import DocumentStatus


class CreateDocumentRequest(BaseModel):
    """Request body for POST /documents. expires_in is in seconds."""

    title: str = Field(..., max_length=500)
    content: str
    expires_in: int | None = None


class CreateDocumentResponse(BaseModel):
    """Response for POST /documents (document created)."""

    id: str


class UpdateDocumentRequest(BaseModel):
    """Request body for PUT /documents/{id} (partial).

    Omitted fields keep their current value. access_code may be sent as null
    to clear the code; use model_fields_set to tell null from omitted.
    """

    title: str | None = Field(default=None, max_length=500)
    content: str | None = None
    status: DocumentStatus | None = None
    access_code: str | None = Field(default=None, max_length=255)


class DocumentResponse(BaseModel):
    """Document returned by get, update and list."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    content: str
    status: DocumentStatus
    access_code: str | None = None
    created_at: datetime


class ListDocumentsResponse(BaseModel):
    """Response for GET /documents (one page, newest first)."""

    model_config = ConfigDict(from_attributes=True)

    items: list[DocumentResponse]
    next_cursor: str | None = None


class SendDocumentRequest(BaseModel):
    """Request body for POST /send."""

    document_id: str = Field(..., min_length=1)


class SendDocumentResponse(BaseModel):
    """Response for POST /send: access code issued by the client backend."""

    access_code: str
