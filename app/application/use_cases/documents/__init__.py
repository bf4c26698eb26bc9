"""Document use cases: create, get, update, list (cursor-paginated), and send to client backend."""

from app.application.use_cases.documents.create_document import CreateDocumentUseCase
from app.application.use_cases.documents.get_document import GetDocumentUseCase
from app.application.use_cases.documents.list_documents import ListDocumentsUseCase
from app.application.use_cases.documents.send_document import SendDocumentUseCase
from app.application.use_cases.documents.update_document import UpdateDocumentUseCase

__all__ = [
    "CreateDocumentUseCase",
    "GetDocumentUseCase",
    "ListDocumentsUseCase",
    "SendDocumentUseCase",
    "UpdateDocumentUseCase",
]
