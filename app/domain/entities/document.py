"""Document domain entity.

Represents a document and its lifecycle (draft -> final -> final with access
code), independent of persistence. Validation runs on construction and after
every transition, so an invalid document state is unreachable.
"""

from dataclasses import dataclass
from datetime import datetime

from app.domain.enums import DocumentStatus
from app.domain.exceptions import InvalidDocumentStateException
from app.shared.utils.datetime import ensure_utc


def _is_blank(value: object) -> bool:
    return not isinstance(value, str) or value.strip() == ""


@dataclass
class DocumentEntity:
    """Domain entity for a document (aggregate root).

    Mutable: finalize() and assign_access_code() change state in place.
    The entity is a detached value; callers persist it explicitly through
    the document repository.
    """

    id: str
    title: str
    content: str
    created_at: datetime
    status: DocumentStatus = DocumentStatus.DRAFT
    access_code: str | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate document invariants. Raises InvalidDocumentStateException if invalid."""
        if _is_blank(self.id):
            raise InvalidDocumentStateException("Document id cannot be empty", field="id")
        if _is_blank(self.title):
            raise InvalidDocumentStateException(
                "Document title cannot be empty", field="title"
            )
        if _is_blank(self.content):
            raise InvalidDocumentStateException(
                "Document content cannot be empty", field="content"
            )
        if not isinstance(self.created_at, datetime):
            raise InvalidDocumentStateException(
                "Document createdAt must be a valid date", field="created_at"
            )
        self.created_at = ensure_utc(self.created_at)
        try:
            self.status = DocumentStatus(self.status)
        except ValueError:
            raise InvalidDocumentStateException(
                f"Invalid document status: {self.status!r}", field="status"
            ) from None
        if self.access_code is not None:
            if self.status is not DocumentStatus.FINAL:
                raise InvalidDocumentStateException(
                    "Access code can only be set when document is final",
                    field="access_code",
                )
            if _is_blank(self.access_code):
                raise InvalidDocumentStateException(
                    "Access code cannot be empty", field="access_code"
                )

    def is_final(self) -> bool:
        """Return whether the document has been finalized."""
        return self.status is DocumentStatus.FINAL

    def finalize(self) -> None:
        """Transition draft -> final.

        Raises:
            InvalidDocumentStateException: If already final or content is blank.
        """
        if self.is_final():
            raise InvalidDocumentStateException(
                "Document is already finalized", field="status"
            )
        if _is_blank(self.content):
            raise InvalidDocumentStateException(
                "Cannot finalize a document with empty content", field="content"
            )
        self.status = DocumentStatus.FINAL
        self.validate()

    def assign_access_code(self, code: str) -> None:
        """Assign the access code issued by the client backend.

        Args:
            code: Access code; surrounding whitespace is trimmed.

        Raises:
            InvalidDocumentStateException: If not final or code is blank.
        """
        if not self.is_final():
            raise InvalidDocumentStateException(
                "Access code can only be assigned to finalized documents",
                field="access_code",
            )
        trimmed = code.strip() if isinstance(code, str) else ""
        if not trimmed:
            raise InvalidDocumentStateException(
                "Access code cannot be empty", field="access_code"
            )
        self.access_code = trimmed
        self.validate()
