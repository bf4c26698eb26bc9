"""Document ORM model. Title, content, lifecycle status and access code."""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from app.domain.enums import DocumentStatus
from app.infrastructure.persistence.database import Base


class Document(Base):
    """Document row. Table: document. created_at comes from the domain clock, not the server."""

    __tablename__ = "document"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(
        String(16), nullable=False, default=DocumentStatus.DRAFT.value
    )
    access_code: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    __table_args__ = (
        CheckConstraint("status IN ('draft', 'final')", name="document_status_check"),
        CheckConstraint(
            "access_code IS NULL OR status = 'final'",
            name="document_access_code_final_check",
        ),
        # Keyset pagination: ORDER BY created_at DESC, id DESC.
        Index("ix_document_created_at_id", "created_at", "id"),
    )
