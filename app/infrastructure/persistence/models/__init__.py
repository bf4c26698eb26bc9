"""SQLAlchemy ORM models. Import here so Base.metadata sees every table."""

from app.infrastructure.persistence.models.document import Document

__all__ = ["Document"]
