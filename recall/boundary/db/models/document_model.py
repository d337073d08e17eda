"""
Document ORM model.

Represents uploaded documents with processing status, summary and chunk count.

Dependencies: sqlalchemy, recall.boundary.db.base
System role: Document persistence for processing tracking
"""

from sqlalchemy import Enum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from recall.boundary.db.base import Base, TimestampMixin, UUIDMixin
from recall.core.document_processing.models.document import DocumentStatus


class DocumentModel(Base, UUIDMixin, TimestampMixin):
    """
    Document ORM model tracking processing state.

    Lifecycle: Upload (PENDING) -> worker (PROCESSING) -> COMPLETED or FAILED.

    Attributes:
        id: UUID primary key
        filename: Original filename (255 char limit)
        status: Current processing state
        total_chunks: Number of stored chunks, set on completion
        summary: Short plain-language summary, set on completion (500 char limit)
        created_at: Upload timestamp (UTC)
        updated_at: Last status change timestamp (UTC)

    Relationships:
        chunks: Child ChunkModels (deleted with the document)
    """

    __tablename__ = "documents"

    filename: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="Original filename",
    )

    status: Mapped[DocumentStatus] = mapped_column(
        Enum(DocumentStatus, native_enum=False),
        nullable=False,
        default=DocumentStatus.PENDING,
    )

    total_chunks: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
    )

    summary: Mapped[str | None] = mapped_column(
        String(500),
        nullable=True,
    )

    # Relationships
    chunks = relationship(
        "ChunkModel",
        back_populates="document",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
