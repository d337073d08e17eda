"""
Chunk ORM model.

Stores chunk text, page range and its pgvector embedding.

Dependencies: sqlalchemy, pgvector, recall.boundary.db.base
System role: Chunk persistence and similarity search
"""

import uuid

from pgvector.sqlalchemy import Vector
from sqlalchemy import ForeignKey, Index, Integer, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from recall.boundary.db.base import Base, TimestampMixin, UUIDMixin

EMBEDDING_DIMENSION = 768


class ChunkModel(Base, UUIDMixin, TimestampMixin):
    """
    Chunk ORM model.

    Attributes:
        document_id: Owning document (ON DELETE CASCADE)
        text: Chunk text
        chunk_index: Zero-based position within the document
        page_start: First page covered (1-based)
        page_end: Last page covered (1-based, inclusive)
        embedding: 768-dimension vector
    """

    __tablename__ = "chunks"

    document_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("documents.id", ondelete="CASCADE"),
        nullable=False,
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    chunk_index: Mapped[int] = mapped_column(Integer, nullable=False)
    page_start: Mapped[int] = mapped_column(Integer, nullable=False)
    page_end: Mapped[int] = mapped_column(Integer, nullable=False)
    embedding = mapped_column(Vector(EMBEDDING_DIMENSION), nullable=False)

    # Relationships
    document = relationship("DocumentModel", back_populates="chunks")

    __table_args__ = (
        Index("ix_chunks_document_id_chunk_index", "document_id", "chunk_index"),
    )
