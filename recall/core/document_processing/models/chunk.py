"""
Chunk models for the document processing pipeline.

ChunkDraft and EmbeddedChunk are transient pipeline values; Chunk is the
stored record returned by the document stores and the retriever.

Dependencies: pydantic
System role: Data structures for document chunks
"""

from datetime import datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class ChunkDraft(BaseModel):
    """Chunk text and page range before embedding."""

    text: str = Field(min_length=1, description="Sentences joined by single spaces")
    chunk_index: int = Field(ge=0, description="Zero-based position in the document")
    page_start: int = Field(ge=1, description="Page of the first sentence")
    page_end: int = Field(ge=1, description="Page of the last sentence")


class EmbeddedChunk(BaseModel):
    """A ChunkDraft paired with its embedding vector."""

    draft: ChunkDraft
    embedding: list[float]


class Chunk(BaseModel):
    """Stored document chunk with its embedding."""

    id: UUID = Field(default_factory=uuid4)
    document_id: UUID
    text: str = Field(min_length=1)
    chunk_index: int = Field(ge=0)
    page_start: int = Field(ge=1)
    page_end: int = Field(ge=1)
    embedding: list[float]
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_embedded(cls, document_id: UUID, embedded: EmbeddedChunk) -> "Chunk":
        draft = embedded.draft
        return cls(
            document_id=document_id,
            text=draft.text,
            chunk_index=draft.chunk_index,
            page_start=draft.page_start,
            page_end=draft.page_end,
            embedding=embedded.embedding,
        )
