"""
Chat schemas.

Dependencies: pydantic
System role: Chat API contracts
"""

from pydantic import BaseModel

from recall.core.document_processing.models import Chunk
from recall.models.common import CamelModel


class ChatRequest(BaseModel):
    """Question about one document. Length is checked by the chat service."""

    question: str


class ChunkSource(CamelModel):
    """Location of a chunk used to answer."""

    chunk_index: int
    page_start: int
    page_end: int

    @classmethod
    def from_chunk(cls, chunk: Chunk) -> "ChunkSource":
        return cls(
            chunk_index=chunk.chunk_index,
            page_start=chunk.page_start,
            page_end=chunk.page_end,
        )


class ChatResponse(CamelModel):
    """Answer with the chunks it was grounded on, nearest first."""

    answer: str
    sources: list[ChunkSource]
