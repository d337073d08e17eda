"""
Models for document processing pipeline.

Exports: PageText, ChunkDraft, EmbeddedChunk, Chunk, Document, DocumentStatus, ProcessingResult
"""

from .chunk import Chunk, ChunkDraft, EmbeddedChunk
from .document import Document, DocumentStatus
from .page_text import PageText
from .processing_result import ProcessingResult

__all__ = [
    "PageText",
    "ChunkDraft",
    "EmbeddedChunk",
    "Chunk",
    "Document",
    "DocumentStatus",
    "ProcessingResult",
]
