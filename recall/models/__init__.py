"""
API request/response schemas.
"""

from recall.models.chat import ChatRequest, ChatResponse, ChunkSource
from recall.models.document import (
    DocumentResponse,
    DocumentStatusResponse,
    UploadResponse,
)

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "ChunkSource",
    "DocumentResponse",
    "DocumentStatusResponse",
    "UploadResponse",
]
