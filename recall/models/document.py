"""
Document schemas.

Request/response schemas for document operations.

Dependencies: pydantic
System role: Document API contracts
"""

import uuid
from datetime import datetime

from pydantic import Field

from recall.core.document_processing.models import Document, DocumentStatus
from recall.models.common import CamelModel


class UploadResponse(CamelModel):
    """Response schema for an accepted upload."""

    message: str = "File uploaded successfully"
    filename: str
    size: int = Field(description="Upload size in bytes")
    document_id: uuid.UUID


class DocumentStatusResponse(CamelModel):
    """Processing status of a document."""

    document_id: uuid.UUID
    filename: str
    status: DocumentStatus
    total_chunks: int | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_document(cls, document: Document) -> "DocumentStatusResponse":
        return cls(
            document_id=document.id,
            filename=document.filename,
            status=document.status,
            total_chunks=document.total_chunks,
            created_at=document.created_at,
            updated_at=document.updated_at,
        )


class DocumentResponse(DocumentStatusResponse):
    """Document detail including its summary."""

    summary: str | None = None

    @classmethod
    def from_document(cls, document: Document) -> "DocumentResponse":
        return cls(
            document_id=document.id,
            filename=document.filename,
            status=document.status,
            summary=document.summary,
            total_chunks=document.total_chunks,
            created_at=document.created_at,
            updated_at=document.updated_at,
        )
