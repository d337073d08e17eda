"""
Processing result model.

Dependencies: pydantic
System role: Return type of DocumentProcessor.process()
"""

from uuid import UUID

from pydantic import BaseModel, Field

from .document import DocumentStatus


class ProcessingResult(BaseModel):
    """Outcome of processing one document."""

    document_id: UUID = Field(description="Processed document id")
    status: DocumentStatus = Field(description="Final status (COMPLETED or FAILED)")
    chunk_count: int = Field(default=0, description="Number of chunks stored")
    processing_time_ms: float = Field(description="Total processing time in milliseconds")
    error: str | None = Field(default=None, description="Failure message when FAILED")
