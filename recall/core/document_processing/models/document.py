"""
Document domain model.

Tracks an uploaded PDF through its processing lifecycle:
PENDING -> PROCESSING -> COMPLETED | FAILED. COMPLETED and FAILED are final.

Dependencies: pydantic
System role: Document state shared by services, stores and the processor
"""

import enum
from datetime import datetime, timezone
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from recall.core.exceptions import InvalidStatusTransitionError


class DocumentStatus(str, enum.Enum):
    """
    Document processing lifecycle states.

    PENDING: Uploaded, waiting for the worker
    PROCESSING: Worker is extracting, chunking, summarizing and embedding
    COMPLETED: Chunks stored, ready for chat
    FAILED: Processing stopped on an error
    """

    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


_ALLOWED_TRANSITIONS: dict[DocumentStatus, frozenset[DocumentStatus]] = {
    DocumentStatus.PENDING: frozenset({DocumentStatus.PROCESSING}),
    DocumentStatus.PROCESSING: frozenset({DocumentStatus.COMPLETED, DocumentStatus.FAILED}),
    DocumentStatus.COMPLETED: frozenset(),
    DocumentStatus.FAILED: frozenset(),
}

SUMMARY_MAX_LENGTH = 500
FILENAME_MAX_LENGTH = 255


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Document(BaseModel):
    """Uploaded document and its processing state."""

    id: UUID = Field(default_factory=uuid4)
    filename: str = Field(min_length=1, max_length=FILENAME_MAX_LENGTH)
    status: DocumentStatus = DocumentStatus.PENDING
    total_chunks: int | None = None
    summary: str | None = Field(default=None, max_length=SUMMARY_MAX_LENGTH)
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    def can_transition_to(self, target: DocumentStatus) -> bool:
        return target in _ALLOWED_TRANSITIONS[self.status]

    def transition_to(self, target: DocumentStatus) -> None:
        """
        Move the document to a new status.

        Args:
            target: Next status

        Raises:
            InvalidStatusTransitionError: If target does not follow the current status
        """
        if not self.can_transition_to(target):
            raise InvalidStatusTransitionError(
                self.status.value, target.value, document_id=str(self.id)
            )
        self.status = target
        self.updated_at = _utcnow()

    def start_processing(self) -> None:
        self.transition_to(DocumentStatus.PROCESSING)

    def complete(self, summary: str, total_chunks: int) -> None:
        self.transition_to(DocumentStatus.COMPLETED)
        self.summary = summary[:SUMMARY_MAX_LENGTH]
        self.total_chunks = total_chunks

    def fail(self) -> None:
        self.transition_to(DocumentStatus.FAILED)
