"""
Document service orchestrator.

Accepts uploads, records them as PENDING documents and hands their ids to
the processing queue. Also serves document listings and status.

Dependencies: recall.boundary.store, recall.boundary.storage
System role: Document management orchestration
"""

import logging
from typing import Callable
from uuid import UUID

from recall.boundary.storage.temp_files import TempFileStorage
from recall.boundary.store.document_store import DocumentStore
from recall.core.document_processing.models import Document
from recall.core.document_processing.models.document import FILENAME_MAX_LENGTH
from recall.core.exceptions import DocumentNotFoundError, ValidationError
from recall.models.document import UploadResponse
from recall.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "unknown.pdf"


class DocumentService:
    """
    Document service orchestrator.

    Upload flow: validate -> write temp file -> create PENDING document ->
    enqueue document id for the worker. A document whose id could not be
    queued is marked FAILED and its file removed.
    """

    def __init__(
        self,
        store: DocumentStore,
        storage: TempFileStorage,
        enqueue: Callable[[str], None],
        max_upload_size_bytes: int = 65 * 1024 * 1024,
        allowed_content_type: str = "application/pdf",
    ) -> None:
        """
        Args:
            store: Document store
            storage: Temp file storage shared with the worker
            enqueue: Publishes a document id for processing
            max_upload_size_bytes: Upload size limit
            allowed_content_type: Only accepted content type
        """
        self._store = store
        self._storage = storage
        self._enqueue = enqueue
        self._max_upload_size_bytes = max_upload_size_bytes
        self._allowed_content_type = allowed_content_type

    def validate_upload(self, content_type: str | None, size: int) -> None:
        """
        Reject uploads of the wrong type or size.

        Raises:
            ValidationError: Content type not allowed, or file too large
        """
        if content_type != self._allowed_content_type:
            raise ValidationError(
                "Only PDF files are allowed",
                field="file",
                details={"content_type": content_type},
            )
        if size > self._max_upload_size_bytes:
            limit_mb = self._max_upload_size_bytes // (1024 * 1024)
            raise ValidationError(
                f"File size exceeds {limit_mb}MB limit",
                field="file",
                details={"size": size},
            )

    async def upload_document(
        self,
        filename: str | None,
        content_type: str | None,
        content: bytes,
    ) -> UploadResponse:
        """
        Accept an uploaded PDF for processing.

        Args:
            filename: Original filename
            content_type: Declared content type
            content: File bytes

        Returns:
            UploadResponse: Accepted upload with its new document id

        Raises:
            ValidationError: When the upload is rejected (nothing is stored)
            Exception: Storage or queue failures, after cleanup
        """
        self.validate_upload(content_type, len(content))

        name = (filename or DEFAULT_FILENAME)[:FILENAME_MAX_LENGTH]
        document = Document(filename=name)
        await self._storage.save(document.id, content)
        try:
            document = await self._store.create_document(document)
        except Exception:
            self._storage.delete(document.id)
            raise

        try:
            self._enqueue(str(document.id))
        except Exception as e:
            await self._abandon(document, e)
            raise

        logger.info(
            f"{__name__}:upload_document - Document queued for processing",
            extra={"document_id": str(document.id), "document_filename": name, "size": len(content)},
        )
        return UploadResponse(
            filename=name,
            size=len(content),
            document_id=document.id,
        )

    async def _abandon(self, document: Document, error: Exception) -> None:
        """Move a document that never reached the queue to FAILED and drop its file."""
        log_exception_with_context(
            logger,
            f"{__name__}:upload_document - Failed to queue document",
            error,
            document_id=str(document.id),
        )
        self._storage.delete(document.id)
        try:
            document.start_processing()
            document.fail()
            await self._store.save_document(document)
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:upload_document - Could not record FAILED status",
                e,
                document_id=str(document.id),
            )

    async def list_documents(self) -> list[Document]:
        return await self._store.list_documents()

    async def get_document(self, document_id: UUID) -> Document:
        """
        Raises:
            DocumentNotFoundError: If the document does not exist
        """
        document = await self._store.get_document(document_id)
        if document is None:
            raise DocumentNotFoundError(str(document_id))
        return document
