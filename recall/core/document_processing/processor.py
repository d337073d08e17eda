"""
Document processing orchestrator.

Drives one document through extraction -> chunking -> summarization ->
embedding -> storage and records the outcome on the document.

Dependencies: All task modules, recall.boundary.store, recall.boundary.storage
System role: Per-document state machine (coordinates only)
"""

import logging
import time
from uuid import UUID

from recall.boundary.storage.temp_files import TempFileStorage
from recall.boundary.store.document_store import DocumentStore
from recall.core.document_processing.models import (
    Chunk,
    Document,
    DocumentStatus,
    ProcessingResult,
)
from recall.core.document_processing.tasks import (
    ChunkingTask,
    EmbeddingTask,
    ExtractionTask,
    SummaryTask,
)
from recall.core.exceptions import DocumentNotFoundError, InvalidStatusTransitionError
from recall.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class DocumentProcessor:
    """Process an uploaded document: PENDING -> PROCESSING -> COMPLETED | FAILED."""

    def __init__(
        self,
        store: DocumentStore,
        storage: TempFileStorage,
        extraction_task: ExtractionTask,
        chunking_task: ChunkingTask,
        summary_task: SummaryTask,
        embedding_task: EmbeddingTask,
    ) -> None:
        self._store = store
        self._storage = storage
        self._extraction_task = extraction_task
        self._chunking_task = chunking_task
        self._summary_task = summary_task
        self._embedding_task = embedding_task

    async def process(self, document_id: UUID) -> ProcessingResult | None:
        """
        Process one document end to end.

        Failures after the document is marked PROCESSING are recorded as
        FAILED and not re-raised. Chunks already written are left in place.

        Args:
            document_id: Document to process

        Returns:
            ProcessingResult, or None when the document is not PENDING
            (already processed or in progress) and was left untouched

        Raises:
            DocumentNotFoundError: If the document does not exist
        """
        start_time = time.perf_counter()

        document = await self._store.get_document(document_id)
        if document is None:
            raise DocumentNotFoundError(str(document_id))

        try:
            document.start_processing()
        except InvalidStatusTransitionError:
            logger.warning(
                f"{__name__}:process - Skipping document that is not pending",
                extra={"document_id": str(document_id), "status": document.status.value},
            )
            return None
        document = await self._store.save_document(document)
        logger.info(
            f"{__name__}:process - START",
            extra={"document_id": str(document_id), "document_filename": document.filename},
        )

        try:
            chunk_count = await self._run_pipeline(document)
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:process - FAILED",
                e,
                document_id=str(document_id),
            )
            await self._mark_failed(document)
            return ProcessingResult(
                document_id=document_id,
                status=DocumentStatus.FAILED,
                processing_time_ms=(time.perf_counter() - start_time) * 1000,
                error=str(e),
            )

        self._storage.delete(document_id)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"{__name__}:process - END",
            extra={
                "document_id": str(document_id),
                "chunk_count": chunk_count,
                "processing_time_ms": round(elapsed_ms, 2),
            },
        )
        return ProcessingResult(
            document_id=document_id,
            status=DocumentStatus.COMPLETED,
            chunk_count=chunk_count,
            processing_time_ms=elapsed_ms,
        )

    async def _run_pipeline(self, document: Document) -> int:
        pages = await self._extraction_task.extract(document.id)
        drafts = self._chunking_task.chunk(pages)
        summary = await self._summary_task.summarize(drafts)
        embedded = await self._embedding_task.embed_chunks(drafts)

        chunks = [Chunk.from_embedded(document.id, item) for item in embedded]
        await self._store.save_chunks(chunks)

        completed = document.model_copy(deep=True)
        completed.complete(summary=summary, total_chunks=len(chunks))
        await self._store.save_document(completed)
        return len(chunks)

    async def _mark_failed(self, document: Document) -> None:
        try:
            document.fail()
            await self._store.save_document(document)
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:process - Could not record FAILED status",
                e,
                document_id=str(document.id),
            )
