"""
Document processing Celery task.

Async task: process_document(document_id)
Flow: extract -> chunk -> summarize -> embed -> store -> update status

Dependencies: recall.workers, recall.core.document_processing
System role: Async document processing task
"""

import logging
from uuid import UUID

from recall.core.exceptions import DocumentNotFoundError
from recall.observability import clear_correlation_id, set_correlation_id
from recall.workers import celery_app, celery_config
from recall.workers.runtime import get_runtime

logger = logging.getLogger(__name__)


@celery_app.task(name="recall.process_document")
def process_document(document_id: str) -> dict | None:
    """
    Process an uploaded document.

    Not retried: failures are recorded on the document as FAILED.

    Args:
        document_id: Document UUID as string

    Returns:
        dict: Processing result, or None when nothing was processed
    """
    set_correlation_id(document_id)
    try:
        try:
            doc_uuid = UUID(document_id)
        except ValueError:
            logger.error(
                f"{__name__}:process_document - Invalid document id",
                extra={"document_id": document_id},
            )
            return None

        runtime = get_runtime()
        try:
            result = runtime.run(runtime.processor.process(doc_uuid))
        except DocumentNotFoundError:
            logger.error(
                f"{__name__}:process_document - Document not found",
                extra={"document_id": document_id},
            )
            return None

        if result is None:
            return None
        logger.info(
            f"{__name__}:process_document - {result.status.value}",
            extra={
                "document_id": document_id,
                "chunk_count": result.chunk_count,
                "processing_time_ms": round(result.processing_time_ms, 2),
            },
        )
        return result.model_dump(mode="json")
    finally:
        clear_correlation_id()


def enqueue_document_processing(document_id: str) -> None:
    """Publish a document id to the processing queue."""
    process_document.apply_async(args=[document_id], queue=celery_config.queue_name)
