"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: recall.configs, recall.application, recall.boundary, recall.core
System role: DI container for service injection
"""

from recall.application.services import ChatService, DocumentService
from recall.boundary.providers import (
    GenAIClient,
    GeminiEmbeddingProvider,
    GeminiGenerationProvider,
)
from recall.boundary.storage.temp_files import TempFileStorage
from recall.boundary.store.store_factory import get_document_store
from recall.configs import get_settings
from recall.core.answering.answerer import Answerer
from recall.core.document_processing.tasks.embedding_task import EmbeddingTask
from recall.core.retrieval.retriever import Retriever


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._genai_client = None
        self._document_store = None
        self._temp_storage = None
        self._embedding_task = None
        self._answerer = None

    @property
    def genai_client(self) -> GenAIClient:
        """Get cached Gen AI client handle (the SDK client is built on first call)."""
        if self._genai_client is None:
            self._genai_client = GenAIClient(get_settings().genai)
        return self._genai_client

    @property
    def document_store(self):
        """Get cached document store."""
        if self._document_store is None:
            self._document_store = get_document_store()
        return self._document_store

    @property
    def temp_storage(self) -> TempFileStorage:
        if self._temp_storage is None:
            self._temp_storage = TempFileStorage(get_settings().processing.upload_tmp_dir)
        return self._temp_storage

    @property
    def embedding_task(self) -> EmbeddingTask:
        if self._embedding_task is None:
            genai = get_settings().genai
            self._embedding_task = EmbeddingTask(
                GeminiEmbeddingProvider(self.genai_client),
                dimension=genai.embedding_dimension,
                batch_size=genai.embedding_batch_size,
            )
        return self._embedding_task

    @property
    def answerer(self) -> Answerer:
        if self._answerer is None:
            self._answerer = Answerer(GeminiGenerationProvider(self.genai_client))
        return self._answerer

    async def close(self) -> None:
        """Close the Gen AI client and the document store, then clear the cache."""
        if self._genai_client is not None:
            await self._genai_client.close()
        if self._document_store is not None:
            await self._document_store.close()
        self.clear()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._genai_client = None
        self._document_store = None
        self._temp_storage = None
        self._embedding_task = None
        self._answerer = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_document_service() -> DocumentService:
    """
    Get document service instance.

    Returns:
        DocumentService: Upload/list/status service publishing to the processing queue
    """
    # Lazy import: loading the Celery app is only needed once uploads are served
    from recall.workers.tasks.document_processing import enqueue_document_processing

    cache = get_service_cache()
    processing = get_settings().processing
    return DocumentService(
        store=cache.document_store,
        storage=cache.temp_storage,
        enqueue=enqueue_document_processing,
        max_upload_size_bytes=processing.max_upload_size_bytes,
        allowed_content_type=processing.allowed_content_type,
    )


def get_chat_service() -> ChatService:
    """
    Get chat service instance.

    Returns:
        ChatService: Embed -> retrieve -> answer service
    """
    cache = get_service_cache()
    settings = get_settings()
    return ChatService(
        store=cache.document_store,
        embedding_task=cache.embedding_task,
        retriever=Retriever(cache.document_store, dimension=settings.genai.embedding_dimension),
        answerer=cache.answerer,
        max_question_length=settings.processing.max_question_length,
        top_k=settings.processing.retrieval_top_k,
    )
