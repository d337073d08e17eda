"""
Worker process runtime.

Each worker process owns one asyncio event loop, one GenAIClient and one
document store. Every task of the process runs on that loop, so pooled
database connections and the Gen AI transports stay bound to it.

Dependencies: celery, recall.boundary, recall.core, recall.configs
System role: Long-lived resources of a worker process
"""

import asyncio
import logging
import threading
from typing import Any, Coroutine

from celery.signals import worker_process_init, worker_process_shutdown, worker_shutdown

from recall.boundary.providers import (
    GenAIClient,
    GeminiEmbeddingProvider,
    GeminiGenerationProvider,
)
from recall.boundary.storage.temp_files import TempFileStorage
from recall.boundary.store.document_store import DocumentStore
from recall.boundary.store.store_factory import get_document_store
from recall.configs import Settings, get_settings
from recall.core.document_processing.processor import DocumentProcessor
from recall.core.document_processing.tasks import (
    ChunkingTask,
    EmbeddingTask,
    ExtractionTask,
    SummaryTask,
)

logger = logging.getLogger(__name__)


def build_document_processor(
    settings: Settings,
    store: DocumentStore,
    client: GenAIClient,
) -> DocumentProcessor:
    """Wire a DocumentProcessor from settings and shared handles."""
    processing = settings.processing
    storage = TempFileStorage(processing.upload_tmp_dir)
    return DocumentProcessor(
        store=store,
        storage=storage,
        extraction_task=ExtractionTask(storage),
        chunking_task=ChunkingTask(
            target_words=processing.target_words_per_chunk,
            min_words=processing.min_chunk_words,
            overlap_words=processing.overlap_words,
        ),
        summary_task=SummaryTask(GeminiGenerationProvider(client)),
        embedding_task=EmbeddingTask(
            GeminiEmbeddingProvider(client),
            dimension=settings.genai.embedding_dimension,
            batch_size=settings.genai.embedding_batch_size,
        ),
    )


class WorkerRuntime:
    """
    Event loop and shared handles of one worker process.

    The loop runs forever on its own thread. Task threads submit coroutines
    to it, so concurrent tasks (threads pool) share the loop safely.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(
            target=self._loop.run_forever, name="recall-worker-loop", daemon=True
        )
        self._thread.start()
        self._client = GenAIClient(self._settings.genai)
        self._store = get_document_store()
        self._processor = build_document_processor(self._settings, self._store, self._client)

    @property
    def processor(self) -> DocumentProcessor:
        return self._processor

    def run(self, coro: Coroutine[Any, Any, Any]) -> Any:
        """Run a coroutine on the process loop and wait for its result."""
        return asyncio.run_coroutine_threadsafe(coro, self._loop).result()

    def close(self) -> None:
        """Close the Gen AI client and the store, then stop and close the loop."""
        try:
            for name, closer in (("genai_client", self._client.close), ("store", self._store.close)):
                try:
                    self.run(closer())
                except Exception as e:
                    logger.error(
                        f"{__name__}:close - Failed to close {name}: {type(e).__name__}: {e}",
                        exc_info=e,
                    )
        finally:
            self._loop.call_soon_threadsafe(self._loop.stop)
            self._thread.join()
            self._loop.close()


_runtime: WorkerRuntime | None = None
_runtime_lock = threading.Lock()


def get_runtime() -> WorkerRuntime:
    """Get the process runtime, creating it on first use."""
    global _runtime
    with _runtime_lock:
        if _runtime is None:
            _runtime = WorkerRuntime()
            logger.info(f"{__name__}:get_runtime - Worker runtime initialized")
        return _runtime


def shutdown_runtime() -> None:
    global _runtime
    with _runtime_lock:
        if _runtime is None:
            return
        runtime, _runtime = _runtime, None
    runtime.close()
    logger.info(f"{__name__}:shutdown_runtime - Worker runtime closed")


@worker_process_init.connect
def _init_worker_process(**kwargs) -> None:
    get_runtime()


@worker_process_shutdown.connect
def _shutdown_worker_process(**kwargs) -> None:
    shutdown_runtime()


@worker_shutdown.connect
def _shutdown_worker(**kwargs) -> None:
    # solo/threads pools never emit worker_process_shutdown
    shutdown_runtime()
