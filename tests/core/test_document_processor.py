"""
Test suite for DocumentProcessor.

Covers the success path, failure at each stage, re-delivery of an already
processed document and temp file cleanup.

System role: Verification of the per-document state machine
"""

import uuid
from unittest.mock import AsyncMock

import pytest

from recall.boundary.store.memory_document_store import InMemoryDocumentStore
from recall.core.document_processing.models import Document, DocumentStatus, PageText
from recall.core.document_processing.processor import DocumentProcessor
from recall.core.document_processing.tasks import (
    ChunkingTask,
    EmbeddingTask,
    ExtractionTask,
    SummaryTask,
)
from recall.core.exceptions import (
    DocumentNotFoundError,
    DocumentStoreError,
    EmbeddingProviderError,
    NoResponseGeneratedError,
    PdfExtractionError,
)


class RecordingStore(InMemoryDocumentStore):
    """In-memory store that records every saved status."""

    def __init__(self) -> None:
        super().__init__()
        self.saved_statuses: list[DocumentStatus] = []
        self.fail_on_status: DocumentStatus | None = None

    async def save_document(self, document: Document) -> Document:
        if document.status == self.fail_on_status:
            raise DocumentStoreError("database unavailable", operation="save_document")
        self.saved_statuses.append(document.status)
        return await super().save_document(document)


class OnePagePerChunk(ChunkingTask):
    """Chunker producing one draft per page, to keep scenarios small."""

    def chunk(self, pages):
        from recall.core.document_processing.models import ChunkDraft

        return [
            ChunkDraft(text=page.text, chunk_index=i, page_start=page.page_number, page_end=page.page_number)
            for i, page in enumerate(pages)
        ]


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def pages() -> list[PageText]:
    return [
        PageText(page_number=1, text="Rivers flow to the sea."),
        PageText(page_number=2, text="Mountains are tall."),
    ]


@pytest.fixture
def extraction_task(pages) -> ExtractionTask:
    task = AsyncMock(spec=ExtractionTask)
    task.extract.return_value = pages
    return task


@pytest.fixture
def make_processor(store, temp_storage, extraction_task, fake_embedding_provider, generation_provider_factory):
    def _make(generation_provider=None, embedding_provider=None) -> DocumentProcessor:
        return DocumentProcessor(
            store=store,
            storage=temp_storage,
            extraction_task=extraction_task,
            chunking_task=OnePagePerChunk(),
            summary_task=SummaryTask(generation_provider or generation_provider_factory(text="S")),
            embedding_task=EmbeddingTask(embedding_provider or fake_embedding_provider),
        )

    return _make


@pytest.fixture
async def pending_document(store, temp_storage) -> Document:
    document = await store.create_document(Document(filename="notes.pdf"))
    await temp_storage.save(document.id, b"%PDF-1.4\n")
    return document


class TestProcessSuccess:
    """Test suite for a fully successful run."""

    async def test_process_should_complete_document(
        self, make_processor, store, pending_document
    ) -> None:
        """Should store chunks, summary and count, passing through PROCESSING."""
        # Act
        result = await make_processor().process(pending_document.id)

        # Assert
        assert result.status == DocumentStatus.COMPLETED
        assert result.chunk_count == 2
        assert store.saved_statuses == [DocumentStatus.PROCESSING, DocumentStatus.COMPLETED]

        document = await store.get_document(pending_document.id)
        assert document.status == DocumentStatus.COMPLETED
        assert document.summary == "S"
        assert document.total_chunks == 2

    async def test_process_should_persist_chunks_with_pages_and_vectors(
        self, make_processor, store, pending_document
    ) -> None:
        """Should save one chunk per draft with index, pages, text and embedding."""
        await make_processor().process(pending_document.id)

        chunks = await store.list_chunks(pending_document.id)
        assert [(c.chunk_index, c.page_start, c.page_end) for c in chunks] == [(0, 1, 1), (1, 2, 2)]
        assert [c.text for c in chunks] == ["Rivers flow to the sea.", "Mountains are tall."]
        assert all(len(c.embedding) == 768 for c in chunks)
        assert all(c.document_id == pending_document.id for c in chunks)

    async def test_process_should_delete_temp_file(
        self, make_processor, temp_storage, pending_document
    ) -> None:
        """Should remove the uploaded file after completion."""
        await make_processor().process(pending_document.id)

        assert not temp_storage.path_for(pending_document.id).exists()

    async def test_process_should_summarize_before_embedding(
        self, make_processor, generation_provider_factory, fake_embedding_provider, pending_document
    ) -> None:
        """Should run summarization on drafts and then embed them."""
        generation = generation_provider_factory(text="S")

        await make_processor(generation_provider=generation).process(pending_document.id)

        assert "Rivers flow to the sea. Mountains are tall." in generation.prompts[0]
        assert len(fake_embedding_provider.calls) == 1


class TestProcessFailure:
    """Test suite for failures after PROCESSING was recorded."""

    async def test_extraction_failure_should_mark_failed(
        self, make_processor, store, extraction_task, pending_document
    ) -> None:
        """Should mark FAILED, store no chunks and set no summary."""
        extraction_task.extract.side_effect = PdfExtractionError("corrupt")

        result = await make_processor().process(pending_document.id)

        assert result.status == DocumentStatus.FAILED
        assert store.saved_statuses == [DocumentStatus.PROCESSING, DocumentStatus.FAILED]
        document = await store.get_document(pending_document.id)
        assert document.status == DocumentStatus.FAILED
        assert document.summary is None
        assert document.total_chunks is None
        assert await store.list_chunks(pending_document.id) == []

    async def test_summary_failure_should_mark_failed(
        self, make_processor, store, generation_provider_factory, pending_document
    ) -> None:
        """Should mark FAILED when the model returns nothing."""
        generation = generation_provider_factory(error=NoResponseGeneratedError())

        result = await make_processor(generation_provider=generation).process(pending_document.id)

        assert result.status == DocumentStatus.FAILED
        assert (await store.get_document(pending_document.id)).status == DocumentStatus.FAILED

    async def test_embedding_failure_should_mark_failed_and_keep_temp_file(
        self, make_processor, store, temp_storage, embedding_provider_factory, pending_document
    ) -> None:
        """Should mark FAILED and leave the upload in place."""
        embedding = embedding_provider_factory(error=EmbeddingProviderError("quota"))

        result = await make_processor(embedding_provider=embedding).process(pending_document.id)

        assert result.status == DocumentStatus.FAILED
        assert "Failed to embed batch of 2 chunks" in result.error
        assert await store.list_chunks(pending_document.id) == []
        assert temp_storage.path_for(pending_document.id).exists()

    async def test_failure_to_save_completed_should_mark_failed(
        self, make_processor, store, pending_document
    ) -> None:
        """Should fall back to FAILED when persisting COMPLETED fails."""
        store.fail_on_status = DocumentStatus.COMPLETED

        result = await make_processor().process(pending_document.id)

        assert result.status == DocumentStatus.FAILED
        assert store.saved_statuses == [DocumentStatus.PROCESSING, DocumentStatus.FAILED]

    async def test_failure_to_save_failed_should_be_swallowed(
        self, make_processor, store, extraction_task, pending_document
    ) -> None:
        """Should not raise when recording FAILED also fails."""
        extraction_task.extract.side_effect = PdfExtractionError("corrupt")
        store.fail_on_status = DocumentStatus.FAILED

        result = await make_processor().process(pending_document.id)

        assert result.status == DocumentStatus.FAILED
        assert (await store.get_document(pending_document.id)).status == DocumentStatus.PROCESSING


class TestProcessPreconditions:
    """Test suite for missing and already-processed documents."""

    async def test_process_should_raise_for_unknown_document(self, make_processor) -> None:
        """Should propagate DocumentNotFoundError."""
        with pytest.raises(DocumentNotFoundError):
            await make_processor().process(uuid.uuid4())

    @pytest.mark.parametrize(
        "path",
        [
            [DocumentStatus.PROCESSING],
            [DocumentStatus.PROCESSING, DocumentStatus.COMPLETED],
            [DocumentStatus.PROCESSING, DocumentStatus.FAILED],
        ],
    )
    async def test_process_should_skip_non_pending_document(
        self, make_processor, store, extraction_task, pending_document, path
    ) -> None:
        """Should return None and leave a redelivered document untouched."""
        document = await store.get_document(pending_document.id)
        for status in path:
            document.transition_to(status)
        await InMemoryDocumentStore.save_document(store, document)

        result = await make_processor().process(pending_document.id)

        assert result is None
        assert store.saved_statuses == []
        extraction_task.extract.assert_not_called()
        assert (await store.get_document(pending_document.id)).status == path[-1]
