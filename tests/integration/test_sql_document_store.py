"""
Test suite for SqlDocumentStore.

Exercises the per-operation session handling against SQLite (aiosqlite).

System role: Verification of the PostgreSQL-backed store's mapping layer
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from recall.boundary.db.base import Base
from recall.boundary.store.sql_document_store import SqlDocumentStore
from recall.core.document_processing.models import Chunk, Document, DocumentStatus
from recall.core.exceptions import DocumentNotFoundError, DocumentStoreError


@pytest.fixture
async def sql_store():
    """Provide a SqlDocumentStore over a fresh in-memory SQLite database."""
    import recall.boundary.db.models  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    store = SqlDocumentStore(async_sessionmaker(engine, expire_on_commit=False), engine=engine)
    yield store
    await store.close()


class TestSqlDocumentStoreDocuments:
    """Test suite for document persistence."""

    async def test_create_then_get_should_round_trip(self, sql_store) -> None:
        """Should return the stored document by id."""
        document = await sql_store.create_document(Document(filename="report.pdf"))

        loaded = await sql_store.get_document(document.id)

        assert loaded.id == document.id
        assert loaded.filename == "report.pdf"
        assert loaded.status == DocumentStatus.PENDING

    async def test_get_should_return_none_for_unknown_id(self, sql_store) -> None:
        assert await sql_store.get_document(uuid.uuid4()) is None

    async def test_save_should_persist_completion(self, sql_store) -> None:
        """Should store status, summary and chunk count."""
        # Arrange
        document = await sql_store.create_document(Document(filename="report.pdf"))
        document.start_processing()
        document.complete("Summary.", total_chunks=2)

        # Act
        await sql_store.save_document(document)
        loaded = await sql_store.get_document(document.id)

        # Assert
        assert loaded.status == DocumentStatus.COMPLETED
        assert loaded.summary == "Summary."
        assert loaded.total_chunks == 2

    async def test_save_should_persist_failure_without_summary(self, sql_store) -> None:
        """Should store FAILED and leave summary and chunk count empty."""
        # Arrange
        document = await sql_store.create_document(Document(filename="report.pdf"))
        document.start_processing()
        document.fail()

        # Act
        await sql_store.save_document(document)
        loaded = await sql_store.get_document(document.id)

        # Assert
        assert loaded.status == DocumentStatus.FAILED
        assert loaded.summary is None
        assert loaded.total_chunks is None

    async def test_save_should_raise_for_unknown_document(self, sql_store) -> None:
        """Should raise DocumentNotFoundError when nothing matches."""
        with pytest.raises(DocumentNotFoundError):
            await sql_store.save_document(Document(filename="ghost.pdf"))

    async def test_list_should_order_newest_first(self, sql_store) -> None:
        """Should list documents by creation time descending."""
        start = datetime(2026, 1, 1, tzinfo=timezone.utc)
        for offset, name in enumerate(["first.pdf", "second.pdf"]):
            await sql_store.create_document(
                Document(filename=name, created_at=start + timedelta(seconds=offset))
            )

        documents = await sql_store.list_documents()

        assert [document.filename for document in documents] == ["second.pdf", "first.pdf"]

    async def test_create_should_wrap_database_errors(self, sql_store) -> None:
        """Should raise DocumentStoreError when the insert fails."""
        document = await sql_store.create_document(Document(filename="a.pdf"))

        with pytest.raises(DocumentStoreError) as exc_info:
            await sql_store.create_document(Document(id=document.id, filename="dup.pdf"))
        assert exc_info.value.details["operation"] == "create_document"


class TestSqlDocumentStoreChunks:
    """Test suite for chunk persistence."""

    async def test_save_chunks_should_round_trip_embeddings(self, sql_store) -> None:
        """Should return chunks ordered by index with float embeddings."""
        # Arrange
        document = await sql_store.create_document(Document(filename="report.pdf"))
        chunks = [
            Chunk(document_id=document.id, text=f"Chunk {index}.", chunk_index=index,
                  page_start=1, page_end=2, embedding=[0.5] * 768)
            for index in [1, 0]
        ]

        # Act
        await sql_store.save_chunks(chunks)
        loaded = await sql_store.list_chunks(document.id)

        # Assert
        assert [chunk.chunk_index for chunk in loaded] == [0, 1]
        assert loaded[0].embedding == [0.5] * 768
        assert loaded[0].page_end == 2

    async def test_save_chunks_should_ignore_empty_list(self, sql_store) -> None:
        await sql_store.save_chunks([])
