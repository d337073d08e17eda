"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory SQLite database, fake model providers, in-memory store,
temp upload storage, sample documents and pages
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid
from pathlib import Path

import pytest

from recall.boundary.providers.base import (
    EmbeddingIntent,
    EmbeddingProvider,
    GenerationProvider,
)
from recall.boundary.storage.temp_files import TempFileStorage
from recall.boundary.store.memory_document_store import InMemoryDocumentStore
from recall.core.document_processing.models import ChunkDraft, Document, PageText

DIMENSION = 768


def unit_vector(position: int, dimension: int = DIMENSION) -> list[float]:
    """Vector with 1.0 at position and 0.0 elsewhere."""
    vector = [0.0] * dimension
    vector[position] = 1.0
    return vector


class FakeEmbeddingProvider(EmbeddingProvider):
    """Records calls and returns unit vectors (or a fixed response)."""

    def __init__(self, response: list[list[float]] | None = None, error: Exception | None = None):
        self.calls: list[tuple[list[str], EmbeddingIntent]] = []
        self._response = response
        self._error = error

    async def embed(self, texts: list[str], intent: EmbeddingIntent) -> list[list[float]]:
        self.calls.append((list(texts), intent))
        if self._error is not None:
            raise self._error
        if self._response is not None:
            return self._response
        return [unit_vector(i % DIMENSION) for i in range(len(texts))]


class FakeGenerationProvider(GenerationProvider):
    """Records prompts and returns a fixed text."""

    def __init__(self, text: str = "generated", error: Exception | None = None):
        self.prompts: list[str] = []
        self._text = text
        self._error = error

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self._error is not None:
            raise self._error
        return self._text


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from recall.boundary.db.base import Base
    import recall.boundary.db.models  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def memory_store() -> InMemoryDocumentStore:
    """Provide an empty in-memory document store."""
    return InMemoryDocumentStore()


@pytest.fixture
def fake_embedding_provider() -> FakeEmbeddingProvider:
    return FakeEmbeddingProvider()


@pytest.fixture
def fake_generation_provider() -> FakeGenerationProvider:
    return FakeGenerationProvider()


@pytest.fixture
def temp_storage(tmp_path: Path) -> TempFileStorage:
    """Provide temp upload storage rooted in a pytest tmp dir."""
    return TempFileStorage(tmp_path / "uploads")


@pytest.fixture
def sample_document() -> Document:
    """Provide a PENDING document."""
    return Document(filename="report.pdf")


@pytest.fixture
def document_id() -> uuid.UUID:
    """Generate a test document ID."""
    return uuid.uuid4()


@pytest.fixture
def two_pages() -> list[PageText]:
    """Provide two short pages of text."""
    return [
        PageText(page_number=1, text="The first page talks about rivers. Rivers flow to the sea."),
        PageText(page_number=2, text="The second page talks about mountains. Mountains are tall."),
    ]


@pytest.fixture
def two_drafts() -> list[ChunkDraft]:
    """Provide two chunk drafts, one per page."""
    return [
        ChunkDraft(text="The first page talks about rivers.", chunk_index=0, page_start=1, page_end=1),
        ChunkDraft(text="The second page talks about mountains.", chunk_index=1, page_start=2, page_end=2),
    ]


@pytest.fixture
def embedding_provider_factory():
    """Provide the FakeEmbeddingProvider class for tests needing custom responses."""
    return FakeEmbeddingProvider


@pytest.fixture
def generation_provider_factory():
    """Provide the FakeGenerationProvider class for tests needing custom responses."""
    return FakeGenerationProvider
