"""
Test suite for EmbeddingTask.

Covers batching, ordering, count and dimension validation, and query
embedding failures.

System role: Verification of chunk and question embedding
"""

import pytest

from recall.boundary.providers.base import EmbeddingIntent
from recall.core.document_processing.models import ChunkDraft
from recall.core.document_processing.tasks.embedding_task import EmbeddingTask
from recall.core.exceptions import EmbeddingError, EmbeddingProviderError


def make_drafts(count: int) -> list[ChunkDraft]:
    return [
        ChunkDraft(text=f"chunk {i}.", chunk_index=i, page_start=1, page_end=1)
        for i in range(count)
    ]


class TestEmbedChunks:
    """Test suite for embed_chunks."""

    async def test_embed_chunks_should_return_empty_without_provider_call(
        self, fake_embedding_provider
    ) -> None:
        """Should return [] for no drafts and never call the provider."""
        task = EmbeddingTask(fake_embedding_provider)

        result = await task.embed_chunks([])

        assert result == []
        assert fake_embedding_provider.calls == []

    async def test_embed_chunks_should_pair_drafts_with_vectors_in_order(
        self, fake_embedding_provider
    ) -> None:
        """Should keep draft order and use the document indexing intent."""
        drafts = make_drafts(3)
        task = EmbeddingTask(fake_embedding_provider)

        result = await task.embed_chunks(drafts)

        assert [item.draft for item in result] == drafts
        assert all(len(item.embedding) == 768 for item in result)
        assert result[1].embedding[1] == 1.0
        texts, intent = fake_embedding_provider.calls[0]
        assert texts == ["chunk 0.", "chunk 1.", "chunk 2."]
        assert intent == EmbeddingIntent.DOCUMENT

    async def test_embed_chunks_should_batch_sequentially(self, fake_embedding_provider) -> None:
        """Should send at most batch_size texts per call."""
        task = EmbeddingTask(fake_embedding_provider, batch_size=2)

        result = await task.embed_chunks(make_drafts(5))

        assert len(result) == 5
        assert [len(texts) for texts, _ in fake_embedding_provider.calls] == [2, 2, 1]

    async def test_embed_chunks_should_reject_count_mismatch(
        self, embedding_provider_factory
    ) -> None:
        """Should raise EmbeddingError when fewer vectors come back than texts sent."""
        provider = embedding_provider_factory(response=[[0.0] * 768])
        task = EmbeddingTask(provider)

        with pytest.raises(EmbeddingError, match="Failed to embed batch of 2 chunks: Expected 2 embeddings, got 1"):
            await task.embed_chunks(make_drafts(2))

    async def test_embed_chunks_should_reject_wrong_dimension(
        self, embedding_provider_factory
    ) -> None:
        """Should raise EmbeddingError naming the offending index and dimension."""
        provider = embedding_provider_factory(response=[[0.0] * 768, [0.0] * 767])
        task = EmbeddingTask(provider)

        with pytest.raises(
            EmbeddingError,
            match="Embedding at index 1 has incorrect dimension: 767, expected 768",
        ):
            await task.embed_chunks(make_drafts(2))

    async def test_embed_chunks_should_wrap_provider_errors(
        self, embedding_provider_factory
    ) -> None:
        """Should wrap provider failures and keep the cause."""
        cause = EmbeddingProviderError("quota exceeded")
        task = EmbeddingTask(embedding_provider_factory(error=cause))

        with pytest.raises(EmbeddingError, match="Failed to embed batch of 1 chunks: quota exceeded") as exc_info:
            await task.embed_chunks(make_drafts(1))

        assert exc_info.value.__cause__ is cause

    async def test_embed_chunks_should_fail_whole_call_when_later_batch_fails(self) -> None:
        """Should raise without a partial result when the second batch is invalid."""

        class SecondBatchShort:
            def __init__(self) -> None:
                self.calls = 0

            async def embed(self, texts, intent):
                self.calls += 1
                if self.calls == 2:
                    return []
                return [[0.0] * 768 for _ in texts]

        provider = SecondBatchShort()
        task = EmbeddingTask(provider, batch_size=2)

        with pytest.raises(EmbeddingError, match="Expected 2 embeddings, got 0"):
            await task.embed_chunks(make_drafts(4))
        assert provider.calls == 2


class TestEmbedQuery:
    """Test suite for embed_query."""

    async def test_embed_query_should_use_query_intent(self, fake_embedding_provider) -> None:
        """Should embed one text with the query lookup intent."""
        task = EmbeddingTask(fake_embedding_provider)

        vector = await task.embed_query("What is this about?")

        assert len(vector) == 768
        assert fake_embedding_provider.calls == [(["What is this about?"], EmbeddingIntent.QUERY)]

    async def test_embed_query_should_fail_when_nothing_returned(
        self, embedding_provider_factory
    ) -> None:
        """Should raise when the provider returns no vector."""
        task = EmbeddingTask(embedding_provider_factory(response=[]))

        with pytest.raises(EmbeddingError, match="No embedding returned for question"):
            await task.embed_query("question")

    async def test_embed_query_should_fail_on_wrong_dimension(
        self, embedding_provider_factory
    ) -> None:
        """Should raise when the query vector is not 768 long."""
        task = EmbeddingTask(embedding_provider_factory(response=[[1.0, 0.0]]))

        with pytest.raises(EmbeddingError, match="incorrect dimension: 2, expected 768"):
            await task.embed_query("question")

    async def test_embed_query_should_wrap_provider_errors(
        self, embedding_provider_factory
    ) -> None:
        """Should raise 'Failed to embed question' on provider failure."""
        task = EmbeddingTask(embedding_provider_factory(error=EmbeddingProviderError("down")))

        with pytest.raises(EmbeddingError, match="Failed to embed question: down"):
            await task.embed_query("question")
