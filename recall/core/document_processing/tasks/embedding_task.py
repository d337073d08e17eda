"""
Embedding task.

Embeds chunk drafts in sequential batches and validates every batch
before any result is returned.

Dependencies: recall.boundary.providers
System role: Final stage of document processing, and query embedding for chat
"""

import logging

from recall.boundary.providers.base import EmbeddingIntent, EmbeddingProvider
from recall.core.document_processing.models import ChunkDraft, EmbeddedChunk
from recall.core.exceptions import EmbeddingError

logger = logging.getLogger(__name__)


class EmbeddingTask:
    """Generate embeddings for chunks and questions."""

    def __init__(
        self,
        provider: EmbeddingProvider,
        dimension: int = 768,
        batch_size: int = 1000,
    ) -> None:
        """
        Args:
            provider: Embedding backend
            dimension: Required vector length
            batch_size: Maximum texts per provider call
        """
        self._provider = provider
        self._dimension = dimension
        self._batch_size = batch_size

    def _validate(self, expected: int, embeddings: list[list[float]]) -> None:
        if len(embeddings) != expected:
            raise ValueError(f"Expected {expected} embeddings, got {len(embeddings)}")
        for i, vector in enumerate(embeddings):
            if len(vector) != self._dimension:
                raise ValueError(
                    f"Embedding at index {i} has incorrect dimension: "
                    f"{len(vector)}, expected {self._dimension}"
                )

    async def _embed_batch(self, batch: list[ChunkDraft]) -> list[EmbeddedChunk]:
        try:
            embeddings = await self._provider.embed(
                [draft.text for draft in batch], EmbeddingIntent.DOCUMENT
            )
            self._validate(len(batch), embeddings)
        except Exception as e:
            raise EmbeddingError(
                f"Failed to embed batch of {len(batch)} chunks: {e}"
            ) from e
        return [
            EmbeddedChunk(draft=draft, embedding=list(vector))
            for draft, vector in zip(batch, embeddings)
        ]

    async def embed_chunks(self, drafts: list[ChunkDraft]) -> list[EmbeddedChunk]:
        """
        Embed drafts in input order.

        Args:
            drafts: Chunk drafts to embed

        Returns:
            list[EmbeddedChunk]: One per draft, same order

        Raises:
            EmbeddingError: On the first failed or invalid batch
        """
        if not drafts:
            return []

        embedded: list[EmbeddedChunk] = []
        for start in range(0, len(drafts), self._batch_size):
            batch = drafts[start:start + self._batch_size]
            embedded.extend(await self._embed_batch(batch))
            logger.debug(
                f"{__name__}:embed_chunks - Embedded batch",
                extra={"batch_start": start, "batch_size": len(batch)},
            )
        return embedded

    async def embed_query(self, text: str) -> list[float]:
        """
        Embed a question for retrieval.

        Raises:
            EmbeddingError: Provider failure, no vector, or wrong dimension
        """
        try:
            embeddings = await self._provider.embed([text], EmbeddingIntent.QUERY)
        except Exception as e:
            raise EmbeddingError(f"Failed to embed question: {e}") from e

        if not embeddings:
            raise EmbeddingError("Failed to embed question: No embedding returned for question")
        vector = embeddings[0]
        if len(vector) != self._dimension:
            raise EmbeddingError(
                f"Failed to embed question: Embedding has incorrect dimension: "
                f"{len(vector)}, expected {self._dimension}"
            )
        return list(vector)
