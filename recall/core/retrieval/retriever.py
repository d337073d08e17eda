"""
Chunk retriever.

Finds the chunks of one document nearest to a query embedding.

Dependencies: recall.boundary.store
System role: Retrieval step of the chat flow
"""

import logging
from uuid import UUID

from recall.boundary.store.document_store import DocumentStore
from recall.core.document_processing.models import Chunk
from recall.core.exceptions import RetrievalError

logger = logging.getLogger(__name__)


class Retriever:
    """Top-k cosine-distance retrieval within a single document."""

    def __init__(self, store: DocumentStore, dimension: int = 768) -> None:
        self._store = store
        self._dimension = dimension

    async def find_similar(
        self,
        document_id: UUID,
        query_embedding: list[float],
        k: int = 5,
    ) -> list[Chunk]:
        """
        Return up to k chunks of the document, nearest first.

        Args:
            document_id: Document to search within
            query_embedding: Query vector
            k: Maximum number of chunks

        Returns:
            list[Chunk]: Ordered by cosine distance, ties by chunk index

        Raises:
            ValueError: If k < 1
            RetrievalError: If the query vector has the wrong dimension
        """
        if k < 1:
            raise ValueError(f"k must be at least 1, got {k}")
        if len(query_embedding) != self._dimension:
            raise RetrievalError(
                f"Query embedding has incorrect dimension: "
                f"{len(query_embedding)}, expected {self._dimension}",
                document_id=str(document_id),
            )

        chunks = await self._store.find_similar_chunks(document_id, query_embedding, k)
        logger.debug(
            f"{__name__}:find_similar - Retrieved {len(chunks)} chunks",
            extra={"document_id": str(document_id), "k": k},
        )
        return chunks
