"""
In-memory document store.

Keeps documents and chunks in process memory and ranks chunks with numpy
cosine distance. Intended for local development and tests.

Dependencies: numpy
System role: Development document store
"""

from uuid import UUID

import numpy as np

from recall.boundary.store.document_store import DocumentStore
from recall.core.document_processing.models import Chunk, Document
from recall.core.exceptions import DocumentNotFoundError


def cosine_distances(matrix: np.ndarray, query: np.ndarray) -> np.ndarray:
    """
    Cosine distance of each row of matrix to query.

    Rows (or a query) with zero norm get distance 1.0.
    """
    norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(query)
    dots = matrix @ query
    distances = np.ones(len(matrix), dtype=np.float64)
    nonzero = norms > 0
    distances[nonzero] = 1.0 - dots[nonzero] / norms[nonzero]
    return distances


class InMemoryDocumentStore(DocumentStore):
    """Document store held in dictionaries."""

    def __init__(self) -> None:
        self._documents: dict[UUID, Document] = {}
        self._chunks: dict[UUID, list[Chunk]] = {}

    async def create_document(self, document: Document) -> Document:
        self._documents[document.id] = document.model_copy(deep=True)
        return document.model_copy(deep=True)

    async def get_document(self, document_id: UUID) -> Document | None:
        document = self._documents.get(document_id)
        return document.model_copy(deep=True) if document else None

    async def list_documents(self) -> list[Document]:
        documents = sorted(
            self._documents.values(), key=lambda d: d.created_at, reverse=True
        )
        return [document.model_copy(deep=True) for document in documents]

    async def save_document(self, document: Document) -> Document:
        if document.id not in self._documents:
            raise DocumentNotFoundError(str(document.id))
        self._documents[document.id] = document.model_copy(deep=True)
        return document.model_copy(deep=True)

    async def save_chunks(self, chunks: list[Chunk]) -> None:
        for chunk in chunks:
            self._chunks.setdefault(chunk.document_id, []).append(
                chunk.model_copy(deep=True)
            )

    async def list_chunks(self, document_id: UUID) -> list[Chunk]:
        chunks = sorted(self._chunks.get(document_id, []), key=lambda c: c.chunk_index)
        return [chunk.model_copy(deep=True) for chunk in chunks]

    async def find_similar_chunks(
        self,
        document_id: UUID,
        query_embedding: list[float],
        k: int,
    ) -> list[Chunk]:
        chunks = await self.list_chunks(document_id)
        if not chunks:
            return []

        matrix = np.asarray([chunk.embedding for chunk in chunks], dtype=np.float64)
        query = np.asarray(query_embedding, dtype=np.float64)
        distances = cosine_distances(matrix, query)

        # chunks are already in chunk_index order and the sort is stable
        order = np.argsort(distances, kind="stable")[:k]
        return [chunks[i] for i in order]
