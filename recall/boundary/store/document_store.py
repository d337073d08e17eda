"""
Document store interface.

Dependencies: abc
System role: Persistence contract used by services, processor and retriever
"""

from abc import ABC, abstractmethod
from uuid import UUID

from recall.core.document_processing.models import Chunk, Document


class DocumentStore(ABC):
    """Persistence for documents and their embedded chunks."""

    @abstractmethod
    async def create_document(self, document: Document) -> Document:
        """Insert a new document and return it as stored."""

    @abstractmethod
    async def get_document(self, document_id: UUID) -> Document | None:
        """Return the document, or None when it does not exist."""

    @abstractmethod
    async def list_documents(self) -> list[Document]:
        """Return all documents, newest first."""

    @abstractmethod
    async def save_document(self, document: Document) -> Document:
        """
        Persist status, summary and chunk count of an existing document.

        Raises:
            DocumentNotFoundError: If the document does not exist
        """

    @abstractmethod
    async def save_chunks(self, chunks: list[Chunk]) -> None:
        """Insert chunks in a single transaction."""

    @abstractmethod
    async def list_chunks(self, document_id: UUID) -> list[Chunk]:
        """Return a document's chunks ordered by chunk index."""

    @abstractmethod
    async def find_similar_chunks(
        self,
        document_id: UUID,
        query_embedding: list[float],
        k: int,
    ) -> list[Chunk]:
        """Return up to k chunks of the document, nearest first by cosine distance."""

    async def close(self) -> None:
        """Release connections held by the store."""
