"""
PostgreSQL document store.

Each operation runs in its own AsyncSession and transaction. Similarity
search is pushed into pgvector (`embedding <=> query ORDER BY ... LIMIT k`).

Dependencies: sqlalchemy, pgvector, recall.boundary.db
System role: Production document store
"""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from recall.boundary.db.CRUD.chunk_crud import chunk_crud
from recall.boundary.db.CRUD.document_crud import document_crud
from recall.boundary.db.models.chunk_model import ChunkModel
from recall.boundary.db.models.document_model import DocumentModel
from recall.boundary.store.document_store import DocumentStore
from recall.core.document_processing.models import Chunk, Document
from recall.core.exceptions import DocumentNotFoundError, DocumentStoreError

logger = logging.getLogger(__name__)


def _to_document(model: DocumentModel) -> Document:
    return Document(
        id=model.id,
        filename=model.filename,
        status=model.status,
        total_chunks=model.total_chunks,
        summary=model.summary,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def _to_chunk(model: ChunkModel) -> Chunk:
    return Chunk(
        id=model.id,
        document_id=model.document_id,
        text=model.text,
        chunk_index=model.chunk_index,
        page_start=model.page_start,
        page_end=model.page_end,
        embedding=[float(value) for value in model.embedding],
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class SqlDocumentStore(DocumentStore):
    """Document store backed by SQLAlchemy async sessions."""

    def __init__(
        self,
        session_factory: async_sessionmaker,
        engine: AsyncEngine | None = None,
    ) -> None:
        """
        Args:
            session_factory: Factory producing AsyncSessions
            engine: Engine disposed by close(), when the store owns it
        """
        self._session_factory = session_factory
        self._engine = engine

    async def create_document(self, document: Document) -> Document:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    model = await document_crud.create(
                        session,
                        id=document.id,
                        filename=document.filename,
                        status=document.status,
                        total_chunks=document.total_chunks,
                        summary=document.summary,
                        created_at=document.created_at,
                        updated_at=document.updated_at,
                    )
                return _to_document(model)
        except SQLAlchemyError as e:
            raise DocumentStoreError(
                f"Failed to create document: {e}", operation="create_document"
            ) from e

    async def get_document(self, document_id: UUID) -> Document | None:
        try:
            async with self._session_factory() as session:
                model = await document_crud.get_by_id(session, document_id)
                return _to_document(model) if model else None
        except SQLAlchemyError as e:
            raise DocumentStoreError(
                f"Failed to load document: {e}", operation="get_document"
            ) from e

    async def list_documents(self) -> list[Document]:
        try:
            async with self._session_factory() as session:
                models = await document_crud.list_recent(session)
                return [_to_document(model) for model in models]
        except SQLAlchemyError as e:
            raise DocumentStoreError(
                f"Failed to list documents: {e}", operation="list_documents"
            ) from e

    async def save_document(self, document: Document) -> Document:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    model = await document_crud.update_by_id(
                        session,
                        document.id,
                        status=document.status,
                        summary=document.summary,
                        total_chunks=document.total_chunks,
                    )
                    if model is None:
                        raise DocumentNotFoundError(str(document.id))
                return _to_document(model)
        except SQLAlchemyError as e:
            raise DocumentStoreError(
                f"Failed to save document: {e}", operation="save_document"
            ) from e

    async def save_chunks(self, chunks: list[Chunk]) -> None:
        if not chunks:
            return
        rows = [
            {
                "id": chunk.id,
                "document_id": chunk.document_id,
                "text": chunk.text,
                "chunk_index": chunk.chunk_index,
                "page_start": chunk.page_start,
                "page_end": chunk.page_end,
                "embedding": chunk.embedding,
            }
            for chunk in chunks
        ]
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    await chunk_crud.bulk_create(session, rows)
        except SQLAlchemyError as e:
            raise DocumentStoreError(
                f"Failed to save {len(chunks)} chunks: {e}", operation="save_chunks"
            ) from e
        logger.debug(f"{__name__}:save_chunks - Saved {len(chunks)} chunks")

    async def list_chunks(self, document_id: UUID) -> list[Chunk]:
        try:
            async with self._session_factory() as session:
                models = await chunk_crud.get_by_document_id(session, document_id)
                return [_to_chunk(model) for model in models]
        except SQLAlchemyError as e:
            raise DocumentStoreError(
                f"Failed to list chunks: {e}", operation="list_chunks"
            ) from e

    async def find_similar_chunks(
        self,
        document_id: UUID,
        query_embedding: list[float],
        k: int,
    ) -> list[Chunk]:
        try:
            async with self._session_factory() as session:
                models = await chunk_crud.find_similar(
                    session, document_id, query_embedding, k
                )
                return [_to_chunk(model) for model in models]
        except SQLAlchemyError as e:
            raise DocumentStoreError(
                f"Failed to search chunks: {e}", operation="find_similar_chunks"
            ) from e

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
