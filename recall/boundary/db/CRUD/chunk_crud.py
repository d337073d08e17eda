"""
Chunk CRUD operations.

Bulk insert, per-document listing and pgvector nearest-neighbour search
for ChunkModel.

Dependencies: sqlalchemy, pgvector, recall.boundary.db.models.chunk_model
System role: Chunk persistence and similarity search
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from recall.boundary.db.CRUD.base_crud import BaseCRUD
from recall.boundary.db.models.chunk_model import ChunkModel


class ChunkCRUD(BaseCRUD[ChunkModel]):
    """CRUD operations for ChunkModel."""

    def __init__(self) -> None:
        super().__init__(ChunkModel)

    async def bulk_create(
        self,
        session: AsyncSession,
        rows: list[dict],
    ) -> list[ChunkModel]:
        """
        Insert many chunks in the caller's transaction.

        Args:
            session: Async database session
            rows: ChunkModel field values, one dict per chunk

        Returns:
            Created ChunkModel instances
        """
        instances = [self.model(**row) for row in rows]
        session.add_all(instances)
        await session.flush()
        return instances

    async def get_by_document_id(
        self,
        session: AsyncSession,
        document_id: UUID,
    ) -> Sequence[ChunkModel]:
        stmt = (
            select(ChunkModel)
            .where(ChunkModel.document_id == document_id)
            .order_by(ChunkModel.chunk_index)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def find_similar(
        self,
        session: AsyncSession,
        document_id: UUID,
        query_embedding: list[float],
        limit: int,
    ) -> Sequence[ChunkModel]:
        """
        Nearest chunks of one document by cosine distance.

        Args:
            session: Async database session
            document_id: Document to search within
            query_embedding: Query vector
            limit: Maximum number of chunks to return

        Returns:
            ChunkModels ordered nearest first, ties by chunk_index
        """
        distance = ChunkModel.embedding.cosine_distance(query_embedding)
        stmt = (
            select(ChunkModel)
            .where(ChunkModel.document_id == document_id)
            .order_by(distance, ChunkModel.chunk_index)
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


chunk_crud = ChunkCRUD()
