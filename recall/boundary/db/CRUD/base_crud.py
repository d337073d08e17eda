"""
Generic CRUD helpers for ORM models.

Every method works inside the caller's session and only flushes; the caller
owns the transaction (see SqlDocumentStore).

Dependencies: sqlalchemy
System role: Foundation for the document and chunk CRUD classes
"""

from typing import Generic, TypeVar
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from recall.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Create, fetch and update rows of one model by UUID primary key.

    Attributes:
        model: ORM class the instance operates on
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **values) -> ModelT:
        """
        Insert a row and load server-side defaults back into it.

        Args:
            session: Async database session
            **values: Column values

        Returns:
            The flushed instance, with id and timestamps populated
        """
        instance = self.model(**values)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_id(self, session: AsyncSession, id: UUID) -> ModelT | None:
        return await session.get(self.model, id)

    async def update_by_id(self, session: AsyncSession, id: UUID, **values) -> ModelT | None:
        """
        Set columns on an existing row.

        Returns:
            The refreshed instance, or None when no row has this id
        """
        instance = await session.get(self.model, id)
        if instance is None:
            return None
        for column, value in values.items():
            setattr(instance, column, value)
        await session.flush()
        # picks up updated_at from onupdate
        await session.refresh(instance)
        return instance
