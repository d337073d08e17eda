"""
Document CRUD operations.

Provides Create, Read, Update, Delete operations for DocumentModel
with newest-first listing. Status changes are written through
SqlDocumentStore.save_document.

Dependencies: sqlalchemy, recall.boundary.db.models.document_model
System role: Document persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from recall.boundary.db.CRUD.base_crud import BaseCRUD
from recall.boundary.db.models.document_model import DocumentModel


class DocumentCRUD(BaseCRUD[DocumentModel]):
    """
    CRUD operations for DocumentModel.

    Extends BaseCRUD with ordered listing.
    """

    def __init__(self) -> None:
        super().__init__(DocumentModel)

    async def list_recent(
        self,
        session: AsyncSession,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[DocumentModel]:
        """
        Retrieve documents, newest first.

        Args:
            session: Async database session
            limit: Maximum number of documents to return
            offset: Number of documents to skip

        Returns:
            Sequence of DocumentModels ordered by created_at descending
        """
        stmt = (
            select(DocumentModel)
            .order_by(DocumentModel.created_at.desc())
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()


document_crud = DocumentCRUD()
