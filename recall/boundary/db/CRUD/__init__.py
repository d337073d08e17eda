"""
CRUD operations for ORM models.
"""

from recall.boundary.db.CRUD.base_crud import BaseCRUD
from recall.boundary.db.CRUD.chunk_crud import ChunkCRUD, chunk_crud
from recall.boundary.db.CRUD.document_crud import DocumentCRUD, document_crud

__all__ = ["BaseCRUD", "DocumentCRUD", "document_crud", "ChunkCRUD", "chunk_crud"]
