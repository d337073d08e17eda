"""
ORM models.

Importing this package registers every table with Base.metadata.
"""

from recall.boundary.db.models.chunk_model import ChunkModel
from recall.boundary.db.models.document_model import DocumentModel

__all__ = ["DocumentModel", "ChunkModel"]
