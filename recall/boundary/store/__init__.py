"""
Document stores.

PostgreSQL + pgvector for deployments, in-memory for local development
and tests. Use get_document_store() to build the configured one.
"""

from recall.boundary.store.document_store import DocumentStore
from recall.boundary.store.memory_document_store import InMemoryDocumentStore
from recall.boundary.store.sql_document_store import SqlDocumentStore
from recall.boundary.store.store_factory import get_document_store

__all__ = [
    "DocumentStore",
    "SqlDocumentStore",
    "InMemoryDocumentStore",
    "get_document_store",
]
