"""
Document store factory for selecting between PostgreSQL and in-memory stores.

Depends on DOC_PROCESSING_STORE_TYPE environment variable.

Dependencies: recall.boundary.store, recall.boundary.db, recall.configs
System role: Document store instantiation and selection
"""

import logging

from recall.boundary.db.connection import get_async_engine, get_async_session_factory
from recall.boundary.store.document_store import DocumentStore
from recall.boundary.store.memory_document_store import InMemoryDocumentStore
from recall.boundary.store.sql_document_store import SqlDocumentStore
from recall.configs import get_settings

logger = logging.getLogger(__name__)


def get_document_store() -> DocumentStore:
    """
    Build the document store selected by configuration.

    Returns:
        DocumentStore: SqlDocumentStore ("postgres") or InMemoryDocumentStore ("memory")

    Raises:
        ValueError: If the configured store type is unknown
    """
    store_type = get_settings().processing.store_type.lower()

    if store_type == "postgres":
        logger.info(f"{__name__}:get_document_store - Creating PostgreSQL document store")
        engine = get_async_engine()
        return SqlDocumentStore(get_async_session_factory(engine), engine=engine)

    elif store_type == "memory":
        logger.info(
            f"{__name__}:get_document_store - Creating in-memory document store (local dev mode)"
        )
        return InMemoryDocumentStore()

    else:
        raise ValueError(
            f"Invalid DOC_PROCESSING_STORE_TYPE: {store_type}. "
            f"Must be 'postgres' or 'memory'."
        )
