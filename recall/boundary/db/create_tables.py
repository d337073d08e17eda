"""
Database table creation script.

Enables the pgvector extension and creates all tables defined in ORM models.

Dependencies: sqlalchemy, recall.configs
System role: Database schema initialization

Usage:
    python -m recall.boundary.db.create_tables
"""

import asyncio
import logging

from sqlalchemy import text

from recall.boundary.db.base import Base
from recall.boundary.db.connection import get_async_engine
from recall.observability import configure_logging

# Import all models to register them with Base.metadata
from recall.boundary.db.models.document_model import DocumentModel  # noqa: F401
from recall.boundary.db.models.chunk_model import ChunkModel  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables() -> None:
    """
    Create the vector extension and all tables.

    Idempotent: CREATE EXTENSION IF NOT EXISTS and CREATE TABLE IF NOT EXISTS,
    so existing tables remain unchanged.

    Raises:
        SQLAlchemyError: If the connection or DDL fails
    """
    engine = get_async_engine()
    try:
        async with engine.begin() as conn:
            await conn.execute(text("CREATE EXTENSION IF NOT EXISTS vector"))
            await conn.run_sync(Base.metadata.create_all)
    finally:
        await engine.dispose()
    logger.info("All tables created successfully.")


async def drop_all_tables() -> None:
    """
    Drop all tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.
    """
    engine = get_async_engine()
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
    finally:
        await engine.dispose()
    logger.info("All tables dropped successfully.")


if __name__ == "__main__":
    configure_logging()
    asyncio.run(create_all_tables())
