"""
Database boundary: ORM base, models, CRUD and connection management.
"""

from recall.boundary.db.base import Base, TimestampMixin, UUIDMixin
from recall.boundary.db.connection import (
    get_async_engine,
    get_async_session_factory,
)

__all__ = [
    "Base",
    "UUIDMixin",
    "TimestampMixin",
    "get_async_engine",
    "get_async_session_factory",
]
