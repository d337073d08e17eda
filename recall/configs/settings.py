"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from recall.configs.base import AppSettings
from recall.configs.celery_config import CelerySettings
from recall.configs.database import DatabaseSettings
from recall.configs.document_processing import DocumentProcessingSettings
from recall.configs.genai import GenAISettings


class Settings(AppSettings):
    """Unified application settings aggregating all config modules."""

    cors_origins: list[str] = Field(
        default=["http://localhost:3000"],
        description="Origins allowed to call the API (frontend dev server by default)",
    )

    # Aggregated settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    celery: CelerySettings = Field(default_factory=CelerySettings)
    genai: GenAISettings = Field(default_factory=GenAISettings)
    processing: DocumentProcessingSettings = Field(default_factory=DocumentProcessingSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from recall.configs import get_settings
        settings = get_settings()
    """
    return Settings()
