"""
Shared settings base.

Every settings class reads `.env` and ignores unknown keys, so one file can
hold the POSTGRES_, CELERY_, GENAI_ and DOC_PROCESSING_ variables together.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Settings read from the process environment and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class AppSettings(BaseSettings):
    """Process-wide options shared by the API and the worker."""

    debug: bool = Field(
        default=False,
        description="Return tracebacks from the API on unhandled errors",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level for API and worker (DEBUG, INFO, WARNING, ERROR)",
    )
    api_host: str = Field(default="0.0.0.0", description="Bind address of the API server")
    api_port: int = Field(default=8000, description="Port of the API server")
