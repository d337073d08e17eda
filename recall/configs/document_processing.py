"""
Document processing configuration settings.

Upload limits, chunking parameters, chat limits and store selection.

Dependencies: pydantic, pydantic_settings
System role: Pipeline and request-limit configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DocumentProcessingSettings(BaseSettings):
    """Settings for the upload -> process -> chat flow."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DOC_PROCESSING_",
        case_sensitive=False,
        extra="ignore",
    )

    upload_tmp_dir: str = Field(
        default="/tmp/recall-uploads",
        description="Directory holding uploaded PDFs until processing completes",
    )
    max_upload_size_bytes: int = Field(
        default=65 * 1024 * 1024,
        description="Maximum accepted upload size (65 MB)",
    )
    allowed_content_type: str = Field(
        default="application/pdf",
        description="Only content type accepted by the upload endpoint",
    )

    # Chunking settings
    target_words_per_chunk: int = Field(
        default=680,
        description="Word count a chunk should not exceed when it can be cut",
    )
    min_chunk_words: int = Field(
        default=600,
        description="Word count a chunk must reach before it can be cut",
    )
    overlap_words: int = Field(
        default=67,
        description="Word budget of whole sentences repeated in the next chunk",
    )

    # Chat settings
    max_question_length: int = Field(
        default=1000,
        description="Maximum question length in characters",
    )
    retrieval_top_k: int = Field(
        default=5,
        description="Number of chunks retrieved per question",
    )

    store_type: str = Field(
        default="postgres",
        description="Document store: 'postgres' (pgvector) or 'memory' (local dev)",
    )
