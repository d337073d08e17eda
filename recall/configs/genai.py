"""
Google Gen AI configuration settings.

Embedding and generation model settings for the Gemini client.
Supports either a Gemini API key or Vertex AI project credentials.

Dependencies: pydantic, pydantic_settings
System role: Model provider configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GenAISettings(BaseSettings):
    """Gemini embedding and generation configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GENAI_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        description="Gemini API key (ignored when use_vertexai is true)",
    )
    use_vertexai: bool = Field(
        default=False,
        description="Route requests through Vertex AI instead of the Gemini API",
    )
    project_id: str | None = Field(default=None, description="Vertex AI project id")
    location: str = Field(default="us-central1", description="Vertex AI location")

    embedding_model: str = Field(
        default="text-embedding-005",
        description="Embedding model id",
    )
    embedding_dimension: int = Field(
        default=768,
        description="Embedding vector dimension (must match the chunks.embedding column)",
    )
    embedding_batch_size: int = Field(
        default=1000,
        description="Texts the processor hands the embedder per call",
    )
    embedding_request_size: int | None = Field(
        default=None,
        description=(
            "Maximum texts per embed_content request; defaults to the API limit "
            "(100 for the Gemini API, 20 chunks for Vertex AI's 20k token cap)"
        ),
    )
    generation_model: str = Field(
        default="gemini-2.5-flash",
        description="Generative model id for summaries and answers",
    )
    request_timeout_seconds: float = Field(
        default=120.0,
        description="Timeout applied to every embedding and generation call",
    )
