"""
Model providers.

Abstract embedding and generation interfaces with Google Gen AI
(Gemini) implementations sharing one GenAIClient.
"""

from recall.boundary.providers.base import (
    EmbeddingIntent,
    EmbeddingProvider,
    GenerationProvider,
)
from recall.boundary.providers.gemini_embedding_provider import GeminiEmbeddingProvider
from recall.boundary.providers.gemini_generation_provider import GeminiGenerationProvider
from recall.boundary.providers.genai_client import GenAIClient

__all__ = [
    "EmbeddingIntent",
    "EmbeddingProvider",
    "GenerationProvider",
    "GenAIClient",
    "GeminiEmbeddingProvider",
    "GeminiGenerationProvider",
]
