"""
Provider interfaces.

Dependencies: abc, enum
System role: Contracts for embedding and text generation backends
"""

import enum
from abc import ABC, abstractmethod


class EmbeddingIntent(str, enum.Enum):
    """What an embedding will be used for."""

    DOCUMENT = "RETRIEVAL_DOCUMENT"
    QUERY = "RETRIEVAL_QUERY"


class EmbeddingProvider(ABC):
    """Turns texts into vectors."""

    @abstractmethod
    async def embed(self, texts: list[str], intent: EmbeddingIntent) -> list[list[float]]:
        """
        Embed texts, preserving order.

        Args:
            texts: Texts to embed
            intent: Document indexing or query lookup

        Returns:
            One vector per returned embedding (callers validate the count)

        Raises:
            EmbeddingProviderError: On transport, API or timeout failures
        """


class GenerationProvider(ABC):
    """Generates text from a prompt."""

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """
        Generate a completion for the prompt.

        Raises:
            NoResponseGeneratedError: When the model returns no usable text
            GenerationProviderError: On transport, API or timeout failures
        """
