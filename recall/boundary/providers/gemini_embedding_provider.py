"""
Gemini embedding provider.

Dependencies: google-genai
System role: EmbeddingProvider backed by the Gen AI embed_content API
"""

import asyncio
import logging

from google.genai import types

from recall.boundary.providers.base import EmbeddingIntent, EmbeddingProvider
from recall.boundary.providers.genai_client import GenAIClient
from recall.core.exceptions import EmbeddingProviderError

logger = logging.getLogger(__name__)

# Texts per embed_content call. Vertex AI also caps a request at 20k tokens,
# about 20 chunks of 680 words.
GEMINI_API_MAX_TEXTS_PER_REQUEST = 100
VERTEX_MAX_TEXTS_PER_REQUEST = 20


class GeminiEmbeddingProvider(EmbeddingProvider):
    """
    Embeds texts with a Gemini / Vertex embedding model.

    A call with more texts than one request accepts is sent as sequential
    sub-requests; vectors come back in input order.
    """

    def __init__(self, client: GenAIClient) -> None:
        settings = client.settings
        self._client = client
        self._model = settings.embedding_model
        self._dimension = settings.embedding_dimension
        self._timeout = settings.request_timeout_seconds
        self._request_size = settings.embedding_request_size or (
            VERTEX_MAX_TEXTS_PER_REQUEST
            if settings.use_vertexai
            else GEMINI_API_MAX_TEXTS_PER_REQUEST
        )

    async def embed(self, texts: list[str], intent: EmbeddingIntent) -> list[list[float]]:
        config = types.EmbedContentConfig(
            task_type=intent.value,
            output_dimensionality=self._dimension,
        )
        vectors: list[list[float]] = []
        for start in range(0, len(texts), self._request_size):
            batch = texts[start:start + self._request_size]
            vectors.extend(await self._embed_request(batch, config))
        return vectors

    async def _embed_request(
        self, texts: list[str], config: types.EmbedContentConfig
    ) -> list[list[float]]:
        try:
            response = await asyncio.wait_for(
                self._client.client.aio.models.embed_content(
                    model=self._model,
                    contents=texts,
                    config=config,
                ),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as e:
            raise EmbeddingProviderError(
                f"Embedding request timed out after {self._timeout}s",
                details={"model": self._model, "count": len(texts)},
            ) from e
        except Exception as e:
            logger.error(
                f"{__name__}:embed - {type(e).__name__}: {e}",
                extra={"model": self._model, "count": len(texts)},
            )
            raise EmbeddingProviderError(
                f"Embedding request failed: {e}",
                details={"model": self._model, "count": len(texts)},
            ) from e

        return [list(embedding.values or []) for embedding in response.embeddings or []]
