"""
Gemini generation provider.

Dependencies: google-genai
System role: GenerationProvider backed by the Gen AI generate_content API
"""

import asyncio
import logging

from recall.boundary.providers.base import GenerationProvider
from recall.boundary.providers.genai_client import GenAIClient
from recall.core.exceptions import GenerationProviderError, NoResponseGeneratedError

logger = logging.getLogger(__name__)


class GeminiGenerationProvider(GenerationProvider):
    """Generates text with a Gemini model."""

    def __init__(self, client: GenAIClient) -> None:
        self._client = client
        self._model = client.settings.generation_model
        self._timeout = client.settings.request_timeout_seconds

    async def generate(self, prompt: str) -> str:
        try:
            response = await asyncio.wait_for(
                self._client.client.aio.models.generate_content(
                    model=self._model,
                    contents=prompt,
                ),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as e:
            raise GenerationProviderError(
                f"Generation request timed out after {self._timeout}s",
                details={"model": self._model},
            ) from e
        except Exception as e:
            logger.error(
                f"{__name__}:generate - {type(e).__name__}: {e}",
                extra={"model": self._model, "prompt_len": len(prompt)},
            )
            raise GenerationProviderError(
                f"Generation request failed: {e}",
                details={"model": self._model},
            ) from e

        return extract_text(response)


def extract_text(response) -> str:
    """
    Text of the first part of the first candidate.

    Raises:
        NoResponseGeneratedError: No candidate, no content, or no text part
    """
    candidates = response.candidates or []
    if not candidates:
        raise NoResponseGeneratedError()

    content = candidates[0].content
    if content is None or not content.parts:
        raise NoResponseGeneratedError()

    text = content.parts[0].text
    if text is None:
        raise NoResponseGeneratedError()
    return text
