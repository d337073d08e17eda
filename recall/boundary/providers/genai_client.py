"""
Shared Google Gen AI client handle.

One GenAIClient is built per API process (service cache) and per worker
process, and closed once at shutdown.

Dependencies: google-genai, python-dotenv, recall.configs
System role: Lifecycle owner of the google.genai.Client
"""

import logging

from dotenv import load_dotenv
from google import genai

from recall.configs.genai import GenAISettings

logger = logging.getLogger(__name__)


class GenAIClient:
    """Lazily constructed google.genai.Client with explicit close()."""

    def __init__(self, settings: GenAISettings) -> None:
        self._settings = settings
        self._client: genai.Client | None = None

    @property
    def settings(self) -> GenAISettings:
        return self._settings

    @property
    def client(self) -> genai.Client:
        """
        The underlying client, created on first use.

        Without an explicit api_key the client falls back to GOOGLE_API_KEY /
        GEMINI_API_KEY, so .env is loaded into the environment first.
        """
        if self._client is None:
            load_dotenv()
            if self._settings.use_vertexai:
                logger.info(f"{__name__}:client - Creating Vertex AI client")
                self._client = genai.Client(
                    vertexai=True,
                    project=self._settings.project_id,
                    location=self._settings.location,
                )
            else:
                logger.info(f"{__name__}:client - Creating Gemini API client")
                self._client = genai.Client(api_key=self._settings.api_key)
        return self._client

    async def close(self) -> None:
        """Close sync and async transports; safe to call more than once."""
        if self._client is None:
            return
        client, self._client = self._client, None
        await client.aio.aclose()
        client.close()
        logger.info(f"{__name__}:close - Gen AI client closed")
