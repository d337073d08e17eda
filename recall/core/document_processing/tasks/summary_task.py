"""
Document summary task.

Samples chunk drafts from the beginning, middle and end of a document
and asks the generation provider for a short plain-language summary.

Dependencies: recall.boundary.providers, recall.core.prompts
System role: Third stage of document processing
"""

from recall.boundary.providers.base import GenerationProvider
from recall.core.document_processing.models import ChunkDraft
from recall.core.document_processing.models.document import SUMMARY_MAX_LENGTH
from recall.core.prompts import document_summary_prompt

SAMPLE_ALL_THRESHOLD = 15
EDGE_SAMPLE_SIZE = 5
MIDDLE_SAMPLE_SIZE = 5


def sample_drafts(drafts: list[ChunkDraft]) -> list[ChunkDraft]:
    """
    Pick the drafts a summary is written from.

    Up to 15 drafts are used whole. Longer documents contribute their first
    five, a window of up to five around the middle, and their last five.
    """
    n = len(drafts)
    if n <= SAMPLE_ALL_THRESHOLD:
        return list(drafts)

    middle_start = max(EDGE_SAMPLE_SIZE, n // 2 - 2)
    middle_end = min(n - EDGE_SAMPLE_SIZE, middle_start + MIDDLE_SAMPLE_SIZE)
    return (
        drafts[:EDGE_SAMPLE_SIZE]
        + drafts[middle_start:middle_end]
        + drafts[-EDGE_SAMPLE_SIZE:]
    )


class SummaryTask:
    """Summarize a document from its chunk drafts."""

    def __init__(self, provider: GenerationProvider) -> None:
        self._provider = provider

    async def summarize(self, drafts: list[ChunkDraft]) -> str:
        """
        Generate a summary of at most 500 characters.

        Raises:
            NoResponseGeneratedError: When the model returns no usable text
            GenerationProviderError: On provider failures
        """
        content = " ".join(draft.text for draft in sample_drafts(drafts))
        summary = await self._provider.generate(document_summary_prompt(content))
        return summary[:SUMMARY_MAX_LENGTH]
