"""
Grounded question answering.

Dependencies: recall.boundary.providers, recall.core.prompts
System role: Final step of the chat flow
"""

from recall.boundary.providers.base import GenerationProvider
from recall.core.prompts import answer_question_prompt


class Answerer:
    """Answer a question from retrieved chunk texts."""

    def __init__(self, provider: GenerationProvider) -> None:
        self._provider = provider

    async def answer(self, question: str, chunk_texts: list[str]) -> str:
        """
        Ask the generation provider to answer from the excerpts.

        Args:
            question: User question
            chunk_texts: Retrieved chunk texts, nearest first (may be empty)

        Returns:
            str: Model answer

        Raises:
            NoResponseGeneratedError: When the model returns no usable text
            GenerationProviderError: On provider failures
        """
        return await self._provider.generate(answer_question_prompt(question, chunk_texts))
