"""
Chat service orchestrator.

Answers a question about one completed document:
embed question -> retrieve nearest chunks -> generate grounded answer.

Dependencies: recall.core, recall.boundary.store
System role: Chat orchestration
"""

import logging
from uuid import UUID

from recall.boundary.store.document_store import DocumentStore
from recall.core.answering.answerer import Answerer
from recall.core.document_processing.models import DocumentStatus
from recall.core.document_processing.tasks.embedding_task import EmbeddingTask
from recall.core.exceptions import (
    DocumentNotFoundError,
    DocumentNotReadyError,
    ValidationError,
)
from recall.core.retrieval.retriever import Retriever
from recall.models.chat import ChatResponse, ChunkSource

logger = logging.getLogger(__name__)


class ChatService:
    """Grounded question answering over a single document."""

    def __init__(
        self,
        store: DocumentStore,
        embedding_task: EmbeddingTask,
        retriever: Retriever,
        answerer: Answerer,
        max_question_length: int = 1000,
        top_k: int = 5,
    ) -> None:
        self._store = store
        self._embedding_task = embedding_task
        self._retriever = retriever
        self._answerer = answerer
        self._max_question_length = max_question_length
        self._top_k = top_k

    def validate_question(self, question: str) -> None:
        """
        Raises:
            ValidationError: Blank question, or longer than the limit
        """
        if not question or not question.strip():
            raise ValidationError("Question must not be empty", field="question")
        if len(question) > self._max_question_length:
            raise ValidationError(
                f"Question exceeds maximum length of {self._max_question_length} characters",
                field="question",
                details={"length": len(question)},
            )

    async def chat(self, document_id: UUID, question: str) -> ChatResponse:
        """
        Answer a question about a document.

        Args:
            document_id: Document to ask about
            question: User question

        Returns:
            ChatResponse: Answer and the chunks it used

        Raises:
            ValidationError: Question rejected (before any lookup)
            DocumentNotFoundError: Unknown document
            DocumentNotReadyError: Document is not COMPLETED
            EmbeddingError, GenerationProviderError, NoResponseGeneratedError:
                Provider failures
        """
        self.validate_question(question)

        document = await self._store.get_document(document_id)
        if document is None:
            raise DocumentNotFoundError(str(document_id))
        if document.status != DocumentStatus.COMPLETED:
            raise DocumentNotReadyError(str(document_id), document.status.value)

        query_embedding = await self._embedding_task.embed_query(question)
        chunks = await self._retriever.find_similar(document_id, query_embedding, self._top_k)
        answer = await self._answerer.answer(question, [chunk.text for chunk in chunks])

        logger.info(
            f"{__name__}:chat - Answered question",
            extra={
                "document_id": str(document_id),
                "question_len": len(question),
                "chunk_count": len(chunks),
            },
        )
        return ChatResponse(
            answer=answer,
            sources=[ChunkSource.from_chunk(chunk) for chunk in chunks],
        )
