"""
Test suite for chat API endpoint.

Tests POST /api/documents/{id}/chat with FastAPI TestClient and a mocked
ChatService.

System role: Verification of chat HTTP API endpoint
"""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from recall.api.deps import get_chat_service
from recall.api.routers.chat import router
from recall.core.exceptions import (
    DocumentNotFoundError,
    DocumentNotReadyError,
    EmbeddingError,
    NoResponseGeneratedError,
    ValidationError,
)
from recall.models.chat import ChatResponse, ChunkSource


@pytest.fixture
def mock_chat_service() -> MagicMock:
    service = MagicMock()
    service.chat = AsyncMock()
    return service


@pytest.fixture
def client(mock_chat_service) -> TestClient:
    """Provide TestClient for the chat router."""
    app = FastAPI()
    app.include_router(router, prefix="/api")
    app.dependency_overrides[get_chat_service] = lambda: mock_chat_service
    return TestClient(app)


class TestChatEndpoint:
    """Test suite for POST /api/documents/{id}/chat."""

    def test_chat_should_return_answer_and_sources(self, client, mock_chat_service) -> None:
        """Should return the answer with camelCase sources."""
        # Arrange
        document_id = uuid.uuid4()
        mock_chat_service.chat.return_value = ChatResponse(
            answer="Paris.",
            sources=[ChunkSource(chunk_index=3, page_start=2, page_end=3)],
        )

        # Act
        response = client.post(
            f"/api/documents/{document_id}/chat",
            json={"question": "What is the capital of France?"},
        )

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "answer": "Paris.",
            "sources": [{"chunkIndex": 3, "pageStart": 2, "pageEnd": 3}],
        }
        mock_chat_service.chat.assert_awaited_once_with(
            document_id, "What is the capital of France?"
        )

    @pytest.mark.parametrize(
        ("error", "status_code"),
        [
            (ValidationError("Question must not be empty", field="question"), 400),
            (DocumentNotFoundError("x"), 404),
            (DocumentNotReadyError("x", "PROCESSING"), 409),
            (EmbeddingError("Failed to embed question: boom"), 502),
            (NoResponseGeneratedError(), 502),
        ],
    )
    def test_chat_should_map_errors_to_status_codes(
        self, client, mock_chat_service, error, status_code
    ) -> None:
        """Should translate service errors into HTTP status codes."""
        mock_chat_service.chat.side_effect = error

        response = client.post(f"/api/documents/{uuid.uuid4()}/chat", json={"question": "q"})

        assert response.status_code == status_code
        assert response.json()["detail"] == error.message

    def test_chat_should_reject_missing_question(self, client) -> None:
        """Should return 422 when the body has no question."""
        response = client.post(f"/api/documents/{uuid.uuid4()}/chat", json={})

        assert response.status_code == 422
