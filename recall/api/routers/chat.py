"""
Chat API endpoints.

Routes: POST /documents/{id}/chat

Dependencies: recall.application.services, recall.models
System role: Chat HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from recall.api.deps import get_chat_service
from recall.application.services.chat_service import ChatService
from recall.core.exceptions import (
    DocumentNotFoundError,
    DocumentNotReadyError,
    ExternalProviderError,
    ValidationError,
)
from recall.models.chat import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["chat"])


@router.post("/{document_id}/chat", response_model=ChatResponse)
async def chat(
    document_id: UUID,
    request: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    """
    Ask a question about a processed document.

    Raises:
        HTTPException(400): Blank question or longer than the limit
        HTTPException(404): Document not found
        HTTPException(409): Document has not finished processing
        HTTPException(502): Embedding or generation provider failed
    """
    try:
        return await chat_service.chat(document_id, request.question)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except DocumentNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except DocumentNotReadyError as e:
        raise HTTPException(status_code=409, detail=e.message)
    except ExternalProviderError as e:
        logger.error(
            "Chat provider failure",
            extra={
                "document_id": str(document_id),
                "error_type": type(e).__name__,
                "error": str(e),
            },
        )
        raise HTTPException(status_code=502, detail=e.message)
