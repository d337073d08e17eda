"""
Application services.

Exports: DocumentService, ChatService
"""

from recall.application.services.chat_service import ChatService
from recall.application.services.document_service import DocumentService

__all__ = ["DocumentService", "ChatService"]
