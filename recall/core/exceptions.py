"""
Exception hierarchy for Recall.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class RecallException(Exception):
    """Base exception for all Recall application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(RecallException):
    """Raised when request input is rejected before any state is touched."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class DocumentNotFoundError(RecallException):
    """Raised when a document cannot be found."""

    def __init__(self, document_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["document_id"] = document_id
        super().__init__(f"Document not found: {document_id}", details)


class DocumentNotReadyError(RecallException):
    """Raised when chatting with a document that has not finished processing."""

    def __init__(
        self,
        document_id: str,
        status: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details.update({"document_id": document_id, "status": status})
        super().__init__(
            f"Document is not ready for chat (status: {status}). "
            "Wait until processing has completed.",
            details,
        )


class InvalidStatusTransitionError(RecallException):
    """Raised when a document status change breaks the lifecycle order."""

    def __init__(
        self,
        current: str,
        target: str,
        document_id: str | None = None,
    ) -> None:
        details: dict[str, Any] = {"current": current, "target": target}
        if document_id:
            details["document_id"] = document_id
        super().__init__(
            f"Invalid status transition: {current} -> {target}", details
        )


class ExternalProviderError(RecallException):
    """Base exception for failures of extraction and model providers."""

    def __init__(
        self,
        message: str,
        document_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize provider error.

        Args:
            message: Error message
            document_id: ID of the document being processed, if any
            details: Additional context
        """
        details = details or {}
        if document_id:
            details["document_id"] = document_id
        super().__init__(message, details)


class ExtractionError(ExternalProviderError):
    """Raised when text cannot be extracted from an uploaded PDF."""


class SourceFileNotFoundError(ExtractionError):
    """Raised when the uploaded file for a document is missing."""

    def __init__(self, file_path: str, document_id: str | None = None) -> None:
        super().__init__(
            f"PDF file not found: {file_path}",
            document_id=document_id,
            details={"file_path": file_path},
        )


class PdfExtractionError(ExtractionError):
    """Raised when the PDF parser fails."""


class EmbeddingProviderError(ExternalProviderError):
    """Raised when the embedding API call fails or times out."""


class EmbeddingError(ExternalProviderError):
    """Raised when embedding a batch or a question fails or returns bad vectors."""


class GenerationProviderError(ExternalProviderError):
    """Raised when the generation API call fails or times out."""


class NoResponseGeneratedError(ExternalProviderError):
    """Raised when the generative model returns no usable text."""

    def __init__(self, message: str = "No response generated from Gemini") -> None:
        super().__init__(message)


class RetrievalError(RecallException):
    """Raised when similarity retrieval fails."""

    def __init__(
        self,
        message: str,
        document_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if document_id:
            details["document_id"] = document_id
        super().__init__(message, details)


class DocumentStoreError(RecallException):
    """Raised when a document store operation fails."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
