"""
Document API endpoints.

Routes: POST /documents/upload, GET /documents, GET /documents/{id},
GET /documents/{id}/status

Dependencies: recall.application.services, recall.models
System role: Document HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from recall.api.deps import get_document_service
from recall.application.services.document_service import DocumentService
from recall.core.exceptions import DocumentNotFoundError, ValidationError
from recall.models.document import (
    DocumentResponse,
    DocumentStatusResponse,
    UploadResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["documents"])


@router.post("/upload", response_model=UploadResponse)
async def upload_document(
    file: UploadFile = File(...),
    document_service: DocumentService = Depends(get_document_service),
) -> UploadResponse:
    """
    Upload a PDF for processing.

    Stores the file, creates a PENDING document and queues it for the worker.
    Poll GET /documents/{id}/status for progress.

    Raises:
        HTTPException(400): Not a PDF, or larger than the upload limit
        HTTPException(500): Storing or queueing failed
    """
    logger.info(
        "Document upload request received",
        extra={"upload_filename": file.filename, "content_type": file.content_type},
    )
    # Reject on declared size before reading the body when the client sent one
    if file.size is not None:
        try:
            document_service.validate_upload(file.content_type, file.size)
        except ValidationError as e:
            raise HTTPException(status_code=400, detail=e.message)

    try:
        content = await file.read()
        return await document_service.upload_document(
            filename=file.filename,
            content_type=file.content_type,
            content=content,
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except Exception as e:
        logger.exception(
            "Document upload failed",
            extra={"upload_filename": file.filename, "error": str(e)},
        )
        raise HTTPException(status_code=500, detail=f"Failed to upload document: {e}")
    finally:
        await file.close()


@router.get("", response_model=list[DocumentResponse])
async def list_documents(
    document_service: DocumentService = Depends(get_document_service),
) -> list[DocumentResponse]:
    """List all documents, newest first."""
    documents = await document_service.list_documents()
    return [DocumentResponse.from_document(document) for document in documents]


@router.get("/{document_id}", response_model=DocumentResponse)
async def get_document(
    document_id: UUID,
    document_service: DocumentService = Depends(get_document_service),
) -> DocumentResponse:
    """
    Get a document with its summary.

    Raises:
        HTTPException(404): Document not found
    """
    try:
        document = await document_service.get_document(document_id)
    except DocumentNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return DocumentResponse.from_document(document)


@router.get("/{document_id}/status", response_model=DocumentStatusResponse)
async def get_document_status(
    document_id: UUID,
    document_service: DocumentService = Depends(get_document_service),
) -> DocumentStatusResponse:
    """
    Get a document's processing status.

    Raises:
        HTTPException(404): Document not found
    """
    try:
        document = await document_service.get_document(document_id)
    except DocumentNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return DocumentStatusResponse.from_document(document)
