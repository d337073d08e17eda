"""
PDF text extraction task using LangChain PyPDFLoader.

Reads an uploaded document's temp file page by page.

Dependencies: langchain_community.document_loaders, pypdf
System role: First stage of document processing
"""

from uuid import UUID

from fastapi.concurrency import run_in_threadpool
from langchain_community.document_loaders import PyPDFLoader

from recall.boundary.storage.temp_files import TempFileStorage
from recall.core.document_processing.models import PageText
from recall.core.exceptions import PdfExtractionError, SourceFileNotFoundError


class ExtractionTask:
    """Extract per-page text from uploaded PDFs."""

    def __init__(self, storage: TempFileStorage) -> None:
        self._storage = storage

    def _load_pages(self, file_path: str) -> list[PageText]:
        loader = PyPDFLoader(file_path, mode="page")
        pages = []
        for position, page in enumerate(loader.lazy_load()):
            page_index = page.metadata.get("page", position)
            pages.append(
                PageText(page_number=int(page_index) + 1, text=page.page_content.strip())
            )
        return pages

    async def extract(self, document_id: UUID) -> list[PageText]:
        """
        Extract the text of every page of a document's PDF.

        Args:
            document_id: Document whose temp file is read

        Returns:
            list[PageText]: One entry per page, 1-based, text trimmed

        Raises:
            SourceFileNotFoundError: When the temp file is missing
            PdfExtractionError: When the PDF cannot be parsed
        """
        path = self._storage.path_for(document_id)
        if not path.exists():
            raise SourceFileNotFoundError(str(path), document_id=str(document_id))

        try:
            return await run_in_threadpool(self._load_pages, str(path))
        except Exception as e:
            raise PdfExtractionError(
                f"Failed to extract text from PDF for document ID: {document_id}",
                document_id=str(document_id),
                details={"error": f"{type(e).__name__}: {e}"},
            ) from e
