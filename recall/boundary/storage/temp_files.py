"""
Temporary storage for uploaded PDFs.

An upload is written to `<upload_tmp_dir>/<document_id>.pdf` and removed by
the processor once the document has been processed successfully.

Dependencies: pathlib, asyncio
System role: Hand-off of uploaded bytes from the API to the worker
"""

import asyncio
import logging
from pathlib import Path
from uuid import UUID

logger = logging.getLogger(__name__)


class TempFileStorage:
    """Uploaded files keyed by document id."""

    def __init__(self, base_dir: str | Path) -> None:
        self._base_dir = Path(base_dir)

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def path_for(self, document_id: UUID | str) -> Path:
        return self._base_dir / f"{document_id}.pdf"

    def _write(self, path: Path, content: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)

    async def save(self, document_id: UUID | str, content: bytes) -> Path:
        """
        Write uploaded bytes for a document.

        Args:
            document_id: Owning document id
            content: Raw PDF bytes

        Returns:
            Path: Location of the stored file
        """
        path = self.path_for(document_id)
        await asyncio.to_thread(self._write, path, content)
        logger.debug("Saved temp file", extra={"file_path": str(path), "size": len(content)})
        return path

    def delete(self, document_id: UUID | str) -> bool:
        """
        Best-effort removal of a document's temp file.

        Returns:
            bool: True if the file was removed, False if missing or removal failed
        """
        path = self.path_for(document_id)
        try:
            if not path.exists():
                return False
            path.unlink()
            logger.debug("Cleaned up temp file", extra={"file_path": str(path)})
            return True
        except OSError as e:
            logger.warning(
                "Failed to cleanup temp file",
                extra={"file_path": str(path), "error": str(e)},
            )
            return False
