"""
Test suite for TempFileStorage.

System role: Verification of upload hand-off files
"""

import uuid

from recall.boundary.storage.temp_files import TempFileStorage


class TestTempFileStorage:
    """Test suite for TempFileStorage."""

    def test_path_for_should_use_document_id(self, tmp_path) -> None:
        document_id = uuid.uuid4()

        assert TempFileStorage(tmp_path).path_for(document_id) == tmp_path / f"{document_id}.pdf"

    async def test_save_should_create_directory_and_write_bytes(self, tmp_path) -> None:
        """Should create missing parent directories."""
        storage = TempFileStorage(tmp_path / "nested" / "uploads")
        document_id = uuid.uuid4()

        path = await storage.save(document_id, b"%PDF-1.4")

        assert path.read_bytes() == b"%PDF-1.4"

    async def test_delete_should_remove_file_once(self, temp_storage, document_id) -> None:
        """Should report True on removal and False when already gone."""
        await temp_storage.save(document_id, b"%PDF-1.4")

        assert temp_storage.delete(document_id) is True
        assert temp_storage.delete(document_id) is False
        assert not temp_storage.path_for(document_id).exists()
