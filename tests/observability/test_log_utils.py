"""
Test suite for logging helpers.

System role: Verification of structured failure logging
"""

import logging

from recall.core.exceptions import PdfExtractionError
from recall.observability.log_utils import log_exception_with_context, safe_log_value


class TestSafeLogValue:
    """Test suite for safe_log_value."""

    def test_should_summarize_collections(self) -> None:
        assert safe_log_value([0.1] * 768) == "list(768 items)"
        assert safe_log_value({"a": 1}) == "dict(1 keys)"
        assert safe_log_value(None) == "None"

    def test_should_truncate_long_text(self) -> None:
        """Should cut text at max_length and report the full size."""
        assert safe_log_value("x" * 20, max_length=5) == "xxxxx... (truncated, 20 total)"


class TestLogExceptionWithContext:
    """Test suite for log_exception_with_context."""

    def test_should_attach_context_and_exception_details(self, caplog) -> None:
        """Should log at ERROR with caller context and scalar exception details."""
        # Arrange
        logger = logging.getLogger("recall.tests.log_utils")
        error = PdfExtractionError(
            "Failed to extract text from PDF for document ID: abc",
            document_id="abc",
            details={"error": "PdfReadError: EOF marker not found"},
        )

        # Act
        with caplog.at_level(logging.ERROR, logger="recall.tests.log_utils"):
            log_exception_with_context(logger, "processing failed", error, document_id="abc")

        # Assert
        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.document_id == "abc"
        assert record.error_type == "PdfExtractionError"
        assert record.error_msg == "Failed to extract text from PDF for document ID: abc"
        assert record.error_error == "PdfReadError: EOF marker not found"
        assert record.exc_info[1] is error
