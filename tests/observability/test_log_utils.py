"""
Test suite for structured logging helpers.

System role: Verification of log context summarization
"""

import logging

from newsbot.core.exceptions import ProviderError
from newsbot.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)

logger = logging.getLogger("newsbot.tests.log_utils")


class TestSafeLogValue:
    """Test suite for context value summarization."""

    def test_vector_should_log_dimension_only(self) -> None:
        """Test embedding vectors are reduced to their size."""
        assert safe_log_value([0.1, 0.2, 0.3]) == "vector(dim=3)"

    def test_ids_should_log_item_count(self) -> None:
        """Test non-vector lists are counted."""
        assert safe_log_value([1, 2]) == "list(2 items)"

    def test_score_should_be_rounded(self) -> None:
        """Test floats are rounded to four places."""
        assert safe_log_value(0.123456) == "0.1235"

    def test_long_text_should_be_truncated(self) -> None:
        """Test long article content is cut off."""
        value = safe_log_value("x" * 600)

        assert value.startswith("x" * 500)
        assert value.endswith("(truncated, 600 total)")


class TestLogWithContext:
    """Test suite for the context logging helpers."""

    def test_context_should_become_record_extras(self, caplog) -> None:
        """Test context keys are attached to the record."""
        with caplog.at_level(logging.INFO, logger=logger.name):
            log_with_context(logger, logging.INFO, "ranked", article_id=7, score=0.5)

        record = caplog.records[0]
        assert record.article_id == "7"
        assert record.score == "0.5000"

    def test_reserved_keys_should_not_clash(self, caplog) -> None:
        """Test keys that shadow LogRecord attributes are renamed."""
        with caplog.at_level(logging.INFO, logger=logger.name):
            log_with_context(logger, logging.INFO, "odd keys", name="x", message="y")

        record = caplog.records[0]
        assert record.ctx_name == "x"
        assert record.ctx_message == "y"
        assert record.getMessage() == "odd keys"

    def test_exception_details_should_be_merged(self, caplog) -> None:
        """Test NewsBotException details appear on the record."""
        error = ProviderError("Embedding call failed", operation="embed")

        with caplog.at_level(logging.ERROR, logger=logger.name):
            log_exception_with_context(logger, "Chat pipeline failed", error, session_id="s1")

        record = caplog.records[0]
        assert record.operation == "embed"
        assert record.session_id == "s1"
        assert record.error_type == "ProviderError"
        assert record.error_msg == "Embedding call failed"
