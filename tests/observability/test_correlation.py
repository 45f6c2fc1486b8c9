"""
Test suite for correlation id propagation into log records.

System role: Verification of logging context
"""

import logging

from people.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from people.observability.log_utils import log_exception_with_context, safe_log_value
from people.observability.logger import CorrelationIdFilter


class TestCorrelationId:
    """Test suite for the correlation id context."""

    def test_set_should_generate_id_when_missing(self) -> None:
        cid = set_correlation_id()
        try:
            assert cid
            assert get_correlation_id() == cid
        finally:
            clear_correlation_id()

    def test_get_should_return_placeholder_when_unset(self) -> None:
        clear_correlation_id()

        assert get_correlation_id() == "-"

    def test_filter_should_stamp_record(self) -> None:
        set_correlation_id("req-42")
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)
        try:
            assert CorrelationIdFilter().filter(record) is True
        finally:
            clear_correlation_id()

        assert record.correlation_id == "req-42"


class TestLogUtils:
    """Test suite for structured logging helpers."""

    def test_safe_log_value_should_render_compactly(self) -> None:
        assert safe_log_value(None) == "None"
        assert safe_log_value([1, 2, 3]) == "[1, 2, 3]"
        assert safe_log_value(list(range(20))) == "20 items [0, 1, 2, ...]"
        assert safe_log_value("x" * 600).endswith("... (600 chars)")

    def test_log_exception_with_context_should_attach_error_fields(self, caplog) -> None:
        logger = logging.getLogger("people.test")

        with caplog.at_level(logging.ERROR, logger="people.test"):
            log_exception_with_context(logger, "Can't add user", ValueError("boom"), user_id=7)

        record = caplog.records[-1]
        assert record.getMessage() == "Can't add user: boom"
        assert record.error_type == "ValueError"
        assert record.user_id == "7"
