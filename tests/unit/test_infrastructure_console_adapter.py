"""Unit tests for the structlog console adapter."""

from unittest.mock import Mock

import pytest

from bookstore.infrastructure.logging import ConsoleAdapter


@pytest.fixture
def bound_logger():
    return Mock()


@pytest.mark.unit
class TestConsoleAdapter:
    def test_info_passes_context(self, bound_logger):
        ConsoleAdapter(logger=bound_logger).info("book_added", book_id="b-1")

        bound_logger.info.assert_called_once_with("book_added", book_id="b-1")

    def test_error_records_exception_type_and_message(self, bound_logger):
        adapter = ConsoleAdapter(logger=bound_logger)

        adapter.error("book_add_failed", error=ValueError("bad price"), book_name="Dune")

        bound_logger.error.assert_called_once_with(
            "book_add_failed",
            error_type="ValueError",
            error_message="bad price",
            book_name="Dune",
        )

    def test_error_without_exception(self, bound_logger):
        ConsoleAdapter(logger=bound_logger).error("event_delivery_failed")

        bound_logger.error.assert_called_once_with("event_delivery_failed")

    def test_bind_returns_new_adapter(self, bound_logger):
        adapter = ConsoleAdapter(logger=bound_logger)

        child = adapter.bind(trace_id="t-1")
        child.warning("slow_query")

        bound_logger.bind.assert_called_once_with(trace_id="t-1")
        bound_logger.bind.return_value.warning.assert_called_once_with("slow_query")
        assert child is not adapter

    def test_configures_structlog_when_no_logger_given(self):
        adapter = ConsoleAdapter(use_json=True, level="debug")

        adapter.debug("adapter_ready")
