"""Tests for structured logging utilities."""

import logging

import pytest

from timeledger.utils.logging_utils import (
    LogContext,
    _ContextFilter,
    generate_correlation_id,
    get_correlation_id,
    get_log_context,
    log_function_call,
)


class TestCorrelationId:
    """Test correlation id helpers."""

    def test_generate_is_unique(self):
        """Test that generated ids differ."""
        assert generate_correlation_id() != generate_correlation_id()

    def test_get_from_context(self):
        """Test that the id is read from the active context."""
        assert get_correlation_id() is None
        with LogContext(correlation_id="abc"):
            assert get_correlation_id() == "abc"
        assert get_correlation_id() is None


class TestLogContext:
    """Test LogContext context manager."""

    def test_fields_set_and_restored(self):
        """Test that fields exist only inside the block."""
        with LogContext(year=2024):
            assert get_log_context() == {"year": 2024}
        assert get_log_context() == {}

    def test_nested_contexts_merge(self):
        """Test that inner fields add to the outer ones."""
        with LogContext(year=2024):
            with LogContext(client_filter="c1"):
                assert get_log_context() == {"year": 2024, "client_filter": "c1"}
            assert get_log_context() == {"year": 2024}

    def test_restored_after_exception(self):
        """Test that an exception does not leak fields."""
        with pytest.raises(RuntimeError):
            with LogContext(year=2024):
                raise RuntimeError("boom")
        assert get_log_context() == {}

    def test_filter_copies_fields(self):
        """Test that the filter puts context fields on records."""
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
        with LogContext(year=2024, client_filter="all"):
            assert _ContextFilter().filter(record) is True
        assert record.year == 2024
        assert record.client_filter == "all"


class TestLogFunctionCall:
    """Test log_function_call decorator."""

    def test_entry_and_exit_logged(self, caplog):
        """Test that entering and leaving are logged."""

        @log_function_call
        def add(a, b):
            return a + b

        with caplog.at_level(logging.DEBUG):
            assert add(1, 2) == 3

        messages = [r.getMessage() for r in caplog.records]
        assert "Entering add" in messages
        assert "Exiting add" in messages

    def test_arguments_logged(self, caplog):
        """Test the include_args option."""

        @log_function_call(include_args=True, level="INFO")
        def greet(name, punctuation="!"):
            return f"hi {name}{punctuation}"

        with caplog.at_level(logging.INFO):
            greet("ada", punctuation="?")

        assert "Entering greet with args: 'ada', punctuation='?'" in caplog.text

    def test_exception_logged_and_reraised(self, caplog):
        """Test that exceptions propagate after being logged."""

        @log_function_call
        def fail():
            raise ValueError("bad")

        with caplog.at_level(logging.DEBUG):
            with pytest.raises(ValueError, match="bad"):
                fail()

        assert "Exception in fail: ValueError: bad" in caplog.text

    def test_preserves_metadata(self):
        """Test that functools.wraps keeps the name and docstring."""

        @log_function_call
        def documented():
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."
