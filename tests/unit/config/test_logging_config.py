"""Tests for centralized logging configuration."""

import json
import logging
import os
import sys
from unittest.mock import patch

import pytest

from timeledger.config.logging_config import (
    JSONFormatter,
    LoggingConfig,
    configure_logging,
    get_logger,
    reset_logging,
)
from timeledger.utils.logging_utils import LogContext


class TestLoggingConfig:
    """Test LoggingConfig class."""

    def test_default_configuration(self):
        """Test default logging configuration."""
        config = LoggingConfig()

        assert config.log_level == "INFO"
        assert config.log_format == "standard"
        assert config.log_file is None
        assert config.enable_console is True
        assert config.enable_file is False
        assert config.max_file_size == 5 * 1024 * 1024  # 5MB
        assert config.backup_count == 3

    def test_environment_variable_override(self):
        """Test configuration from environment variables."""
        with patch.dict(
            os.environ,
            {
                "LOG_LEVEL": "DEBUG",
                "LOG_FORMAT": "json",
                "LOG_FILE": "/tmp/test.log",
                "LOG_CONSOLE": "false",
            },
        ):
            config = LoggingConfig.from_env()

            assert config.log_level == "DEBUG"
            assert config.log_format == "json"
            assert config.log_file == "/tmp/test.log"
            assert config.enable_file is True
            assert config.enable_console is False

    def test_explicit_level_wins_over_environment(self):
        """Test that the level from the application config takes precedence."""
        with patch.dict(os.environ, {"LOG_LEVEL": "DEBUG"}):
            assert LoggingConfig.from_env("warning").log_level == "WARNING"

    def test_invalid_log_level(self):
        """Test invalid log level raises error."""
        with pytest.raises(ValueError, match="Invalid log level"):
            LoggingConfig(log_level="INVALID")

    def test_invalid_log_format(self):
        """Test invalid log format raises error."""
        with pytest.raises(ValueError, match="Invalid log format"):
            LoggingConfig(log_format="xml")

    def test_file_requires_path(self):
        """Test that file output needs a file name."""
        with pytest.raises(ValueError, match="log_file must be specified"):
            LoggingConfig(enable_file=True)


class TestJSONFormatter:
    """Test JSON formatter."""

    def test_basic_fields(self):
        """Test that the core fields are serialized."""
        record = logging.LogRecord(
            "timeledger.test", logging.INFO, __file__, 10, "hello %s", ("world",), None
        )
        data = json.loads(JSONFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["logger"] == "timeledger.test"
        assert data["message"] == "hello world"
        assert "exception" not in data

    def test_extra_fields(self):
        """Test that context fields become JSON keys."""
        record = logging.LogRecord(
            "timeledger.test", logging.INFO, __file__, 10, "msg", None, None
        )
        record.year = 2024
        record.client_filter = "all"
        data = json.loads(JSONFormatter().format(record))

        assert data["year"] == 2024
        assert data["client_filter"] == "all"

    def test_exception_info(self):
        """Test that exceptions are included."""
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord(
                "timeledger.test", logging.ERROR, __file__, 10, "failed", None,
                sys.exc_info(),
            )
        data = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in data["exception"]


class TestConfigureLogging:
    """Test configure_logging and reset_logging."""

    def test_console_handler(self):
        """Test that one console handler is installed."""
        configure_logging(LoggingConfig(log_level="DEBUG"))
        root = logging.getLogger()

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)

    def test_repeated_calls_do_not_duplicate(self):
        """Test that configuring twice replaces the handlers."""
        configure_logging(LoggingConfig())
        configure_logging(LoggingConfig())
        assert len(logging.getLogger().handlers) == 1

    def test_file_output_with_context(self, tmp_path):
        """Test JSON lines in a log file carrying context fields."""
        log_file = tmp_path / "logs" / "app.log"
        configure_logging(
            LoggingConfig(
                log_format="json",
                log_file=str(log_file),
                enable_console=False,
                enable_file=True,
            )
        )

        with LogContext(year=2024):
            get_logger("timeledger.test").info("aggregated")
        for handler in logging.getLogger().handlers:
            handler.flush()

        data = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
        assert data["message"] == "aggregated"
        assert data["year"] == 2024

    def test_reset_logging(self):
        """Test that reset removes handlers and restores WARNING."""
        configure_logging(LoggingConfig(log_level="DEBUG"))
        reset_logging()
        root = logging.getLogger()

        assert root.handlers == []
        assert root.level == logging.WARNING
