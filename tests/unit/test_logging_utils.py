#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for logging_utils.py."""

import io
import logging

import pytest

from prettydiff.logging_utils import PACKAGE_LOGGER_NAME, configure_logging, resolve_log_level


@pytest.mark.unit
class TestResolveLogLevel:
    """Tests for resolve_log_level."""

    @pytest.mark.parametrize(
        "value,expected",
        [("DEBUG", logging.DEBUG), ("info", logging.INFO), (logging.ERROR, logging.ERROR), ("bogus", logging.WARNING)],
    )
    def test_resolve(self, value, expected):
        """Test names, numbers and unknown names."""
        assert resolve_log_level(value) == expected


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_configures_package_logger_only(self):
        """Test that the root logger is left alone."""
        root_handlers = list(logging.getLogger().handlers)
        package_logger = configure_logging("INFO", stream=io.StringIO())
        assert package_logger.name == PACKAGE_LOGGER_NAME
        assert package_logger.level == logging.INFO
        assert package_logger.propagate is False
        assert logging.getLogger().handlers == root_handlers

    def test_writes_to_stream(self):
        """Test that child loggers reach the console stream."""
        stream = io.StringIO()
        configure_logging("INFO", stream=stream)
        logging.getLogger("prettydiff.lines").info("hello")
        assert stream.getvalue() == "INFO: hello\n"

    def test_level_filters(self):
        """Test that messages below the level are dropped."""
        stream = io.StringIO()
        configure_logging("WARNING", stream=stream)
        logging.getLogger("prettydiff.cli").info("quiet")
        assert stream.getvalue() == ""

    def test_trace_mode_format(self):
        """Test that trace mode includes the logger name."""
        stream = io.StringIO()
        configure_logging("DEBUG", trace_mode=True, stream=stream)
        logging.getLogger("prettydiff.api").debug("traced")
        assert "[DEBUG] [prettydiff.api] traced" in stream.getvalue()

    def test_reconfigure_replaces_handlers(self):
        """Test that calling twice does not duplicate output."""
        stream = io.StringIO()
        configure_logging("INFO", stream=stream)
        configure_logging("INFO", stream=stream)
        logging.getLogger("prettydiff").info("once")
        assert stream.getvalue().count("once") == 1

    def test_log_file(self, tmp_path):
        """Test teeing output to a log file."""
        log_file = tmp_path / "prettydiff.log"
        package_logger = configure_logging("INFO", log_file=str(log_file), stream=io.StringIO())
        logging.getLogger("prettydiff").info("to file")
        for handler in package_logger.handlers:
            handler.flush()
        assert "to file" in log_file.read_text(encoding="utf-8")

    def test_unwritable_log_file(self, tmp_path):
        """Test that a bad log file path is reported and console logging continues."""
        stream = io.StringIO()
        configure_logging("INFO", log_file=str(tmp_path / "missing" / "x.log"), stream=stream)
        assert "Could not create log file" in stream.getvalue()
