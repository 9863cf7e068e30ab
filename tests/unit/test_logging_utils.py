#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_logging_utils.py
"""Unit tests for logging configuration."""

import logging

import pytest

from mdtodom.logging_utils import configure_logging, resolve_log_level


@pytest.mark.unit
@pytest.mark.usefixtures("restore_root_logger")
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_level_by_name(self):
        """Test string level names are resolved."""
        root = configure_logging("debug")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_log_file(self, tmp_path):
        """Test a file handler is added when a log file is given."""
        log_file = tmp_path / "mdtodom.log"
        root = configure_logging(logging.INFO, log_file=str(log_file))

        logging.getLogger("mdtodom.test").info("written")
        for handler in root.handlers:
            handler.flush()

        assert len(root.handlers) == 2
        assert "written" in log_file.read_text()

    def test_trace_format(self):
        """Test trace mode includes logger names."""
        root = configure_logging(logging.DEBUG, trace_mode=True)
        assert "%(name)s" in root.handlers[0].formatter._fmt

    def test_unknown_level_name(self):
        """Test unknown level names are rejected."""
        with pytest.raises(ValueError, match="loud"):
            resolve_log_level("loud")

    def test_third_party_loggers_quieted(self):
        """Test bs4 and mistune stay at WARNING unless tracing."""
        configure_logging(logging.DEBUG)
        assert logging.getLogger("bs4").level == logging.WARNING
        configure_logging(logging.DEBUG, trace_mode=True)
        assert logging.getLogger("bs4").level == logging.DEBUG
