"""
Tests for logging configuration helpers.
"""

import logging

import pytest

from html_interpreter.utils.logger import add_file_handler, configure_logging, set_log_level


class TestLogger:
    """Test cases for the logging helpers."""

    def test_configure_logging(self):
        configure_logging("DEBUG")

        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1

    def test_configure_logging_with_file(self, temp_dir):
        log_file = temp_dir / "nested" / "app.log"

        configure_logging("INFO", log_file=str(log_file))
        logging.getLogger("html_interpreter.test").info("written")

        assert len(logging.getLogger().handlers) == 2
        assert "written" in log_file.read_text()

    def test_invalid_level(self):
        with pytest.raises(ValueError):
            configure_logging("LOUD")

        with pytest.raises(ValueError):
            set_log_level("LOUD")

    def test_set_log_level(self):
        configure_logging("WARNING")

        set_log_level("error")

        root_logger = logging.getLogger()
        assert root_logger.level == logging.ERROR
        assert all(handler.level == logging.ERROR for handler in root_logger.handlers)

    def test_add_file_handler_validation(self):
        with pytest.raises(ValueError):
            add_file_handler("not a logger", "app.log")

        with pytest.raises(ValueError):
            add_file_handler(logging.getLogger(), "")
