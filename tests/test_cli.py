"""
Tests for the command line entry point and the logging setup.
"""
import logging

from yieldpoint.__main__ import main
from yieldpoint.logging_config import setup_logging


class TestLogging:

    def test_console_handler_only(self, clean_logger):
        setup_logging(level=logging.DEBUG)
        assert clean_logger.level == logging.DEBUG
        assert len(clean_logger.handlers) == 1

    def test_repeated_setup_does_not_duplicate(self, clean_logger):
        setup_logging()
        setup_logging()
        assert len(clean_logger.handlers) == 1

    def test_log_file(self, clean_logger, tmp_path):
        log_file = tmp_path / "yieldpoint.log"
        setup_logging(log_file=str(log_file))
        assert len(clean_logger.handlers) == 2
        for handler in clean_logger.handlers:
            handler.flush()
        assert "Logging initialized." in log_file.read_text(encoding="utf-8")


class TestCli:

    def test_summary(self, clean_logger, tmp_path):
        log_file = tmp_path / "summary.log"
        assert main(["--summary", "--resolution", "40", "--log-file", str(log_file)]) == 0
        for handler in clean_logger.handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "41 points" in text
        assert "Fracture" in text
        assert "Upper Yield Point" in text

    def test_invalid_resolution_exits_non_zero(self, clean_logger):
        assert main(["--summary", "--resolution", "0"]) == 1
