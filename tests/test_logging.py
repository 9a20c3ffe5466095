"""Test logger setup."""

import logging

from line_opener.utils.logger_setup import LoggerManager, get_logger


def test_file_logging(tmp_path):
    """setup_logging writes to the requested file and is idempotent."""
    LoggerManager.reset()
    log_file = tmp_path / "logs" / "line_opener.log"
    try:
        LoggerManager.setup_logging(log_file=str(log_file), level="DEBUG")
        LoggerManager.setup_logging(level="ERROR")
        logger = get_logger("tests")
        assert logger.name == "line_opener.tests"
        logger.debug("hello from the test")
        for handler in logging.getLogger("line_opener").handlers:
            handler.flush()
        assert "hello from the test" in log_file.read_text(encoding="utf-8")
    finally:
        LoggerManager.reset()


def test_module_names_are_not_prefixed_twice():
    assert get_logger("line_opener.src.reader").name == "line_opener.src.reader"


def test_default_setup_is_silent():
    LoggerManager.reset()
    try:
        LoggerManager.setup_logging()
        handlers = logging.getLogger("line_opener").handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.NullHandler)
    finally:
        LoggerManager.reset()
