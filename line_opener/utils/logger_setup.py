"""
Centralized logging configuration for line-opener.

Provides a simple, consistent logging interface across all modules.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


class LoggerManager:
    """Manages logging configuration for the application."""

    _initialized = False
    _log_file = None

    @classmethod
    def setup_logging(cls, log_file: Optional[str] = None, level: str = "WARNING", console: bool = False,
                      force: bool = False):
        """
        Setup logging configuration.

        Args:
            log_file (Optional[str]): Path to log file. If None, no file handler is added.
            level (str): Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            console (bool): Enable console logging on stderr (default: False)
            force (bool): Reconfigure even if logging was already set up
        """
        if cls._initialized and not force:
            return

        # Convert string level to logging constant
        numeric_level = getattr(logging, level.upper(), logging.WARNING)

        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        root_logger = logging.getLogger('line_opener')
        root_logger.setLevel(numeric_level)
        for handler in root_logger.handlers[:]:
            handler.close()
            root_logger.removeHandler(handler)

        # stdout carries extracted lines, so the console handler writes to stderr
        if console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(numeric_level)
            console_handler.setFormatter(formatter)
            root_logger.addHandler(console_handler)

        if log_file:
            cls._log_file = Path(log_file)
            cls._log_file.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(cls._log_file, encoding='utf-8')
            file_handler.setLevel(numeric_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

        if not root_logger.handlers:
            root_logger.addHandler(logging.NullHandler())

        cls._initialized = True

    @classmethod
    def reset(cls):
        """Close handlers and allow setup_logging to run again."""
        root_logger = logging.getLogger('line_opener')
        for handler in root_logger.handlers[:]:
            handler.close()
            root_logger.removeHandler(handler)
        root_logger.setLevel(logging.NOTSET)
        cls._initialized = False
        cls._log_file = None

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """
        Get a logger for a specific module.

        Args:
            name (str): Module name (usually __name__)

        Returns:
            logging.Logger: Configured logger instance
        """
        if not cls._initialized:
            cls.setup_logging()

        if name.startswith('line_opener'):
            return logging.getLogger(name)
        return logging.getLogger(f'line_opener.{name}')


def get_logger(name: str) -> logging.Logger:
    """
    Convenience function to get a logger.

    Args:
        name (str): Module name (usually __name__)

    Returns:
        logging.Logger: Configured logger instance
    """
    return LoggerManager.get_logger(name)
