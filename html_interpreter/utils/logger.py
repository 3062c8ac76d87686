"""
Logging setup for HTML Interpreter.

Library modules only create ``logging.getLogger(__name__)`` loggers; handlers are
installed here, by the CLI or by an embedding application.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

MAX_LOG_BYTES = 10 * 1024 * 1024


def _level(level: str) -> int:
    name = (level or '').upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {level}")
    return getattr(logging, name)


def configure_logging(level: str = "INFO", format_string: Optional[str] = None,
                      log_file: Union[str, Path, None] = None, max_file_size: int = MAX_LOG_BYTES,
                      backup_count: int = 5) -> None:
    """
    Replace the root logger's handlers with a stderr handler and, optionally, a log file.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string
        log_file: Path of a rotating log file
        max_file_size: Size in bytes at which the log file rotates
        backup_count: Number of rotated files to keep
    """
    numeric_level = _level(level)
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    # stdout is reserved for command output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        add_file_handler(root_logger, log_file, level, formatter, max_file_size, backup_count)


def set_log_level(level: str) -> None:
    """Change the level of the root logger and every handler attached to it."""
    numeric_level = _level(level)
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers:
        handler.setLevel(numeric_level)


def add_file_handler(logger: logging.Logger, file_path: Union[str, Path], level: str = "INFO",
                     formatter: Optional[logging.Formatter] = None,
                     max_file_size: int = MAX_LOG_BYTES, backup_count: int = 5) -> RotatingFileHandler:
    """
    Attach a rotating file handler to ``logger``, creating the log directory if needed.

    Returns:
        The new handler
    """
    if not isinstance(logger, logging.Logger):
        raise ValueError("Logger must be a logging.Logger instance")
    if not file_path:
        raise ValueError("File path must be a non-empty string")

    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(path, maxBytes=max_file_size, backupCount=backup_count, encoding="utf-8")
    handler.setLevel(_level(level))
    handler.setFormatter(formatter or logging.Formatter(DEFAULT_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    return handler
