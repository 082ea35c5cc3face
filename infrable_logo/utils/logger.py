"""
Logging setup for the logo generator.
Console output goes to stderr so the CLI keeps stdout clean; an optional
rotating log file can be attached for long-running batch use.
"""

import os
import sys
import json
import logging
import traceback
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import Optional

# Constants
DEFAULT_LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING")
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10MB
BACKUP_COUNT = 5
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class JsonFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record):
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'name': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': traceback.format_exception(*record.exc_info)
            }

        return json.dumps(log_data)


def setup_logger(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    console: bool = True,
    use_json: bool = False
) -> None:
    """
    Configure the root logger for the application.

    Args:
        level: Logging level name (falls back to the LOG_LEVEL environment
            variable, then WARNING)
        log_file: Optional file to log to
        console: Whether to log to the console (stderr)
        use_json: Emit JSON records instead of plain text
    """
    level = level or DEFAULT_LOG_LEVEL
    level_value = getattr(logging, level.upper(), logging.WARNING)

    if use_json:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(LOG_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level_value)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(level_value)
        root_logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=MAX_LOG_SIZE,
            backupCount=BACKUP_COUNT
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level_value)
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def log_exception(
    logger: logging.Logger,
    exc: Exception,
    level: int = logging.ERROR
) -> None:
    """
    Log an exception as a single diagnostic line.

    The traceback is only attached at DEBUG verbosity.

    Args:
        logger: Logger to use
        exc: Exception to log
        level: Log level
    """
    message = f"{type(exc).__name__}: {str(exc)}"
    logger.log(level, message, exc_info=exc if logger.isEnabledFor(logging.DEBUG) else None)
