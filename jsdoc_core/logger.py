"""
JsDoc logging module - console progress/warnings plus optional log file on disk
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

LOGGER_NAME = "JsDoc"
LOG_FILENAME = "JsDoc.log"
_logger_initialized = False
_logger = None


class ConsoleFormatter(logging.Formatter):
    """Prefix warnings with '>> WARNING:' and everything else with ' >'."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.levelno >= logging.WARNING:
            return f">> {record.levelname}: {message}"
        return f" > {message}"


def _rotate_existing_log(log_path: Path):
    """Rename existing log file with timestamp"""
    if log_path.exists():
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        new_name = log_path.parent / f"JsDoc_{timestamp}.log"
        try:
            log_path.rename(new_name)
        except OSError:
            # If rename fails, just overwrite
            pass


def _initialize_logger():
    """Initialize the logger with a console handler"""
    global _logger_initialized, _logger

    if _logger_initialized:
        return _logger

    _logger = logging.getLogger(LOGGER_NAME)
    _logger.setLevel(logging.DEBUG)

    # Clear any existing handlers
    _logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(ConsoleFormatter())
    console_handler.setLevel(logging.INFO)
    _logger.addHandler(console_handler)

    _logger_initialized = True
    return _logger


def enable_file_logging(log_dir: Path) -> Path:
    """
    Also write debug-level logs to <log_dir>/JsDoc.log.

    An existing log is renamed with a timestamp first.

    Returns:
        Path of the new log file
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / LOG_FILENAME
    _rotate_existing_log(log_path)

    file_handler = logging.FileHandler(log_path, mode='w', encoding='utf-8')
    # Format: [TIMESTAMP] [LEVEL] [MODULE:FUNCTION:LINE] MESSAGE
    formatter = logging.Formatter(
        '[%(asctime)s] [%(levelname)-8s] [%(module)s:%(funcName)s:%(lineno)d] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    file_handler.setFormatter(formatter)
    file_handler.setLevel(logging.DEBUG)

    logger = get_logger()
    logger.addHandler(file_handler)
    logger.debug(f"Log File: {log_path}")
    return log_path


def get_logger():
    """Get the JsDoc logger instance"""
    global _logger
    if not _logger_initialized:
        _initialize_logger()
    return _logger


# Convenience functions for logging
def debug(msg: str, *args, **kwargs):
    """Log debug message"""
    get_logger().debug(msg, *args, **kwargs)


def info(msg: str, *args, **kwargs):
    """Log info message"""
    get_logger().info(msg, *args, **kwargs)


def warning(msg: str, *args, **kwargs):
    """Log warning message"""
    get_logger().warning(msg, *args, **kwargs)


def error(msg: str, *args, **kwargs):
    """Log error message"""
    get_logger().error(msg, *args, **kwargs)


class DocLogger:
    """
    The warn/inform sinks handed to the resolver.

    Both calls are observational only. Tests pass a Mock in its place.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or get_logger()

    def warn(self, msg: str):
        self._logger.warning(msg)

    def inform(self, msg: str):
        self._logger.info(msg)
