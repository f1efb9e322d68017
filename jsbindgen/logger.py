"""
jsbindgen logging module - debug logging to disk for troubleshooting generation runs

The log goes to jsbindgen.log in the working directory, or in the directory named
by the JSBINDGEN_LOG_DIR environment variable. Each run overwrites the previous log.
"""

import logging
import os
import sys
from pathlib import Path
from enum import Enum


class LogLevel(Enum):
    DEBUG = "DEBUG"
    RELEASE = "RELEASE"


# Hardcoded log level - change to RELEASE for production
CURRENT_LOG_LEVEL = LogLevel.DEBUG

# Log file configuration
LOG_FILENAME = "jsbindgen.log"
LOG_DIR_ENV = "JSBINDGEN_LOG_DIR"
_logger_initialized = False
_logger = None


def _get_log_path() -> Path:
    """Get the log file path: $JSBINDGEN_LOG_DIR, else the working directory"""
    log_dir = os.environ.get(LOG_DIR_ENV)
    return Path(log_dir) / LOG_FILENAME if log_dir else Path.cwd() / LOG_FILENAME


def _create_handler(log_path: Path) -> logging.Handler:
    """File handler for log_path; stderr when the file cannot be opened"""
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(log_path, mode='w', encoding='utf-8')
    except OSError as e:
        print(f"jsbindgen: cannot write log file {log_path} ({e}), logging to stderr", file=sys.stderr)
        return logging.StreamHandler(sys.stderr)


def _initialize_logger():
    """Initialize the logger with file handler"""
    global _logger_initialized, _logger

    if _logger_initialized:
        return _logger

    _logger = logging.getLogger("jsbindgen")
    _logger.setLevel(logging.DEBUG)
    _logger.handlers.clear()

    log_path = _get_log_path()
    handler = _create_handler(log_path)

    # Format: [TIMESTAMP] [LEVEL] [MODULE:FUNCTION:LINE] MESSAGE
    formatter = logging.Formatter(
        '[%(asctime)s] [%(levelname)-8s] [%(module)s:%(funcName)s:%(lineno)d] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)

    if CURRENT_LOG_LEVEL == LogLevel.DEBUG and isinstance(handler, logging.FileHandler):
        handler.setLevel(logging.DEBUG)
    else:
        handler.setLevel(logging.WARNING)

    _logger.addHandler(handler)
    _logger_initialized = True

    _logger.info("=" * 60)
    _logger.info("jsbindgen Logger Started")
    _logger.info(f"Log Level: {CURRENT_LOG_LEVEL.value}")
    _logger.info(f"Log File: {log_path}")
    _logger.info("=" * 60)

    return _logger


def get_logger():
    """Get the jsbindgen logger instance"""
    if not _logger_initialized:
        _initialize_logger()
    return _logger


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


def exception(msg: str, *args, **kwargs):
    """Log exception with traceback"""
    get_logger().exception(msg, *args, **kwargs)


def assert_true(condition, msg: str):
    """Log error and raise RuntimeError if condition is false"""
    if not condition:
        get_logger().error(msg)
        raise RuntimeError(msg)
