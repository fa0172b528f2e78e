"""
Process-wide logger handle

Explicitly constructed LoggerCore instances are the preferred API. This
module offers one shared instance for code that wants ambient access:

    import dual_logger

    dual_logger.init()               # open logs/<date-time>.log
    dual_logger.info("started")      # file and line captured automatically

The shared instance is created lazily on first use, guarded by a lock, and
its file is closed at interpreter exit.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Optional

from dual_logger.call_site import caller_location
from dual_logger.core.logger import LoggerCore
from dual_logger.core.logger_config import LoggerConfiguration
from dual_logger.core.severity import Severity

_logger: Optional[LoggerCore] = None
_lock = threading.Lock()


def get_logger() -> LoggerCore:
    """Return the shared logger, creating it on first use."""
    global _logger
    logger = _logger
    if logger is not None:
        return logger
    with _lock:
        if _logger is None:
            _logger = LoggerCore(LoggerConfiguration.default())
        return _logger


def set_logger(logger: LoggerCore) -> Optional[LoggerCore]:
    """
    Install ``logger`` as the shared logger.

    Returns:
        The previously installed logger, if any. It is not shut down.
    """
    global _logger
    with _lock:
        previous, _logger = _logger, logger
    return previous


def reset() -> None:
    """Shut down and forget the shared logger."""
    global _logger
    with _lock:
        logger, _logger = _logger, None
    if logger is not None:
        logger.shutdown()


def init(config: Optional[LoggerConfiguration] = None) -> Path:
    """
    Initialize the shared logger's file sink.

    Args:
        config: Replaces the shared logger with one built from this
                configuration before initializing

    Returns:
        Path of the session log file

    Raises:
        InitializationError: If the file cannot be opened; console
            output continues
    """
    if config is not None:
        previous = set_logger(LoggerCore(config))
        if previous is not None:
            previous.shutdown()
    return get_logger().initialize()


def _emit(severity: Severity, message: str) -> bool:
    logger = get_logger()
    if not logger.is_enabled_for(severity):
        return False
    location = caller_location(2)
    return logger.emit(severity, message, location.file, location.line)


def debug(message: str) -> bool:
    """Log debug message with the caller's location."""
    return _emit(Severity.DEBUG, message)


def info(message: str) -> bool:
    """Log info message with the caller's location."""
    return _emit(Severity.INFO, message)


def warning(message: str) -> bool:
    """Log warning message with the caller's location."""
    return _emit(Severity.WARNING, message)


def error(message: str) -> bool:
    """Log error message with the caller's location."""
    return _emit(Severity.ERROR, message)


def fatal(message: str) -> bool:
    """Log fatal message with the caller's location."""
    return _emit(Severity.FATAL, message)


def todo(message: str) -> bool:
    """Log a follow-up marker with the caller's location."""
    return _emit(Severity.TODO, message)
