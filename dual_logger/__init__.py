"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Dual Logger - A synchronous leveled logger writing to console and a
per-session log file
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from dual_logger.core.logger import LoggerCore
from dual_logger.core.logger_builder import LoggerBuilder
from dual_logger.core.log_record import LogRecord
from dual_logger.core.severity import Severity
from dual_logger.core.logger_config import LoggerConfiguration
from dual_logger.core.errors import LoggerError, InitializationError, WriteError
from dual_logger.call_site import SourceLocation, caller_location
from dual_logger.global_logger import (
    get_logger,
    set_logger,
    reset,
    init,
    debug,
    info,
    warning,
    error,
    fatal,
    todo,
)

# Import submodules (not all classes by default)
from dual_logger import formatters
from dual_logger import writers

__all__ = [
    "LoggerCore",
    "LoggerBuilder",
    "LogRecord",
    "Severity",
    "LoggerConfiguration",
    "LoggerError",
    "InitializationError",
    "WriteError",
    "SourceLocation",
    "caller_location",
    "get_logger",
    "set_logger",
    "reset",
    "init",
    "debug",
    "info",
    "warning",
    "error",
    "fatal",
    "todo",
    "formatters",
    "writers",
]
