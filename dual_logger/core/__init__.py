"""
Core module for logger system

This module contains the fundamental classes:
- LoggerCore: Filtering, formatting and sink dispatch
- LoggerBuilder: Builder pattern for logger construction
- LogRecord: Per-emission record
- Severity: Severity enumeration
- LoggerConfiguration: Configuration management
"""

from dual_logger.core.errors import InitializationError, LoggerError, WriteError
from dual_logger.core.log_record import LogRecord
from dual_logger.core.logger import LoggerCore
from dual_logger.core.logger_builder import LoggerBuilder
from dual_logger.core.logger_config import LoggerConfiguration
from dual_logger.core.severity import Severity

__all__ = [
    "LoggerCore",
    "LoggerBuilder",
    "LogRecord",
    "Severity",
    "LoggerConfiguration",
    "LoggerError",
    "InitializationError",
    "WriteError",
]
