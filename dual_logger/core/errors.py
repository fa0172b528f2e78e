"""
Logger error types

Both concrete errors are OSError subclasses, so callers catching IOError
around initialization keep working.
"""

from pathlib import Path
from typing import Optional


class LoggerError(Exception):
    """Base class for logger errors."""


class InitializationError(LoggerError, OSError):
    """
    The log directory or log file could not be created or opened.

    Raised by ``LoggerCore.initialize()``. By the time it propagates the
    logger has already fallen back to console-only output.
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class WriteError(LoggerError, OSError):
    """A single record could not be written to the file sink."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path
