"""
Base formatter interface
"""

from abc import ABC, abstractmethod
from dual_logger.core.log_record import LogRecord


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Formatters convert LogRecord objects into formatted strings.
    """

    @abstractmethod
    def format(self, record: LogRecord, colored: bool = False) -> str:
        """
        Format a log record into a string.

        Args:
            record: The log record to format
            colored: Whether ANSI color codes may be added

        Returns:
            Formatted line without trailing newline
        """
        pass

    def __call__(self, record: LogRecord, colored: bool = False) -> str:
        """Allow formatters to be callable."""
        return self.format(record, colored)
