"""
Log formatters module

Turns LogRecord values into single output lines.
"""

from dual_logger.formatters.base_formatter import BaseFormatter
from dual_logger.formatters.line_formatter import LineFormatter, strip_base_path

__all__ = [
    "BaseFormatter",
    "LineFormatter",
    "strip_base_path",
]
