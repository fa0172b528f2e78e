"""
Line formatter

Renders ``[timestamp] [LEVEL] [file:line] message`` with each optional field
controlled by the logger configuration.
"""

from typing import List

from dual_logger.core.log_record import LogRecord
from dual_logger.core.logger_config import LoggerConfiguration
from dual_logger.formatters.base_formatter import BaseFormatter


def strip_base_path(path: str, base_path: str) -> str:
    """
    Remove ``base_path`` from the front of ``path``.

    Args:
        path: Source file path as supplied by the caller
        base_path: Prefix to remove; empty means no shortening

    Returns:
        Shortened path, or ``path`` unchanged when it does not start
        with ``base_path``

    Example:
        strip_base_path("/a/b/c/file.cpp", "/a/b/")  # "c/file.cpp"
        strip_base_path("/x/file.cpp", "/a/b/")      # "/x/file.cpp"
    """
    if not base_path or not path.startswith(base_path):
        return path

    stripped = path[len(base_path):]
    # "/a/b" applied to "/a/b/c" must not leave a leading separator
    if not base_path.endswith(("/", "\\")):
        if stripped and stripped[0] not in "/\\":
            # "/a/b" vs "/a/bc/file": not a directory boundary
            return path
        stripped = stripped.lstrip("/\\")

    return stripped or path


class LineFormatter(BaseFormatter):
    """
    Format log records as single lines.

    The formatter reads its settings from a live LoggerConfiguration, so
    toggles made on the configuration apply to the next call. The caller
    is responsible for serializing format calls with configuration changes.
    """

    def __init__(self, config: LoggerConfiguration):
        """
        Initialize line formatter.

        Args:
            config: Configuration consulted on every format call
        """
        self.config = config

    def format(self, record: LogRecord, colored: bool = False) -> str:
        """
        Format log record as one line.

        Args:
            record: Log record to format
            colored: Wrap the severity tag in its ANSI color

        Returns:
            Formatted string
        """
        config = self.config
        parts: List[str] = []

        if config.timestamps_enabled:
            parts.append(f"[{record.timestamp.strftime(config.timestamp_format)}]")

        tag = record.severity.tag
        if colored:
            tag = f"{record.severity.color_code}{tag}{record.severity.reset_code}"
        parts.append(tag)

        if config.source_info_enabled and record.has_source:
            source = strip_base_path(record.source_file, config.base_path)
            if record.source_line is not None:
                source = f"{source}:{record.source_line}"
            parts.append(f"[{source}]")

        parts.append(record.message)
        return " ".join(parts)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"LineFormatter(timestamps={self.config.timestamps_enabled}, "
            f"source_info={self.config.source_info_enabled})"
        )
