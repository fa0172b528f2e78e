"""Logger builder pattern"""

import sys
from pathlib import Path
from typing import Optional, TextIO, Union

from dual_logger.core.errors import InitializationError
from dual_logger.core.logger import LoggerCore
from dual_logger.core.logger_config import LoggerConfiguration
from dual_logger.core.severity import Severity


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self, config: Optional[LoggerConfiguration] = None):
        self._config = config.copy() if config else LoggerConfiguration()
        self._console_stream: Optional[TextIO] = None
        self._file_enabled = False

    def with_level(self, level: Union[Severity, str]) -> "LoggerBuilder":
        """Set minimum severity."""
        if isinstance(level, str):
            level = Severity.from_string(level)
        self._config.min_severity = level
        return self

    def with_colors(self, enabled: bool = True) -> "LoggerBuilder":
        """Enable/disable ANSI colors on the console."""
        self._config.colors_enabled = enabled
        return self

    def with_timestamps(self, enabled: bool = True) -> "LoggerBuilder":
        """Enable/disable timestamps."""
        self._config.timestamps_enabled = enabled
        return self

    def with_source_info(self, enabled: bool = True) -> "LoggerBuilder":
        """Enable/disable the source file and line field."""
        self._config.source_info_enabled = enabled
        return self

    def with_base_path(self, base_path: str) -> "LoggerBuilder":
        """Set the prefix stripped from source file paths."""
        self._config.base_path = base_path
        return self

    def with_log_directory(self, directory: Union[str, Path]) -> "LoggerBuilder":
        """Set the directory session files are created in."""
        self._config.log_directory = Path(directory)
        return self

    def with_console_stream(self, stream: TextIO) -> "LoggerBuilder":
        """Write console output to ``stream`` instead of stdout."""
        self._console_stream = stream
        return self

    def with_file(self, enabled: bool = True) -> "LoggerBuilder":
        """
        Open the session file when the logger is built.

        Returns:
            Self for method chaining

        Example:
            logger = (LoggerBuilder()
                .with_level(Severity.DEBUG)
                .with_log_directory("logs")
                .with_file()
                .build())
        """
        self._file_enabled = enabled
        return self

    def build(self) -> LoggerCore:
        """
        Build and return configured logger.

        A file sink that cannot be opened leaves the logger in
        console-only mode; the failure is available as ``last_error``.
        """
        logger = LoggerCore(self._config, console_stream=self._console_stream)

        if self._file_enabled:
            try:
                logger.initialize()
            except InitializationError as e:
                print(f"Writer error: {e}; logging to console only", file=sys.stderr)

        return logger
