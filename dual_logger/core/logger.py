"""
LoggerCore - synchronous dual-sink logger

Filters records by severity, formats them into single lines and writes
each line to the console and, once initialized, to a per-session file.
"""

from __future__ import annotations
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO, Union
import atexit
import sys
import threading

from dual_logger.core.errors import InitializationError, WriteError
from dual_logger.core.log_record import LogRecord
from dual_logger.core.logger_config import LoggerConfiguration
from dual_logger.core.severity import Severity
from dual_logger.formatters.line_formatter import LineFormatter
from dual_logger.writers.console_writer import ConsoleWriter
from dual_logger.writers.file_writer import FileWriter


class LoggerCore:
    """
    Leveled logger writing to console and file.

    All configuration reads and writes, formatting and sink writes happen
    under one lock, so concurrent emissions never interleave within a
    line and each emission sees a consistent configuration.

    Emission never raises: sink failures are reported on stderr and
    counted. A failing file sink is closed and not retried.
    """

    def __init__(
        self,
        config: Optional[LoggerConfiguration] = None,
        console_stream: Optional[TextIO] = None,
    ):
        self._config = config.copy() if config else LoggerConfiguration.default()
        self._formatter = LineFormatter(self._config)
        self._console = ConsoleWriter(console_stream)
        self._file: Optional[FileWriter] = None
        self._lock = threading.Lock()
        self._initialized = False
        self._file_degraded = False
        self._last_error: Optional[OSError] = None
        self._metrics = {
            "emitted": 0,
            "filtered": 0,
            "file_failures": 0,
            "console_failures": 0,
        }

        atexit.register(self.shutdown)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self) -> Path:
        """
        Open the session log file.

        Safe to call repeatedly and from several threads: the file is
        opened at most once. After a clean shutdown() a new session file
        is opened; after a file failure the logger stays console-only.

        Returns:
            Path of the session log file

        Raises:
            InitializationError: If the log directory or file cannot be
                created. The logger keeps writing to the console only.
        """
        with self._lock:
            if self._file is not None:
                return self._file.filepath
            if self._file_degraded:
                raise InitializationError(
                    "Log file is unavailable, logging to console only",
                    path=self._config.log_directory,
                )

            try:
                self._file = FileWriter.open_session(
                    self._config.log_directory,
                    started=datetime.now(),
                    filename_format=self._config.filename_format,
                    extension=self._config.file_extension,
                    encoding=self._config.encoding,
                )
            except OSError as e:
                error = InitializationError(
                    f"Cannot open log file in {self._config.log_directory}: {e}",
                    path=self._config.log_directory,
                )
                self._file_degraded = True
                self._last_error = error
                raise error from e

            self._initialized = True
            return self._file.filepath

    def flush(self) -> None:
        """Flush both sinks."""
        with self._lock:
            try:
                self._console.flush()
            except (OSError, ValueError):
                pass
            if self._file is not None:
                try:
                    self._file.flush()
                except (OSError, ValueError) as e:
                    self._degrade_file(e)

    def shutdown(self) -> None:
        """
        Flush and close the file sink.

        Idempotent. Console output keeps working afterwards.
        """
        with self._lock:
            if self._file is None:
                return
            try:
                self._file.close()
            except OSError as e:
                self._last_error = WriteError(str(e), path=self._file.filepath)
            finally:
                self._file = None
                self._initialized = False

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_minimum_severity(self, level: Union[Severity, str]) -> None:
        """Set the severity below which records are dropped."""
        if isinstance(level, str):
            level = Severity.from_string(level)
        else:
            level = Severity(level)
        with self._lock:
            self._config.min_severity = level

    def enable_colors(self, enabled: bool = True) -> None:
        """Enable/disable ANSI colors on the console sink."""
        with self._lock:
            self._config.colors_enabled = bool(enabled)

    def enable_timestamps(self, enabled: bool = True) -> None:
        """Enable/disable the timestamp field."""
        with self._lock:
            self._config.timestamps_enabled = bool(enabled)

    def enable_source_info(self, enabled: bool = True) -> None:
        """Enable/disable the ``[file:line]`` field."""
        with self._lock:
            self._config.source_info_enabled = bool(enabled)

    def set_base_path(self, path: Optional[str]) -> None:
        """Set the prefix stripped from source file paths."""
        with self._lock:
            self._config.base_path = path or ""

    def configuration(self) -> LoggerConfiguration:
        """Return a snapshot of the current configuration."""
        with self._lock:
            return self._config.copy()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def initialized(self) -> bool:
        """True while the session file is open."""
        return self._initialized

    @property
    def file_degraded(self) -> bool:
        """True after the file sink failed; only the console is written."""
        return self._file_degraded

    @property
    def log_path(self) -> Optional[Path]:
        """Path of the session log file, if one was opened."""
        file = self._file
        return file.filepath if file is not None else None

    @property
    def last_error(self) -> Optional[OSError]:
        """Most recent sink error, if any."""
        return self._last_error

    def get_metrics(self) -> dict:
        """Get logging metrics."""
        with self._lock:
            return self._metrics.copy()

    def is_enabled_for(self, severity: Severity) -> bool:
        """True if a record at ``severity`` would be emitted."""
        return severity >= self._config.min_severity

    # ------------------------------------------------------------------
    # Emission
    # ------------------------------------------------------------------

    def emit(
        self,
        severity: Severity,
        message: str,
        source_file: Optional[str] = None,
        source_line: Optional[int] = None,
    ) -> bool:
        """
        Filter, format and write one record.

        Args:
            severity: Record severity
            message: Message text, written verbatim
            source_file: Optional call-site file path
            source_line: Optional call-site line number

        Returns:
            True if the record was accepted, False if it was filtered out
        """
        severity = Severity(severity)
        with self._lock:
            if severity < self._config.min_severity:
                self._metrics["filtered"] += 1
                return False

            record = LogRecord(
                severity=severity,
                message=message,
                source_file=source_file,
                source_line=source_line,
            )
            plain = self._formatter.format(record)
            if self._config.colors_enabled:
                console_line = self._formatter.format(record, colored=True)
            else:
                console_line = plain

            try:
                self._console.write(console_line)
            except (OSError, ValueError) as e:
                self._metrics["console_failures"] += 1
                self._last_error = WriteError(f"Console write failed: {e}")

            if self._file is not None:
                try:
                    self._file.write(plain)
                except (OSError, ValueError) as e:
                    self._degrade_file(e)

            self._metrics["emitted"] += 1
            return True

    def debug(self, message: str, source_file: Optional[str] = None,
              source_line: Optional[int] = None) -> bool:
        """Log debug message."""
        return self.emit(Severity.DEBUG, message, source_file, source_line)

    def info(self, message: str, source_file: Optional[str] = None,
             source_line: Optional[int] = None) -> bool:
        """Log info message."""
        return self.emit(Severity.INFO, message, source_file, source_line)

    def warning(self, message: str, source_file: Optional[str] = None,
                source_line: Optional[int] = None) -> bool:
        """Log warning message."""
        return self.emit(Severity.WARNING, message, source_file, source_line)

    def error(self, message: str, source_file: Optional[str] = None,
              source_line: Optional[int] = None) -> bool:
        """Log error message."""
        return self.emit(Severity.ERROR, message, source_file, source_line)

    def fatal(self, message: str, source_file: Optional[str] = None,
              source_line: Optional[int] = None) -> bool:
        """
        Log fatal message.

        Advisory only: the caller decides whether to stop the process.
        """
        return self.emit(Severity.FATAL, message, source_file, source_line)

    def todo(self, message: str, source_file: Optional[str] = None,
             source_line: Optional[int] = None) -> bool:
        """Log a follow-up marker."""
        return self.emit(Severity.TODO, message, source_file, source_line)

    def _degrade_file(self, error: Exception) -> None:
        """Drop the file sink after a failure. Caller holds the lock."""
        file = self._file
        path = file.filepath if file is not None else None
        self._metrics["file_failures"] += 1
        self._file_degraded = True
        self._last_error = WriteError(f"Log file write failed: {error}", path=path)
        self._file = None
        self._initialized = False

        if file is not None:
            try:
                file.close()
            except OSError:
                pass

        print(f"Writer error: {self._last_error}; logging to console only", file=sys.stderr)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"LoggerCore(min_severity={self._config.min_severity}, "
            f"initialized={self._initialized}, log_path={self.log_path})"
        )
