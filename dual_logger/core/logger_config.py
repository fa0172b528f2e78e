"""
Logger configuration management
"""

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Union

from dual_logger.core.severity import Severity


@dataclass
class LoggerConfiguration:
    """
    Logger configuration.

    Holds the mutable settings a LoggerCore consults on every emission.
    """

    # Filtering
    min_severity: Severity = Severity.INFO

    # Line format toggles
    colors_enabled: bool = False
    timestamps_enabled: bool = True
    source_info_enabled: bool = True
    base_path: str = ""

    # File settings
    log_directory: Union[Path, str] = field(default_factory=lambda: Path("logs"))
    filename_format: str = "%Y-%m-%d_%H-%M-%S"
    file_extension: str = ".log"
    encoding: str = "utf-8"

    # Format settings
    timestamp_format: str = "%Y-%m-%d %H:%M:%S"

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.min_severity, str):
            self.min_severity = Severity.from_string(self.min_severity)
        elif not isinstance(self.min_severity, Severity):
            self.min_severity = Severity(self.min_severity)

        if not self.timestamp_format:
            raise ValueError("timestamp_format cannot be empty")
        if not self.filename_format:
            raise ValueError("filename_format cannot be empty")
        if self.base_path is None:
            self.base_path = ""

        # Convert log_directory to Path if it's a string
        if isinstance(self.log_directory, str):
            self.log_directory = Path(self.log_directory)

    def copy(self) -> "LoggerConfiguration":
        """Return an independent copy of this configuration."""
        return replace(self)

    @classmethod
    def default(cls) -> "LoggerConfiguration":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfiguration":
        """Create configuration for debugging."""
        return cls(
            min_severity=Severity.DEBUG,
            colors_enabled=True,
        )

    @classmethod
    def production_config(cls) -> "LoggerConfiguration":
        """Create configuration for production."""
        return cls(
            min_severity=Severity.WARNING,
            colors_enabled=False,
            source_info_enabled=False,
        )
