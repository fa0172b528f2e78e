"""
Log record data structure

One value per accepted emission, consumed by the formatter and discarded.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from dual_logger.core.severity import Severity


@dataclass(frozen=True)
class LogRecord:
    """
    Log record data structure.

    Contains everything the formatter needs to render a single line.
    """

    severity: Severity
    message: str
    source_file: Optional[str] = None
    source_line: Optional[int] = None
    timestamp: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        """Validate record after initialization."""
        if not isinstance(self.severity, Severity):
            raise TypeError("severity must be Severity enum")
        if not isinstance(self.message, str):
            object.__setattr__(self, "message", str(self.message))

    @property
    def has_source(self) -> bool:
        """True when a source file was supplied."""
        return bool(self.source_file)
