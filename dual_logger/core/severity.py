"""
Severity enumeration

Ordered message levels used for filtering and for the display tag.
"""

from enum import IntEnum
from typing import Dict


class Severity(IntEnum):
    """
    Severity of a log message.

    DEBUG is the lowest level. TODO sorts above FATAL but carries no
    runtime behavior of its own; it marks follow-up work.
    """

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    FATAL = 4
    TODO = 5

    def __str__(self) -> str:
        """String representation of severity."""
        return self.name

    @classmethod
    def from_string(cls, name: str) -> "Severity":
        """
        Convert string to Severity.

        Args:
            name: Severity name (case-insensitive, "WARN" accepted)

        Returns:
            Severity enum value

        Raises:
            ValueError: If name is not a valid severity
        """
        key = name.strip().upper()
        key = SEVERITY_ALIASES.get(key, key)
        if key in cls.__members__:
            return cls[key]
        raise ValueError(f"Invalid severity: {name}")

    @property
    def tag(self) -> str:
        """Bracketed display label, e.g. ``[INFO]``."""
        return f"[{self.name}]"

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this severity.

        Returns:
            ANSI escape sequence
        """
        return SEVERITY_COLORS.get(self, RESET_CODE)

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return RESET_CODE


RESET_CODE = "\033[0m"

SEVERITY_COLORS: Dict[Severity, str] = {
    Severity.DEBUG: "\033[36m",     # Cyan
    Severity.INFO: "\033[32m",      # Green
    Severity.WARNING: "\033[33m",   # Yellow
    Severity.ERROR: "\033[31m",     # Red
    Severity.FATAL: "\033[1;31m",   # Bold red
    Severity.TODO: "\033[35m",      # Magenta
}

SEVERITY_ALIASES: Dict[str, str] = {
    "WARN": "WARNING",
    "CRITICAL": "FATAL",
}
