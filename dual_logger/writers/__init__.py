"""Writers module - Log output sinks"""

from dual_logger.writers.console_writer import ConsoleWriter
from dual_logger.writers.file_writer import FileWriter, session_filename

__all__ = ["ConsoleWriter", "FileWriter", "session_filename"]
