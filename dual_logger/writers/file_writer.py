"""File writer"""

from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO


def session_filename(
    started: datetime,
    filename_format: str = "%Y-%m-%d_%H-%M-%S",
    extension: str = ".log",
    index: int = 0,
) -> str:
    """
    Build the file name for one logging session.

    Args:
        started: Session start time
        filename_format: strftime format for the stem
        extension: File extension including the dot
        index: Collision counter; 0 means no suffix

    Returns:
        File name such as ``2024-05-01_12-30-00.log`` or
        ``2024-05-01_12-30-00_1.log``
    """
    stem = started.strftime(filename_format)
    if index:
        stem = f"{stem}_{index}"
    return f"{stem}{extension}"


class FileWriter:
    """
    Write formatted lines to a file.

    Every line is flushed as soon as it is written so the most recent
    output survives a crash of the host process.
    """

    def __init__(
        self,
        filepath: str,
        mode: str = "a",
        encoding: str = "utf-8",
        errors: str = "backslashreplace",
    ):
        """
        Initialize file writer.

        Args:
            filepath: Path to log file
            mode: File open mode (default: 'a' for append)
            encoding: File encoding (default: 'utf-8')
            errors: Encoding error handler; characters the encoding cannot
                    represent are escaped rather than raising

        Raises:
            OSError: If the directory or file cannot be created
        """
        self.filepath = Path(filepath)
        self.mode = mode
        self.encoding = encoding
        self.errors = errors
        self._file: Optional[TextIO] = None
        self._open()

    @classmethod
    def open_session(
        cls,
        directory: Path,
        started: Optional[datetime] = None,
        filename_format: str = "%Y-%m-%d_%H-%M-%S",
        extension: str = ".log",
        encoding: str = "utf-8",
        max_attempts: int = 1000,
    ) -> "FileWriter":
        """
        Create a new, uniquely named session file in ``directory``.

        The directory is created if missing. Existing files are never
        reused: a numeric suffix is added until an unused name is found.

        Raises:
            OSError: If the directory or file cannot be created
        """
        started = started or datetime.now()
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)

        for index in range(max_attempts):
            path = directory / session_filename(started, filename_format, extension, index)
            try:
                return cls(str(path), mode="x", encoding=encoding)
            except FileExistsError:
                continue

        raise FileExistsError(f"No free log file name in {directory}")

    def _open(self):
        """Open log file."""
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(
            self.filepath, self.mode, encoding=self.encoding, errors=self.errors
        )

    @property
    def is_open(self) -> bool:
        """True while the underlying file handle is open."""
        return self._file is not None

    def write(self, line: str):
        """Write one line to file and flush it."""
        if self._file:
            self._file.write(line + "\n")
            self._file.flush()

    def flush(self):
        """Flush file buffer."""
        if self._file:
            self._file.flush()

    def close(self):
        """Close file."""
        if self._file:
            try:
                self._file.close()
            finally:
                self._file = None
