"""Console writer"""

import sys
from typing import Optional, TextIO


class ConsoleWriter:
    """Write formatted lines to a console stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        """
        Initialize console writer.

        Args:
            stream: Output stream (default: sys.stdout, resolved per write
                    so redirection after construction is honored)
        """
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        """Stream the next line will be written to."""
        return self._stream if self._stream is not None else sys.stdout

    def write(self, line: str):
        """Write one line to the console."""
        stream = self.stream
        stream.write(line + "\n")
        stream.flush()

    def flush(self):
        """Flush stream."""
        self.stream.flush()
