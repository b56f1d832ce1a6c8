"""Safe output writing utilities for the repotree CLI.

This module provides a line-oriented writing interface that reports a closed
output pipe as BrokenPipeError, whatever the platform's errno for it.
"""

import errno
import os
import types
from typing import Optional, Type


class SafeWriter:
    """Safe writing interface for tree output.

    Writes go straight to a file descriptor as UTF-8 so that lines appear
    immediately, in order with the interactive prompts. Undecodable file names
    arrive from os.listdir as surrogate escapes and are written back out as
    their original bytes.

    Attributes:
        fd: The file descriptor being written to. It is not owned by the writer.
    """

    def __init__(self, fd: int):
        """Initialize the safe writer.

        Args:
            fd: File descriptor for writing output, usually ``sys.stdout.fileno()``.

        Raises:
            TypeError: If ``fd`` is not an integer.
        """
        if not isinstance(fd, int):
            raise TypeError(f"Expected a file descriptor, got {type(fd).__name__}")
        self.fd = fd
        self._closed = False

    def write(self, data: str) -> None:
        """Write data to the underlying descriptor.

        Args:
            data: String data to write.

        Raises:
            BrokenPipeError: If the pipe is broken.
            OSError: If an I/O error occurs during writing.
            ValueError: If attempting to write to a closed writer.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        encoded = data.encode("utf-8", errors="surrogateescape")
        try:
            while encoded:
                written = os.write(self.fd, encoded)
                encoded = encoded[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def write_line(self, line: str) -> None:
        """Write ``line`` followed by a newline."""
        self.write(line + "\n")

    def close(self) -> None:
        """Mark the writer as closed. The descriptor itself is left open."""
        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        self.close()
