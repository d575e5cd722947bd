"""Safe output writing utilities for the catlr CLI.

This module provides a safe writing interface that handles
signals and interruptions gracefully.
"""

import errno
import os
import types
from typing import Optional, Type, Union

from catlr.cli.signal_handler import signal_handler


class SafeWriter:
    """Signal-aware writer for listing output.

    Headers arrive as text and file contents as raw bytes; both are written straight
    to a file descriptor so that output from external tools is passed through
    unchanged. Writing stops with BrokenPipeError once SIGPIPE or SIGINT has been seen.
    The descriptor belongs to the caller and is not closed by the writer.

    Attributes:
        fd: The file descriptor being written to.
    """

    def __init__(self, fd: int):
        """Initialize the safe writer.

        Args:
            fd: File descriptor to write to.

        Raises:
            TypeError: If fd is not an int.
        """
        if not isinstance(fd, int):
            raise TypeError(f"Expected a file descriptor (int), got {type(fd).__name__}")
        self.fd = fd
        self._closed = False

    def write(self, data: Union[str, bytes]) -> None:
        """Safely write text (encoded as UTF-8) or bytes with signal checking.

        Args:
            data: Text or bytes to write.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received, or the pipe is broken.
            OSError: If an I/O error occurs during writing.
            ValueError: If attempting to write to a closed writer.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.sigpipe_received.is_set() or signal_handler.sigint_received.is_set():
            raise BrokenPipeError()

        payload = data.encode("utf-8") if isinstance(data, str) else data
        try:
            # os.write may write only part of the buffer
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def close(self) -> None:
        """Mark the writer as closed; further writes raise ValueError."""
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
