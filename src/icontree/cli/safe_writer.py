"""Signal-aware output writing for the icontree CLI."""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union

from icontree.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes tree lines to a file descriptor or a file, stopping on interruption.

    Every write first checks whether SIGPIPE or SIGINT was received and turns a
    closed pipe into BrokenPipeError, so the caller has a single exception to
    stop on. Text is always encoded as UTF-8.

    Attributes:
        file: The file descriptor or path given at construction.
        fd: The file descriptor actually written to.
    """

    def __init__(self, file: Union[int, Path]):
        """Open the destination.

        Args:
            file: An already open file descriptor (e.g. ``sys.stdout.fileno()``),
                or a path to create or truncate.
        """
        self.file = file
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        else:
            self._file_obj = Path(file).open("w", encoding="utf-8")
            self.fd = self._file_obj.fileno()

    def write(self, data: str) -> None:
        """Write ``data`` unless the process has been interrupted.

        Raises:
            BrokenPipeError: If a signal was received or the pipe is closed.
            OSError: For any other write failure.
        """
        if signal_handler.interrupted:
            raise BrokenPipeError()

        payload = data.encode("utf-8")
        try:
            # os.write may accept only part of the buffer
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def close(self) -> None:
        """Close the file this writer opened; descriptors passed in are left open."""
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            self.close()
        except OSError:
            # An exception from the with block takes precedence
            if exc_type is None:
                raise
