"""Safe output writing utilities for the dirtree CLI.

This module provides a writing interface that handles
signals and broken pipes gracefully.
"""

import errno
import os
import types
from pathlib import Path
from typing import Iterable, Optional, Type, Union

from dirtree.cli.signal_handler import signal_handler


class SafeWriter:
    """Signal-aware writer for the tree diagram.

    Writes UTF-8 text to a file descriptor (stdout by default) or to a file it
    opens itself. Filenames that are not valid UTF-8 are written back as their
    original bytes. Once SIGPIPE or SIGINT has been received, or the reader of a pipe
    has gone away, every write raises BrokenPipeError so the caller can stop.

    Attributes:
        file: Either a file path or file descriptor for output.
        fd: The actual file descriptor being written to.
    """

    def __init__(self, file: Union[int, Path, str]):
        """Initialize the safe writer.

        Args:
            file: Either a file descriptor (int) or a path to open for writing.

        Raises:
            TypeError: If file is neither an int nor a path.
        """
        self.file = file
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("w", encoding="utf-8")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write data, honoring received signals.

        Raises:
            BrokenPipeError: If SIGPIPE/SIGINT was received or the pipe is broken.
            OSError: If another I/O error occurs during writing.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted:
            raise BrokenPipeError()

        try:
            # Undecodable filename bytes come back from scandir as surrogate escapes
            os.write(self.fd, data.encode("utf-8", errors="surrogateescape"))
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def write_lines(self, lines: Iterable[str]) -> None:
        """Write each line followed by a newline."""
        for line in lines:
            self.write(line + "\n")

    def close(self) -> None:
        """Close the file if it was opened by this writer.

        The writer is marked as closed even if closing fails with a broken pipe.
        """
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
        """Close the writer, letting an exception from the with block take priority."""
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
