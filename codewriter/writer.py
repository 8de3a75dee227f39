"""Writers that collect generated code in memory or send it to a file."""

from __future__ import annotations

import abc
import io
import sys
from typing import IO, Any

__all__ = [
    "CodeWriter",
    "StringCodeWriter",
    "FileCodeWriter",
    "get_file_writer",
    "get_string_writer",
]


def _format(fmt: str, args: tuple[Any, ...]) -> str:
    # Always apply the operator so that "%%" becomes "%" even with no arguments.
    return fmt % args


class CodeWriter(abc.ABC):
    """Destination for printf-style formatted code output."""

    @abc.abstractmethod
    def write(self, fmt: str, *args: Any) -> None:
        """Format ``fmt % args`` and append the result to the output."""

    @abc.abstractmethod
    def close(self) -> None:
        """Finish writing; raises OSError if any part of the output failed."""

    def __enter__(self) -> "CodeWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise


class StringCodeWriter(CodeWriter):
    """Collects all output in memory."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def write(self, fmt: str, *args: Any) -> None:
        self._parts.append(_format(fmt, args))

    def close(self) -> None:
        """Nothing to release; the collected text stays available."""

    def getvalue(self) -> str:
        """Return everything written so far."""
        return "".join(self._parts)


class FileCodeWriter(CodeWriter):
    """Writes output to an open stream, text or binary.

    Text written to a binary stream is encoded as UTF-8, so the bytes on disk
    are the same on every platform.
    """

    def __init__(self, stream: IO[Any], close_on_exit: bool) -> None:
        self._stream: IO[Any] | None = stream
        self._close_on_exit = close_on_exit
        self._binary = not isinstance(stream, io.TextIOBase)
        self._failed = False

    def write(self, fmt: str, *args: Any) -> None:
        if self._stream is None:
            raise ValueError("write to a closed code writer")
        text = _format(fmt, args)
        data = text.encode("utf-8") if self._binary else text
        try:
            self._stream.write(data)
        except OSError:
            self._failed = True
            raise

    def close(self) -> None:
        stream, self._stream = self._stream, None
        if stream is not None:
            try:
                if self._close_on_exit:
                    stream.close()
                else:
                    stream.flush()
            except OSError:
                self._failed = True
                raise
        if self._failed:
            raise OSError("errors occurred while writing code output")


def get_file_writer(output_file: str) -> FileCodeWriter:
    """Return a writer for ``output_file``; ``"-"`` means standard output.

    Raises OSError if the file cannot be opened for writing.
    """
    if output_file == "-":
        return FileCodeWriter(sys.stdout, close_on_exit=False)
    try:
        stream = open(output_file, "wb")
    except OSError as err:
        raise OSError(f"unable to open {output_file} for write") from err
    return FileCodeWriter(stream, close_on_exit=True)


def get_string_writer() -> StringCodeWriter:
    """Return a writer that keeps its output in memory."""
    return StringCodeWriter()