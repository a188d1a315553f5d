"""Reading whole files, or a fixed number of bytes, and writing them back."""

import os
from dataclasses import dataclass
from typing import Optional, Union

FILE_NOT_FOUND = "file not found"
READ_FAILURE = "read failure"
WRITE_FAILURE = "write failure"
CLOSE_FAILURE = "close failure"


class FileReadError(OSError):
    """Raised when a file cannot be opened, read or closed for reading."""

    def __init__(self, path, reason, detail=None):
        self.path = path
        self.reason = reason
        message = f"{os.fspath(path)}: {reason}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class FileWriteError(OSError):
    """Raised when a file cannot be opened, written or closed for writing.

    ``bytes_written`` tells how much reached the file before the failure.
    """

    def __init__(self, path, reason, detail=None, bytes_written=0):
        self.path = path
        self.reason = reason
        self.bytes_written = bytes_written
        message = f"{os.fspath(path)}: {reason}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


@dataclass
class FileContext:
    """A file name together with content and the number of bytes that count.

    Text content is stored as UTF-8. ``size_bytes`` defaults to the length of
    the content and may not exceed it.
    """

    filename: Union[str, "os.PathLike[str]"]
    content: bytes = b""
    size_bytes: Optional[int] = None

    def __post_init__(self):
        if isinstance(self.content, str):
            self.content = self.content.encode("utf-8")
        else:
            self.content = bytes(self.content)
        if self.size_bytes is None:
            self.size_bytes = len(self.content)
        if not 0 <= self.size_bytes <= len(self.content):
            raise ValueError(
                f"size_bytes {self.size_bytes} is outside the content length {len(self.content)}"
            )

    @property
    def text(self):
        """The counted part of the content decoded as UTF-8."""
        return self.content[: self.size_bytes].decode("utf-8")


def _read(path, nbytes):
    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise FileReadError(path, FILE_NOT_FOUND, exc.strerror) from exc
    try:
        data = handle.read() if nbytes is None else handle.read(nbytes)
    except OSError as exc:
        handle.close()
        raise FileReadError(path, READ_FAILURE, exc.strerror) from exc
    try:
        handle.close()
    except OSError as exc:
        raise FileReadError(path, CLOSE_FAILURE, exc.strerror) from exc
    return FileContext(path, data)


def read_file(path):
    """Read the whole file at ``path`` and return it as a FileContext."""
    return _read(path, None)


def read_file_exact(path, nbytes):
    """Read at most ``nbytes`` bytes from the start of the file at ``path``."""
    if nbytes < 0:
        raise ValueError("byte count must not be negative")
    return _read(path, nbytes)


def _write(context, nbytes):
    path = context.filename
    data = context.content[:nbytes]
    try:
        handle = open(path, "wb")
    except OSError as exc:
        raise FileWriteError(path, FILE_NOT_FOUND, exc.strerror) from exc
    try:
        written = handle.write(data)
    except OSError as exc:
        handle.close()
        raise FileWriteError(path, WRITE_FAILURE, exc.strerror) from exc
    if written < nbytes:
        handle.close()
        raise FileWriteError(path, WRITE_FAILURE, bytes_written=written)
    try:
        handle.close()
    except OSError as exc:
        raise FileWriteError(path, CLOSE_FAILURE, exc.strerror, written) from exc
    return written


def write_file(context):
    """Write the counted content of ``context`` to its file; return bytes written."""
    return _write(context, context.size_bytes)


def write_file_exact(context, nbytes):
    """Write the first ``nbytes`` bytes of ``context``'s content; return bytes written."""
    if nbytes < 0:
        raise ValueError("byte count must not be negative")
    if nbytes > len(context.content):
        raise FileWriteError(
            context.filename,
            WRITE_FAILURE,
            f"only {len(context.content)} bytes of content to write",
        )
    return _write(context, nbytes)