"""
Byte channels returned by channel factories.

Channels wrap an underlying binary stream and expose only the byte-stream
operations of their direction. They are io.RawIOBase objects, so callers can
layer io.BufferedReader or io.TextIOWrapper on top of them.
"""

import io
from typing import BinaryIO


class _Channel(io.RawIOBase):
    """Common release handling for readable and writable channels."""

    def __init__(self, raw: BinaryIO, path: str) -> None:
        super().__init__()
        self._raw = raw
        self.path = path

    def _check_open(self) -> None:
        if self.closed:
            raise ValueError(f"I/O operation on released channel: {self.path}")

    def close(self) -> None:
        """Release the channel and the underlying stream. Safe to call more than once."""
        if self.closed:
            return
        # IOBase.close flushes before marking the channel closed
        try:
            super().close()
        finally:
            self._raw.close()

    def __repr__(self) -> str:
        state = "released" if self.closed else "open"
        return f"{type(self).__name__}(path={self.path!r}, {state})"


class ReadableChannel(_Channel):
    """A sequential, read-only byte channel."""

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        self._check_open()
        return self._raw.readinto(buffer)


class SeekableReadableChannel(ReadableChannel):
    """
    A read-only byte channel that also supports random access.

    Returned by backends whose is_read_seek_efficient hint is true.
    """

    def seekable(self) -> bool:
        return True

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        self._check_open()
        return self._raw.seek(offset, whence)

    def tell(self) -> int:
        self._check_open()
        return self._raw.tell()


class WritableChannel(_Channel):
    """
    A sequential, write-only byte channel.

    Attributes:
        path: The path the channel writes to
        mime_type: The mime hint the channel was created with
    """

    def __init__(self, raw: BinaryIO, path: str, mime_type: str) -> None:
        super().__init__(raw, path)
        self.mime_type = mime_type

    def writable(self) -> bool:
        return True

    def write(self, data) -> int:
        self._check_open()
        return self._raw.write(data)

    def flush(self) -> None:
        if not self.closed:
            self._raw.flush()
