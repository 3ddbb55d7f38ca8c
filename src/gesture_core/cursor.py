"""Forward-only big-endian reader over an immutable byte buffer."""
from __future__ import annotations

import struct

from gesture_core.errors import OutOfBoundsError, TextDecodeError
from gesture_core.protocol import FLOAT32_FMT, INT_FORMATS, TEXT_ENCODING, TEXT_TERMINATOR


class ByteCursor:
    """Sequential reader: every read either advances by exactly what it
    consumed or raises and leaves the offset where it was.
    """

    __slots__ = ("_data", "_offset")

    def __init__(self, data: bytes):
        self._data = bytes(data)
        self._offset = 0

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def remaining(self) -> int:
        return max(len(self._data) - self._offset, 0)

    def at_end(self) -> bool:
        return self._offset >= len(self._data)

    def _take(self, width: int) -> bytes:
        end = self._offset + width
        if end > len(self._data):
            raise OutOfBoundsError(
                f"Read of {width} bytes at offset {self._offset} exceeds buffer of {len(self._data)} bytes",
                offset=self._offset,
            )
        chunk = self._data[self._offset:end]
        self._offset = end
        return chunk

    def read_int(self, width: int) -> int:
        """Read a signed big-endian integer of 2, 4 or 8 bytes."""
        fmt = INT_FORMATS.get(width)
        if fmt is None:
            raise ValueError(f"Unsupported integer width {width} (expected 2, 4 or 8)")
        return struct.unpack(fmt, self._take(width))[0]

    def read_float32(self) -> float:
        return struct.unpack(FLOAT32_FMT, self._take(4))[0]

    def read_text(self) -> str:
        """Read UTF-8 text ending before the next NUL byte or at the end of the buffer.

        The NUL is left unread: in stores written by Android it is the high
        byte of the count that follows the name.
        """
        start = self._offset
        if start >= len(self._data):
            return ""
        end = self._data.find(TEXT_TERMINATOR, start)
        if end == -1:
            end = len(self._data)
        try:
            text = self._data[start:end].decode(TEXT_ENCODING)
        except UnicodeDecodeError as e:
            raise TextDecodeError(f"Undecodable text field at offset {start}: {e.reason}", offset=start) from e

        self._offset = end
        return text

    def skip(self, count: int) -> None:
        """Advance without reading. Bounds are enforced by the next read."""
        if count < 0:
            raise ValueError(f"Cannot skip backwards ({count} bytes)")
        self._offset += count
