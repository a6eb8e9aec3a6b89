"""Byte-level reader and writer used by the record codecs.

Both sides are plain cursors over ``struct``; reads past the end of the
buffer raise ``TruncatedInput`` instead of returning short data.
"""
from __future__ import annotations

import struct
from typing import Callable, Optional

from .errors import CodecError, TruncatedInput

Check = Callable[[], Optional[CodecError]]


class Deserializer:
    def __init__(self, data: bytes):
        self.data = memoryview(data)
        self.offset = 0

    def remaining(self) -> int:
        return len(self.data) - self.offset

    def abort_if(self, check: Check) -> "Deserializer":
        err = check()
        if err is not None:
            raise err
        return self

    def _take(self, n: int, what: str) -> memoryview:
        if self.remaining() < n:
            raise TruncatedInput(
                f"unable to read {what}: need {n} bytes, {self.remaining()} left",
                offset=self.offset,
            )
        chunk = self.data[self.offset:self.offset + n]
        self.offset += n
        return chunk

    def skip(self, n: int, what: str = "bytes") -> "Deserializer":
        self._take(n, what)
        return self

    def read_bytes(self, n: int, what: str = "bytes") -> bytes:
        return bytes(self._take(n, what))

    def read_u16(self, what: str = "uint16") -> int:
        (value,) = struct.unpack("<H", self._take(2, what))
        return value

    def done(self) -> int:
        """Return the number of bytes consumed."""
        return self.offset


class Serializer:
    def __init__(self):
        self.buf = bytearray()

    def abort_if(self, check: Check) -> "Serializer":
        err = check()
        if err is not None:
            raise err
        return self

    def write_u8(self, value: int) -> "Serializer":
        self.buf += struct.pack("<B", value)
        return self

    def write_bytes(self, data: bytes) -> "Serializer":
        self.buf += data
        return self

    def write_u16(self, value: int) -> "Serializer":
        self.buf += struct.pack("<H", value)
        return self

    def serialize(self) -> bytes:
        return bytes(self.buf)
