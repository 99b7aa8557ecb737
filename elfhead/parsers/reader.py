"""
Bounds-checked field reads over an in-memory buffer.

Every read states its offset and width up front and is refused with
:class:`~elfhead.core.errors.TruncatedInput` when it would end past the
validated limit, so :func:`struct.unpack_from` never sees an
out-of-range offset.
"""

from __future__ import annotations

import struct

from elfhead.core.errors import TruncatedInput


class FieldReader:
    """Read fixed-width integers at fixed offsets from *data*.

    Args:
        data: The raw bytes (any buffer supporting the buffer protocol).
        endian: :mod:`struct` byte-order prefix, ``"<"`` or ``">"``.
        limit: Number of leading bytes the reader may touch.  Defaults to
               the full buffer length and is clamped to it.
    """

    __slots__ = ("_data", "_endian", "_limit")

    _FORMATS: dict[int, str] = {1: "B", 2: "H", 4: "I", 8: "Q"}

    def __init__(self, data: bytes, endian: str = "<", limit: int | None = None) -> None:
        self._data = data
        self._endian = endian
        size = len(data)
        self._limit = size if limit is None else min(limit, size)

    def require(self, end: int, what: str = "ELF header") -> None:
        """Fail unless the first *end* bytes are readable."""
        if end > self._limit:
            raise TruncatedInput(end, self._limit, what)

    def uint(self, offset: int, size: int) -> int:
        """Unsigned integer of *size* bytes (1, 2, 4 or 8) at *offset*."""
        fmt = self._FORMATS[size]
        self.require(offset + size)
        return struct.unpack_from(f"{self._endian}{fmt}", self._data, offset)[0]

    def u8(self, offset: int) -> int:
        return self.uint(offset, 1)

    def u16(self, offset: int) -> int:
        return self.uint(offset, 2)

    def u32(self, offset: int) -> int:
        return self.uint(offset, 4)

    def raw(self, offset: int, size: int) -> bytes:
        """Copy *size* bytes starting at *offset*."""
        self.require(offset + size)
        return bytes(self._data[offset:offset + size])
