"""
Binary Reader

Decodes the byte-level layouts produced by ``BinaryWriter``. The reader
tracks its offset so callers can slice whatever follows a varint prefix.
"""

import builtins
from typing import Tuple

from ..runtime.errors import EncodingError


class BinaryReader:
    """
    Sequential binary reader over an immutable buffer.
    """

    def __init__(self, buf: builtins.bytes):
        """
        Initialize reader with byte buffer.

        Args:
            buf: Byte buffer to read from
        """
        self._buf = buf
        self._off = 0

    @property
    def eof(self) -> bool:
        """True if at end of buffer."""
        return self._off >= len(self._buf)

    @property
    def offset(self) -> int:
        """Number of bytes consumed so far."""
        return self._off

    def u8(self) -> int:
        """
        Read unsigned 8-bit integer.

        Returns:
            Unsigned 8-bit integer value
        """
        if self._off >= len(self._buf):
            raise EncodingError("Buffer overflow: attempting to read beyond end")
        val = self._buf[self._off]
        self._off += 1
        return val

    def uvarint(self) -> int:
        """
        Read unsigned varint in ULEB128 format.

        Returns:
            Decoded unsigned integer value
        """
        x = 0
        s = 0
        while True:
            if self._off >= len(self._buf):
                raise EncodingError("Buffer overflow: attempting to read varint beyond end")
            b = self.u8()
            if b < 0x80:
                x |= b << s
                break
            x |= (b & 0x7F) << s
            s += 7
        return x

    def bytes(self, n: int) -> builtins.bytes:
        """
        Read n bytes from buffer.

        Args:
            n: Number of bytes to read

        Returns:
            Bytes of specified length
        """
        if self._off + n > len(self._buf):
            raise EncodingError(f"Buffer overflow: attempting to read {n} bytes beyond end")
        out = self._buf[self._off : self._off + n]
        self._off += n
        return out

    def remaining(self) -> builtins.bytes:
        """Read everything left in the buffer."""
        out = self._buf[self._off :]
        self._off = len(self._buf)
        return out


def decode_varint(buf: bytes) -> Tuple[int, int]:
    """
    Decode a ULEB128 varint at the start of ``buf``.

    Returns:
        Tuple of (value, number of bytes consumed)
    """
    reader = BinaryReader(buf)
    value = reader.uvarint()
    return value, reader.offset
