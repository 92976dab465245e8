"""
Binary Writer

Implements the byte-level encoding used by Massa keys, addresses and
operations: unsigned LEB128 varints, raw byte runs and fixed-width
big-endian integers.
"""

import struct
from typing import List


class BinaryWriter:
    """
    Append-only binary writer.

    Accumulates bytes and returns them as an immutable ``bytes`` object.
    """

    def __init__(self):
        """Initialize writer with empty byte buffer."""
        self._bb: List[int] = []

    def u8(self, v: int) -> None:
        """
        Write unsigned 8-bit integer.

        Args:
            v: Integer value to write (0-255)
        """
        self._bb.append(v & 0xFF)

    def u64be(self, v: int) -> None:
        """
        Write unsigned 64-bit integer in big-endian format.

        Used for the chain id prefix of operation signing payloads.

        Args:
            v: Integer value to write as 64-bit big-endian
        """
        self._bb.extend(struct.pack('>Q', v & 0xFFFFFFFFFFFFFFFF))

    def bytes(self, v: bytes) -> None:
        """
        Write raw bytes without length prefix.

        Args:
            v: Bytes to write directly
        """
        self._bb.extend(v)

    def uvarint(self, v: int) -> None:
        """
        Write unsigned varint in ULEB128 format.

        Args:
            v: Unsigned integer value to encode as varint

        Raises:
            ValueError: If v is negative
        """
        if v < 0:
            raise ValueError(f"uvarint cannot encode negative value {v}")
        x = v
        while x >= 0x80:
            self.u8((x & 0x7F) | 0x80)
            x >>= 7
        self.u8(x)

    def to_bytes(self) -> bytes:
        """
        Return accumulated bytes as immutable bytes object.

        Returns:
            Bytes containing all written data
        """
        return bytes(self._bb)


def encode_varint(value: int) -> bytes:
    """Encode a single unsigned integer as ULEB128."""
    writer = BinaryWriter()
    writer.uvarint(value)
    return writer.to_bytes()
