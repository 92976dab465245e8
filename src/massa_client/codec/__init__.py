"""
Massa Binary Codec Module

Key components:
- writer.py: Binary writer with varint/primitive encoding
- reader.py: Binary reader with varint/primitive decoding
- base58check.py: Checksummed base58 text encoding shared by keys, addresses and signatures
- hashes.py: BLAKE3 content hash
"""

from .base58check import checksum_decode, checksum_encode
from .hashes import hash_blake3
from .reader import BinaryReader, decode_varint
from .writer import BinaryWriter, encode_varint

__all__ = [
    "BinaryReader",
    "BinaryWriter",
    "checksum_decode",
    "checksum_encode",
    "decode_varint",
    "encode_varint",
    "hash_blake3",
]
