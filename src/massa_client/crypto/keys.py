"""
Versioned key material and its text encoding.

- Secret key text: ``S`` + base58check(varint(version) ++ 32 secret bytes)
- Public key text: ``P`` + base58check(varint(version) ++ 32 public bytes)

Key objects are immutable. Deriving a public key from a secret key needs a
signing backend and lives in ``massa_client.signers``.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from ..codec.base58check import checksum_decode, checksum_encode
from ..codec.reader import BinaryReader
from ..codec.writer import BinaryWriter
from ..runtime.errors import EncodingError, InvalidKeyEncodingError

SECRET_KEY_PREFIX = "S"
PUBLIC_KEY_PREFIX = "P"
KEY_SIZE = 32
KEYS_VERSION_NUMBER = 0


def _encode_key(prefix: str, version: int, key_bytes: bytes) -> str:
    writer = BinaryWriter()
    writer.uvarint(version)
    writer.bytes(key_bytes)
    return prefix + checksum_encode(writer.to_bytes())


def _decode_key(prefix: str, text: str, kind: str):
    if not isinstance(text, str) or not text:
        raise InvalidKeyEncodingError(f"Invalid {kind}: expected a non-empty string")
    if not text.startswith(prefix):
        raise InvalidKeyEncodingError(
            f"Invalid {kind} prefix '{text[:1]}'. Expected '{prefix}'"
        )
    try:
        reader = BinaryReader(checksum_decode(text[len(prefix):]))
        version = reader.uvarint()
    except EncodingError as e:
        raise InvalidKeyEncodingError(f"Invalid {kind} encoding: {e.message}", cause=e)

    key_bytes = reader.remaining()
    if len(key_bytes) != KEY_SIZE:
        raise InvalidKeyEncodingError(
            f"Invalid {kind} length: expected {KEY_SIZE} bytes, got {len(key_bytes)}"
        )
    return version, key_bytes


@dataclass(frozen=True)
class SecretKey:
    """Secret key seed with its encoding version."""

    version: int
    bytes: bytes = field(repr=False)

    def __post_init__(self):
        if len(self.bytes) != KEY_SIZE:
            raise InvalidKeyEncodingError(
                f"Secret key must be {KEY_SIZE} bytes, got {len(self.bytes)}"
            )

    @classmethod
    def from_string(cls, text: str) -> SecretKey:
        """Parse an ``S``-prefixed secret key."""
        version, key_bytes = _decode_key(SECRET_KEY_PREFIX, text, "secret key")
        return cls(version, key_bytes)

    def to_string(self) -> str:
        """Text form, used only to persist freshly generated keys."""
        return _encode_key(SECRET_KEY_PREFIX, self.version, self.bytes)


@dataclass(frozen=True)
class PublicKey:
    """Public key with its encoding version."""

    version: int
    bytes: bytes

    def __post_init__(self):
        if len(self.bytes) != KEY_SIZE:
            raise InvalidKeyEncodingError(
                f"Public key must be {KEY_SIZE} bytes, got {len(self.bytes)}"
            )

    @classmethod
    def from_string(cls, text: str) -> PublicKey:
        """Parse a ``P``-prefixed public key."""
        version, key_bytes = _decode_key(PUBLIC_KEY_PREFIX, text, "public key")
        return cls(version, key_bytes)

    def to_string(self) -> str:
        return _encode_key(PUBLIC_KEY_PREFIX, self.version, self.bytes)

    def to_bytes(self):
        """Versioned binary form: varint(version) ++ key bytes."""
        writer = BinaryWriter()
        writer.uvarint(self.version)
        writer.bytes(self.bytes)
        return writer.to_bytes()

    def __str__(self) -> str:
        return self.to_string()
