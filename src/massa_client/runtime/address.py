"""
Massa address handling.

User addresses are derived from public keys:

    AU + base58check(varint(version) ++ blake3(varint(version) ++ public_key))

Contract addresses share the layout under the ``AS`` prefix. The binary form
embedded in operations is ``category_byte ++ base58check_payload``.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import IntEnum

from ..codec.base58check import checksum_decode, checksum_encode
from ..codec.hashes import DIGEST_SIZE, hash_blake3
from ..codec.reader import BinaryReader
from ..codec.writer import BinaryWriter
from ..crypto.keys import PublicKey
from ..runtime.errors import EncodingError, InvalidAddressPrefixError

ADDRESS_USER_PREFIX = "AU"
ADDRESS_CONTRACT_PREFIX = "AS"
ADDRESS_PREFIX_LENGTH = 2


class AddressCategory(IntEnum):
    """Address category; the value is the discriminant byte of the binary form."""
    USER = 0
    CONTRACT = 1

    @property
    def prefix(self) -> str:
        return ADDRESS_USER_PREFIX if self is AddressCategory.USER else ADDRESS_CONTRACT_PREFIX


_PREFIXES = {
    ADDRESS_USER_PREFIX: AddressCategory.USER,
    ADDRESS_CONTRACT_PREFIX: AddressCategory.CONTRACT,
}


@dataclass(frozen=True)
class Address:
    """
    Parsed Massa address.

    Equality and hashing use the text form only. Parsing checks structure
    (prefix, checksum, version); it does not tie the digest to any key.
    """

    text: str
    version: int = field(compare=False)
    category: AddressCategory = field(compare=False)
    digest: bytes = field(compare=False, repr=False)

    @classmethod
    def from_string(cls, text: str) -> Address:
        """
        Parse an address string.

        Raises:
            InvalidAddressPrefixError: If the prefix is neither AU nor AS
            ChecksumMismatchError: If the base58 checksum does not verify
            EncodingError: If the payload is not valid base58 or the digest is not 32 bytes
        """
        if not isinstance(text, str):
            raise InvalidAddressPrefixError(f"Invalid address: expected string, got {type(text).__name__}")

        prefix = text[:ADDRESS_PREFIX_LENGTH]
        category = _PREFIXES.get(prefix)
        if category is None:
            raise InvalidAddressPrefixError(
                f"Invalid address prefix '{prefix}'. Expected '{ADDRESS_USER_PREFIX}' "
                f"for users or '{ADDRESS_CONTRACT_PREFIX}' for contracts."
            )

        reader = BinaryReader(checksum_decode(text[ADDRESS_PREFIX_LENGTH:]))
        version = reader.uvarint()
        digest = reader.remaining()
        if len(digest) != DIGEST_SIZE:
            raise EncodingError(
                f"Invalid address digest length: expected {DIGEST_SIZE} bytes, got {len(digest)}"
            )
        return cls(text, version, category, digest)

    @classmethod
    def from_public_key(cls, public_key: PublicKey) -> Address:
        """Derive the user address of a public key."""
        writer = BinaryWriter()
        writer.uvarint(public_key.version)
        version_bytes = writer.to_bytes()

        digest = hash_blake3(version_bytes + public_key.bytes)
        text = ADDRESS_USER_PREFIX + checksum_encode(version_bytes + digest)
        return cls(text, public_key.version, AddressCategory.USER, digest)

    @property
    def is_user(self) -> bool:
        return self.category is AddressCategory.USER

    @property
    def is_contract(self) -> bool:
        return self.category is AddressCategory.CONTRACT

    def to_bytes(self) -> bytes:
        """Binary form: category byte followed by the checksum-decoded payload."""
        writer = BinaryWriter()
        writer.u8(self.category)
        writer.bytes(checksum_decode(self.text[ADDRESS_PREFIX_LENGTH:]))
        return writer.to_bytes()

    def to_string(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text
