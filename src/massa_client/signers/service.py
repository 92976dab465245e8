"""
Message signing and verification.

``SigningService`` turns a backend's raw primitives into the Massa signing
protocol: the BLAKE3 digest of the data is signed with the account's secret
key, and the signature is rendered as
``base58check(varint(public_key.version) ++ signature)``.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Tuple, Union

from ..codec.base58check import checksum_decode, checksum_encode
from ..codec.hashes import hash_blake3
from ..codec.reader import BinaryReader
from ..codec.writer import BinaryWriter
from ..crypto.keys import KEYS_VERSION_NUMBER, PublicKey, SecretKey
from ..runtime.errors import (
    EncodingError,
    MassaError,
    NoPrivateKeyError,
    NoPublicKeyError,
    SignatureLengthError,
    VerificationFailedError,
)
from .ed25519 import SIGNATURE_SIZE, Ed25519Backend
from .signer import SigningBackend

if TYPE_CHECKING:
    from ..keys.account import Account

logger = logging.getLogger(__name__)

def encode_signature(version: int, signature: bytes) -> str:
    """Render a signature in its versioned base58check text form."""
    writer = BinaryWriter()
    writer.uvarint(version)
    writer.bytes(signature)
    return checksum_encode(writer.to_bytes())

def decode_signature(text: str) -> Tuple[int, bytes]:
    """
    Parse a signature text.

    Returns:
        Tuple of (version, raw signature bytes)

    Raises:
        EncodingError: On malformed base58, checksum failure or wrong length
    """
    reader = BinaryReader(checksum_decode(text))
    version = reader.uvarint()
    signature = reader.remaining()
    if len(signature) != SIGNATURE_SIZE:
        raise EncodingError(f"Invalid signature length. Expected {SIGNATURE_SIZE}, got {len(signature)}")
    return version, signature

def _to_bytes(data: Union[str, bytes]) -> bytes:
    if isinstance(data, str):
        return data.encode('utf-8')
    return bytes(data)

@dataclass(frozen=True)
class SignedMessage:
    """Signature produced by ``SigningService.sign_message``."""

    public_key: PublicKey
    signature: bytes = field(repr=False)
    base58_encoded: str

    def __post_init__(self):
        if len(self.signature) != SIGNATURE_SIZE:
            raise SignatureLengthError(SIGNATURE_SIZE, len(self.signature))

    def to_dict(self) -> Dict[str, str]:
        """Wire form with text encodings."""
        return {
            "public_key": self.public_key.to_string(),
            "signature": self.base58_encoded,
        }

class SigningService:
    """
    Signing and verification on behalf of accounts.

    The backend is fixed at construction; pass a fake backend in tests to
    exercise failure paths.
    """

    def __init__(self, backend: Optional[SigningBackend] = None):
        self.backend = backend or Ed25519Backend()

    def generate_secret_key(self, version: int = KEYS_VERSION_NUMBER) -> SecretKey:
        """Create a new random secret key."""
        return SecretKey(version, self.backend.generate_secret())

    def derive_public_key(self, secret_key: SecretKey) -> PublicKey:
        """Derive the public key of a secret key; the version is inherited."""
        return PublicKey(secret_key.version, self.backend.derive_public_key(secret_key.bytes))

    def sign(self, secret_key: SecretKey, digest: bytes) -> bytes:
        return self.backend.sign(secret_key.bytes, digest)

    def verify(self, signature: bytes, digest: bytes, public_key_bytes: bytes) -> bool:
        return self.backend.verify(signature, digest, public_key_bytes)

    def sign_message(self, data: Union[str, bytes], account: "Account") -> SignedMessage:
        """
        Sign arbitrary data with an account's secret key.

        Args:
            data: Text (UTF-8 encoded) or raw bytes
            account: Account holding both secret and public key

        Returns:
            SignedMessage

        Raises:
            NoPrivateKeyError: If the account has no secret key
            NoPublicKeyError: If the account has no public key
            SignatureLengthError: If the backend returned a non 64-byte signature
            VerificationFailedError: If the fresh signature does not verify
        """
        secret_key = getattr(account, "secret_key", None)
        public_key = getattr(account, "public_key", None)
        if secret_key is None:
            raise NoPrivateKeyError()
        if public_key is None:
            raise NoPublicKeyError()

        digest = hash_blake3(_to_bytes(data))
        signature = self.sign(secret_key, digest)
        if len(signature) != SIGNATURE_SIZE:
            raise SignatureLengthError(SIGNATURE_SIZE, len(signature))

        # TODO: drop this self-check once the backend is trusted to never
        # return a signature that fails against its own derived key.
        if not self.verify(signature, digest, public_key.bytes):
            raise VerificationFailedError(details={"public_key": public_key.to_string()})

        return SignedMessage(
            public_key=public_key,
            signature=signature,
            base58_encoded=encode_signature(public_key.version, signature),
        )

    def verify_signature(self, data: Union[str, bytes],
                         signed_message: Union[SignedMessage, Mapping[str, Any]]) -> bool:
        """
        Check a signature over data.

        ``signed_message`` is either a ``SignedMessage`` or its wire form
        ``{"public_key": "P...", "signature": "..."}``. Undecodable input is
        logged and reported as an invalid signature.

        Returns:
            True if the signature is valid for the data and public key
        """
        try:
            if isinstance(signed_message, SignedMessage):
                public_key = signed_message.public_key
                signature = signed_message.signature
            else:
                public_key = PublicKey.from_string(signed_message["public_key"])
                _, signature = decode_signature(signed_message["signature"])
        except (MassaError, KeyError, TypeError) as e:
            logger.error(f"Signature verification failed: {e}")
            return False

        return self.verify(signature, hash_blake3(_to_bytes(data)), public_key.bytes)
