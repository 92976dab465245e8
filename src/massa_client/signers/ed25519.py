"""
ED25519 signing backend.

Provides ED25519 signing functionality using the cryptography library.
"""

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey, Ed25519PublicKey

from .signer import SigningBackend

SIGNATURE_SIZE = 64


def _raw_public_bytes(public_key: Ed25519PublicKey) -> bytes:
    return public_key.public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )


class Ed25519Backend(SigningBackend):
    """ED25519 backend; signatures are deterministic."""

    def generate_secret(self) -> bytes:
        return Ed25519PrivateKey.generate().private_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PrivateFormat.Raw,
            encryption_algorithm=serialization.NoEncryption(),
        )

    def derive_public_key(self, secret: bytes) -> bytes:
        return _raw_public_bytes(Ed25519PrivateKey.from_private_bytes(secret).public_key())

    def sign(self, secret: bytes, digest: bytes) -> bytes:
        return Ed25519PrivateKey.from_private_bytes(secret).sign(digest)

    def verify(self, signature: bytes, digest: bytes, public_key: bytes) -> bool:
        """
        Verify a signature against a digest.

        Args:
            signature: Signature bytes to verify
            digest: 32-byte hash that was signed
            public_key: 32-byte public key

        Returns:
            True if signature is valid; False for a bad signature or a
            public key that cannot be loaded
        """
        try:
            Ed25519PublicKey.from_public_bytes(public_key).verify(signature, digest)
            return True
        except (InvalidSignature, ValueError):
            return False
