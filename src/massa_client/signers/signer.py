r"""
Signing backend interface.

A backend is the replaceable capability behind ``SigningService``: key
derivation, signing and verification over raw bytes. Tests inject fake
backends through the service constructor.
"""

from __future__ import annotations
from abc import ABC, abstractmethod


class SigningBackend(ABC):
    """
    Base signing backend.

    All methods work on raw key bytes; versioning and text encodings are
    handled by the caller.
    """

    @abstractmethod
    def generate_secret(self) -> bytes:
        """
        Generate fresh secret key material.

        Returns:
            32-byte secret seed
        """
        pass

    @abstractmethod
    def derive_public_key(self, secret: bytes) -> bytes:
        """
        Derive the public key of a secret seed.

        Args:
            secret: 32-byte secret seed

        Returns:
            32-byte public key
        """
        pass

    @abstractmethod
    def sign(self, secret: bytes, digest: bytes) -> bytes:
        """
        Sign a digest.

        Args:
            secret: 32-byte secret seed
            digest: 32-byte hash to sign

        Returns:
            Signature bytes
        """
        pass

    @abstractmethod
    def verify(self, signature: bytes, digest: bytes, public_key: bytes) -> bool:
        """
        Verify a signature against a digest.

        Must return False, not raise, for a well-formed but invalid signature.

        Args:
            signature: Signature bytes to verify
            digest: 32-byte hash that was signed
            public_key: 32-byte public key

        Returns:
            True if signature is valid
        """
        pass
