"""
Cryptographic primitives for the Massa network.

Provides versioned key material. Ed25519 operations live in the signing
backend.
"""

from .keys import KEYS_VERSION_NUMBER, PublicKey, SecretKey

__all__ = [
    "KEYS_VERSION_NUMBER",
    "PublicKey",
    "SecretKey",
]
