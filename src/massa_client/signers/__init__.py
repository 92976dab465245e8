"""
Signing layer for Massa accounts.

- signer.py: abstract signing backend
- ed25519.py: Ed25519 backend
- service.py: message signing protocol and SignedMessage
"""

from .ed25519 import Ed25519Backend
from .service import SignedMessage, SigningService, decode_signature, encode_signature
from .signer import SigningBackend

__all__ = [
    "Ed25519Backend",
    "SignedMessage",
    "SigningBackend",
    "SigningService",
    "decode_signature",
    "encode_signature",
]
