"""
Content hashing.

BLAKE3 is the content hash for address derivation and for the digests that
get signed. It is distinct from the SHA-512 used inside Ed25519.
"""

from blake3 import blake3

DIGEST_SIZE = 32


def hash_blake3(data: bytes) -> bytes:
    """
    Compute the BLAKE3 hash of input bytes.

    Args:
        data: Input bytes to hash

    Returns:
        32-byte digest
    """
    return blake3(data).digest()
