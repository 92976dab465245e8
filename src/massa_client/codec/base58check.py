"""
Base58Check text encoding.

Payloads are rendered with the Bitcoin base-58 alphabet after appending the
first four bytes of a double SHA-256 of the payload. Keys, addresses and
signatures all share this encoding.
"""

import hashlib

import base58

from ..runtime.errors import EncodingError, ChecksumMismatchError

CHECKSUM_LENGTH = 4


def _checksum(payload: bytes) -> bytes:
    return hashlib.sha256(hashlib.sha256(payload).digest()).digest()[:CHECKSUM_LENGTH]


def checksum_encode(payload: bytes) -> str:
    """
    Encode bytes as base58 text with an embedded checksum.

    Args:
        payload: Raw bytes to encode

    Returns:
        Base58Check string
    """
    return base58.b58encode(payload + _checksum(payload)).decode('ascii')


def checksum_decode(text: str) -> bytes:
    """
    Decode base58 text and verify its checksum.

    Args:
        text: Base58Check string

    Returns:
        Payload bytes without the checksum

    Raises:
        EncodingError: If the text is not valid base58 or too short
        ChecksumMismatchError: If the checksum does not verify
    """
    if not isinstance(text, str):
        raise EncodingError(f"Expected base58 string, got {type(text).__name__}")
    try:
        raw = base58.b58decode(text)
    except ValueError as e:
        raise EncodingError(f"Invalid base58 string: {e}", cause=e)

    if len(raw) < CHECKSUM_LENGTH:
        raise EncodingError(f"Base58Check payload too short: {len(raw)} bytes")

    payload, checksum = raw[:-CHECKSUM_LENGTH], raw[-CHECKSUM_LENGTH:]
    if _checksum(payload) != checksum:
        raise ChecksumMismatchError(f"Checksum mismatch for '{text}'")
    return payload
