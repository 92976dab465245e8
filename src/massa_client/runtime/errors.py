"""
Massa Error Model

This module provides the error handling framework for the Massa Python SDK.
Every failure carries an ``ErrorCode`` so callers can tell retryable transport
problems from fatal protocol or validation problems without matching text.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Error kinds raised by the SDK."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1
    INTERNAL = 2
    VALIDATION = 3

    # Encoding errors (100-199)
    ENCODING_ERROR = 100
    CHECKSUM_MISMATCH = 101
    INVALID_KEY_ENCODING = 102
    INVALID_ADDRESS_PREFIX = 103

    # Network errors (200-299)
    RPC_TRANSPORT = 200
    RPC_PROTOCOL = 201

    # Key material errors (300-399)
    KEY_MISMATCH = 300
    ADDRESS_MISMATCH = 301
    MISSING_SECRET_KEY = 302
    NO_PRIVATE_KEY = 303
    NO_PUBLIC_KEY = 304

    # Signature errors (400-499)
    SIGNATURE_LENGTH = 400
    VERIFICATION_FAILED = 401

    # Wallet errors (500-599)
    MAX_ACCOUNTS_EXCEEDED = 500
    SIGNER_NOT_FOUND = 501
    NO_SENDER_AVAILABLE = 502
    WALLET_INFO_MISMATCH = 503

    # Operation errors (600-699)
    INVALID_RECIPIENT_CATEGORY = 600


class MassaError(Exception):
    """
    Base class for all SDK errors.

    Provides structured error information with a stable error code.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize an SDK error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    @property
    def retryable(self) -> bool:
        """Whether retrying the failed call may succeed."""
        return self.code == ErrorCode.RPC_TRANSPORT

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class ValidationError(MassaError):
    """Invalid caller input."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.VALIDATION, details, cause)


class EncodingError(MassaError):
    """Data encoding/decoding errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.ENCODING_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class ChecksumMismatchError(EncodingError):
    """Base58 checksum did not verify."""

    def __init__(self, message: str = "Checksum mismatch",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.CHECKSUM_MISMATCH, details, cause)


class InvalidKeyEncodingError(EncodingError):
    """Malformed secret or public key text."""

    def __init__(self, message: str = "Invalid key encoding",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_KEY_ENCODING, details, cause)


class InvalidAddressPrefixError(EncodingError):
    """Address does not start with a known category prefix."""

    def __init__(self, message: str = "Invalid address prefix",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_ADDRESS_PREFIX, details, cause)


class KeyMismatchError(MassaError):
    """Supplied public key does not match the secret key."""

    def __init__(self, message: str = "Public key does not correspond to the private key",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.KEY_MISMATCH, details, cause)


class AddressMismatchError(MassaError):
    """Supplied address does not match the secret key."""

    def __init__(self, message: str = "Account address does not correspond to the address submitted",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.ADDRESS_MISMATCH, details, cause)


class MissingSecretKeyError(MassaError):
    """Account candidate carries no secret key."""

    def __init__(self, message: str = "Missing account private key",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.MISSING_SECRET_KEY, details, cause)


class NoPrivateKeyError(MassaError):
    """Signing requested from an account without a secret key."""

    def __init__(self, message: str = "No private key to sign the message with",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.NO_PRIVATE_KEY, details, cause)


class NoPublicKeyError(MassaError):
    """Signing requested from an account without a public key."""

    def __init__(self, message: str = "No public key to verify the signed message with",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.NO_PUBLIC_KEY, details, cause)


class SignatureLengthError(MassaError):
    """Signing primitive returned a signature of unexpected length."""

    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"Invalid signature length. Expected {expected}, got {actual}",
            ErrorCode.SIGNATURE_LENGTH,
            {"expected": expected, "actual": actual},
        )


class VerificationFailedError(MassaError):
    """Freshly produced signature did not verify."""

    def __init__(self, message: str = "Signature could not be verified with public key. Please inspect",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.VERIFICATION_FAILED, details, cause)


class MaxAccountsExceededError(MassaError):
    """Wallet capacity would be exceeded."""

    def __init__(self, limit: int, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            f"Maximum number of allowed wallet accounts exceeded {limit}",
            ErrorCode.MAX_ACCOUNTS_EXCEEDED,
            details,
        )
        self.limit = limit


class SignerNotFoundError(MassaError):
    """Signer address is not in the wallet."""

    def __init__(self, address: str):
        super().__init__(f"No signer account {address} found in wallet", ErrorCode.SIGNER_NOT_FOUND)
        self.address = address


class NoSenderAvailableError(MassaError):
    """No account available to send an operation."""

    def __init__(self, message: str = "No tx sender available"):
        super().__init__(message, ErrorCode.NO_SENDER_AVAILABLE)


class InvalidRecipientCategoryError(MassaError):
    """Recipient address category is not accepted for the operation."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.INVALID_RECIPIENT_CATEGORY, details)


class WalletInfoMismatchError(MassaError):
    """Node returned a different number of address records than requested."""

    def __init__(self, requested: int, received: int):
        super().__init__(
            "Requested wallets not fully retrieved. "
            f"Got {received}, expected: {requested}",
            ErrorCode.WALLET_INFO_MISMATCH,
            {"requested": requested, "received": received},
        )


class RpcTransportError(MassaError):
    """Network or transport level failure."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.RPC_TRANSPORT, details, cause)


class RpcProtocolError(MassaError):
    """Well-formed transport exchange with an invalid or error response."""

    def __init__(self, message: str, rpc_code: Optional[int] = None,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.RPC_PROTOCOL, details, cause)
        self.rpc_code = rpc_code


def error_from_response(response: Dict[str, Any]) -> Optional[MassaError]:
    """
    Create an error from a JSON-RPC response.

    Args:
        response: Decoded JSON-RPC response body

    Returns:
        RpcProtocolError or None if the response carries no error
    """
    if "error" not in response or response["error"] is None:
        return None

    error_data = response["error"]
    if not isinstance(error_data, dict):
        return RpcProtocolError(str(error_data))

    message = error_data.get("message", "Unknown error")
    rpc_code = error_data.get("code")
    data = error_data.get("data")
    details = data if isinstance(data, dict) else ({"data": data} if data is not None else None)
    return RpcProtocolError(message, rpc_code, details)


class ErrorHandler:
    """
    Utility class for handling and categorizing errors.
    """

    @staticmethod
    def is_retryable(error: Exception) -> bool:
        """
        Check if an error is retryable.

        Only transport failures are retried; protocol, validation and
        integrity failures are reported as-is.

        Args:
            error: Exception to check

        Returns:
            True if the error should be retried
        """
        if isinstance(error, MassaError):
            return error.retryable
        return False


__all__ = [
    "ErrorCode",
    "MassaError",
    "ValidationError",
    "EncodingError",
    "ChecksumMismatchError",
    "InvalidKeyEncodingError",
    "InvalidAddressPrefixError",
    "KeyMismatchError",
    "AddressMismatchError",
    "MissingSecretKeyError",
    "NoPrivateKeyError",
    "NoPublicKeyError",
    "SignatureLengthError",
    "VerificationFailedError",
    "MaxAccountsExceededError",
    "SignerNotFoundError",
    "NoSenderAvailableError",
    "InvalidRecipientCategoryError",
    "WalletInfoMismatchError",
    "RpcTransportError",
    "RpcProtocolError",
    "error_from_response",
    "ErrorHandler",
]
