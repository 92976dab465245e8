"""
Runtime types shared across the SDK: addresses and errors.
"""

from .address import (
    ADDRESS_CONTRACT_PREFIX,
    ADDRESS_USER_PREFIX,
    Address,
    AddressCategory,
)
from .errors import ErrorCode, ErrorHandler, MassaError

__all__ = [
    "ADDRESS_CONTRACT_PREFIX",
    "ADDRESS_USER_PREFIX",
    "Address",
    "AddressCategory",
    "ErrorCode",
    "ErrorHandler",
    "MassaError",
]
