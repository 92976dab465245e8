"""
Binary encoding of operations.

The compact form is what gets signed and submitted:

    varint(fee) ++ varint(expiry_period) ++ varint(type_id) ++ payload

with ``recipient.to_bytes() ++ varint(amount)`` as the transfer payload and
``varint(amount)`` as the roll payload.
"""

from __future__ import annotations
from typing import Optional

from ..codec.writer import BinaryWriter
from ..crypto.keys import PublicKey
from ..runtime.errors import ValidationError
from .operations import Operation, RollBuy, RollSell, Transfer


def compact_operation(operation: Operation, expiry_period: int) -> bytes:
    """
    Encode an operation in its compact binary form.

    Args:
        operation: Transfer, RollBuy or RollSell
        expiry_period: Last period the operation is valid for

    Returns:
        Compact bytes
    """
    if expiry_period < 0:
        raise ValidationError(f"Expiry period must be non-negative, got {expiry_period}")

    writer = BinaryWriter()
    writer.uvarint(operation.fee)
    writer.uvarint(expiry_period)
    writer.uvarint(operation.operation_type)

    if isinstance(operation, Transfer):
        writer.bytes(operation.recipient.to_bytes())
        writer.uvarint(operation.amount)
    elif isinstance(operation, (RollBuy, RollSell)):
        writer.uvarint(operation.amount)
    else:
        raise ValidationError(f"Unsupported operation: {type(operation).__name__}")

    return writer.to_bytes()


def signing_payload(compact: bytes, public_key: PublicKey, chain_id: Optional[int] = None) -> bytes:
    """Bytes signed for an operation: optional chain id, versioned creator key, compact form."""
    writer = BinaryWriter()
    if chain_id is not None:
        writer.u64be(chain_id)
    writer.bytes(public_key.to_bytes())
    writer.bytes(compact)
    return writer.to_bytes()
