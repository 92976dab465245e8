"""
MAS amount conversion.

On-chain amounts are integers of nanoMAS (10^-9 MAS). Node responses report
balances as decimal MAS strings.
"""

from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

from ..runtime.errors import ValidationError

MAS_DECIMALS = 9
NANO_PER_MAS = 10 ** MAS_DECIMALS

Amount = Union[str, int, float, Decimal]


def from_mas(value: Amount) -> int:
    """
    Convert a MAS amount to nanoMAS.

    Values with more than 9 decimals are rounded half-up.

    Args:
        value: MAS amount as str, int, float or Decimal

    Returns:
        Integer nanoMAS

    Raises:
        ValidationError: If the value is not a finite non-negative number
    """
    if isinstance(value, bool):
        raise ValidationError(f"Invalid MAS amount: {value!r}")
    try:
        # floats go through str() so 1.5234 stays 1.5234 rather than its binary expansion
        amount = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise ValidationError(f"Invalid MAS amount: {value!r}", cause=e)

    if not amount.is_finite() or amount < 0:
        raise ValidationError(f"Invalid MAS amount: {value!r}")

    nano = (amount * NANO_PER_MAS).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return int(nano)


def to_mas(nano: int) -> Decimal:
    """
    Convert nanoMAS to MAS.

    Args:
        nano: Integer nanoMAS

    Returns:
        Decimal MAS without trailing zeros
    """
    value = Decimal(int(nano)) / NANO_PER_MAS
    normalized = value.normalize()
    # normalize() turns 2000000000 / 10^9 into 2E+0; keep plain notation
    if normalized == normalized.to_integral_value():
        return normalized.quantize(Decimal(1))
    return normalized
