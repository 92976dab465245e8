# Operation types submitted to the Massa network
# Amounts and fees are nanoMAS integers

from __future__ import annotations
from enum import IntEnum
from typing import Union

from pydantic import BaseModel, Field

from ..runtime.address import Address


class OperationType(IntEnum):
    """Operation type ids used in the compact encoding."""
    TRANSACTION = 0
    ROLL_BUY = 1
    ROLL_SELL = 2


class Transfer(BaseModel):
    """Coin transfer to a user address."""
    fee: int = Field(..., ge=0)
    amount: int = Field(..., ge=0)
    recipient_address: str = Field(..., alias="recipientAddress")

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def operation_type(self) -> OperationType:
        return OperationType.TRANSACTION

    @property
    def recipient(self) -> Address:
        return Address.from_string(self.recipient_address)


class RollBuy(BaseModel):
    """Purchase of staking rolls."""
    fee: int = Field(..., ge=0)
    amount: int = Field(..., ge=0)

    model_config = {"frozen": True}

    @property
    def operation_type(self) -> OperationType:
        return OperationType.ROLL_BUY


class RollSell(BaseModel):
    """Sale of staking rolls."""
    fee: int = Field(..., ge=0)
    amount: int = Field(..., ge=0)

    model_config = {"frozen": True}

    @property
    def operation_type(self) -> OperationType:
        return OperationType.ROLL_SELL


Operation = Union[Transfer, RollBuy, RollSell]
