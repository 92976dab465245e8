# Response record types for the Massa node JSON-RPC API

from __future__ import annotations
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Slot(BaseModel):
    """Position in chain time."""
    period: int
    thread: int

    model_config = ConfigDict(extra="allow")


class NodeStatus(BaseModel):
    """Subset of ``get_status`` used to compute operation expiry."""
    node_id: Optional[str] = None
    version: Optional[str] = None
    current_cycle: Optional[int] = None
    chain_id: Optional[int] = None
    last_slot: Optional[Slot] = None
    next_slot: Slot

    model_config = ConfigDict(extra="allow")


class AddressInfo(BaseModel):
    """One record of ``get_addresses``; balances are decimal MAS strings."""
    address: str
    thread: int = 0
    final_balance: str = "0"
    candidate_balance: str = "0"
    final_roll_count: int = 0
    candidate_roll_count: int = 0
    created_blocks: List[Any] = Field(default_factory=list)
    created_endorsements: List[Any] = Field(default_factory=list)
    created_operations: List[Any] = Field(default_factory=list)
    cycle_infos: List[Any] = Field(default_factory=list)
    deferred_credits: List[Any] = Field(default_factory=list)
    final_datastore_keys: List[Any] = Field(default_factory=list)
    candidate_datastore_keys: List[Any] = Field(default_factory=list)
    next_block_draws: List[Any] = Field(default_factory=list)
    next_endorsement_draws: List[Any] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")


class FullAddressInfo(AddressInfo):
    """Address record merged with the wallet's key material."""
    public_key: str
    secret_key: str


class Balance(BaseModel):
    """Final and candidate balances in nanoMAS."""
    final: int
    candidate: int
