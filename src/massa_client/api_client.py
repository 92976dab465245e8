"""
Massa node API client

This module provides the client for the node JSON-RPC methods the SDK
needs: address queries, node status and operation submission. Every call
goes through the injected transport, wrapped by an optional retry policy.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional, Sequence

from pydantic import ValidationError as PydanticValidationError

from .recovery.retry import RetryPolicy
from .runtime.errors import RpcProtocolError
from .transport.http import Transport
from .types import AddressInfo, NodeStatus


class RpcMethod:
    """JSON-RPC method names."""
    GET_ADDRESSES = "get_addresses"
    GET_STATUS = "get_status"
    SEND_OPERATIONS = "send_operations"


class PublicApiClient:
    """
    Client for the node's public JSON-RPC API.

    Without a retry policy each call makes exactly one attempt and any
    failure propagates to the caller.
    """

    def __init__(self, transport: Transport, retry_policy: Optional[RetryPolicy] = None):
        """
        Initialize the API client.

        Args:
            transport: Request/response channel to the node
            retry_policy: Policy applied to each call, or None for a single attempt
        """
        self.transport = transport
        self.retry_policy = retry_policy
        self.logger = logging.getLogger(__name__)

    async def call(self, method: str, params: Any = None) -> Any:
        """
        Perform one RPC call under the active retry policy.

        Args:
            method: RPC method name
            params: Method parameters

        Returns:
            The raw ``result`` value
        """
        params = [] if params is None else params
        if self.retry_policy is None:
            return await self.transport.request(method, params)
        return await self.retry_policy.execute(self.transport.request, method, params)

    async def get_addresses(self, addresses: Sequence[str]) -> List[AddressInfo]:
        """
        Fetch address records, one per requested address, in request order.

        Args:
            addresses: Address strings

        Returns:
            List of AddressInfo
        """
        result = await self.call(RpcMethod.GET_ADDRESSES, [list(addresses)])
        if not isinstance(result, list):
            raise RpcProtocolError(f"Expected a list from {RpcMethod.GET_ADDRESSES}, got {type(result).__name__}")
        try:
            return [AddressInfo.model_validate(item) for item in result]
        except PydanticValidationError as e:
            raise RpcProtocolError(f"Malformed {RpcMethod.GET_ADDRESSES} record", cause=e)

    async def get_status(self) -> NodeStatus:
        """
        Returns the node status.

        Returns:
            NodeStatus
        """
        result = await self.call(RpcMethod.GET_STATUS)
        try:
            return NodeStatus.model_validate(result)
        except PydanticValidationError as e:
            raise RpcProtocolError(f"Malformed {RpcMethod.GET_STATUS} response", cause=e)

    async def send_operations(self, batches: List[List[Dict[str, Any]]]) -> List[str]:
        """
        Submit signed operations.

        Args:
            batches: List of batches, each a list of signed operation entries

        Returns:
            Operation ids, one per submitted operation
        """
        result = await self.call(RpcMethod.SEND_OPERATIONS, batches)
        if not isinstance(result, list) or not all(isinstance(op_id, str) for op_id in result):
            raise RpcProtocolError(f"Expected a list of operation ids from {RpcMethod.SEND_OPERATIONS}")

        expected = sum(len(batch) for batch in batches)
        if len(result) != expected:
            raise RpcProtocolError(
                f"Number of operation ids should be {expected}. Got {len(result)}",
                details={"expected": expected, "received": len(result)},
            )
        self.logger.debug(f"Submitted {expected} operation(s): {result}")
        return result

    async def close(self) -> None:
        await self.transport.close()
