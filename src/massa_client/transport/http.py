"""
JSON-RPC transport.

``Transport`` is the black-box request/response function the API client
talks to. ``HttpTransport`` implements it with JSON-RPC 2.0 over HTTP using
an ``aiohttp`` session.
"""

from __future__ import annotations
import asyncio
import json
import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import aiohttp

from ..runtime.errors import RpcProtocolError, RpcTransportError, error_from_response

logger = logging.getLogger(__name__)


class Transport(ABC):
    """Request/response channel to a node."""

    @abstractmethod
    async def request(self, method: str, params: Any) -> Any:
        """
        Perform one RPC call.

        Args:
            method: RPC method name
            params: Method parameters

        Returns:
            The ``result`` member of the response

        Raises:
            RpcTransportError: On network failures (retryable)
            RpcProtocolError: On error responses or malformed bodies
        """
        pass

    async def close(self) -> None:
        """Release resources held by the transport."""
        return None


class HttpTransport(Transport):
    """
    JSON-RPC 2.0 over HTTP POST.

    The session is created on first use unless one is supplied; a supplied
    session is left open on ``close``.
    """

    def __init__(self, endpoint: str, timeout: float = 30.0,
                 session: Optional[aiohttp.ClientSession] = None):
        """
        Initialize the transport.

        Args:
            endpoint: Node JSON-RPC URL
            timeout: Total request timeout in seconds
            session: Optional shared aiohttp session
        """
        self.endpoint = endpoint
        self.timeout = timeout
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers={"Content-Type": "application/json", "Accept": "application/json"},
            )
            self._owns_session = True
        return self._session

    async def request(self, method: str, params: Any) -> Any:
        payload = {
            "jsonrpc": "2.0",
            "id": int(time.time() * 1000000),
            "method": method,
            "params": params,
        }
        logger.debug(f"Request: {method} -> {self.endpoint}")

        session = self._get_session()
        try:
            async with session.post(self.endpoint, json=payload) as response:
                if response.status >= 500:
                    raise RpcTransportError(
                        f"HTTP {response.status}: {response.reason}",
                        details={"method": method, "status": response.status},
                    )
                if response.status != 200:
                    raise RpcProtocolError(
                        f"HTTP {response.status}: {response.reason}",
                        details={"method": method, "status": response.status},
                    )
                text = await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise RpcTransportError(f"Network error calling {method}: {e}", cause=e)

        try:
            body: Dict[str, Any] = json.loads(text)
        except ValueError as e:
            raise RpcProtocolError(f"Invalid JSON in {method} response", cause=e)

        if not isinstance(body, dict):
            raise RpcProtocolError(f"Unexpected {method} response shape: {type(body).__name__}")

        error = error_from_response(body)
        if error is not None:
            raise error

        if "result" not in body:
            raise RpcProtocolError(f"Missing result in {method} response")
        return body["result"]

    async def close(self) -> None:
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None
