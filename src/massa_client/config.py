"""
Client configuration.

``ClientConfig`` holds the node endpoint, the chain the client signs for
and the retry settings applied to every RPC call.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional

from .recovery.retry import ExponentialBackoff, RetryPolicy
from .runtime.errors import ValidationError

MAINNET_CHAIN_ID = 77658377
BUILDNET_CHAIN_ID = 77658366

DEFAULT_PERIOD_OFFSET = 5

# Well-known networks: name -> (endpoint, chain id)
NETWORKS = {
    'mainnet': ('https://mainnet.massa.net/api/v2', MAINNET_CHAIN_ID),
    'buildnet': ('https://buildnet.massa.net/api/v2', BUILDNET_CHAIN_ID),
    'local': ('http://127.0.0.1:33035', None),
}


@dataclass
class ClientConfig:
    """Configuration for the Massa client."""

    endpoint: str
    chain_id: Optional[int] = None
    timeout: float = 30.0
    period_offset: int = DEFAULT_PERIOD_OFFSET
    max_retries: int = 3
    retry_delay: float = 1.0
    retry_backoff: float = 2.0
    retry_enabled: bool = True
    debug: bool = False

    def __post_init__(self):
        if self.chain_id is not None and (isinstance(self.chain_id, bool) or self.chain_id < 0):
            raise ValidationError(f"Invalid chain id: {self.chain_id!r}")
        if self.period_offset < 0:
            raise ValidationError(f"Period offset must be non-negative, got {self.period_offset}")
        if self.max_retries < 1:
            raise ValidationError(f"max_retries must be at least 1, got {self.max_retries}")
        if self.debug:
            logging.getLogger('massa_client').setLevel(logging.DEBUG)

    @classmethod
    def for_network(cls, network: str, **kwargs) -> ClientConfig:
        """
        Build a configuration for a well-known network.

        Args:
            network: 'mainnet', 'buildnet' or 'local'
            **kwargs: Overrides for the remaining fields

        Returns:
            ClientConfig
        """
        try:
            endpoint, chain_id = NETWORKS[network.lower()]
        except KeyError:
            raise ValidationError(f"Unknown network: {network}", details={"known": sorted(NETWORKS)})
        kwargs.setdefault('chain_id', chain_id)
        return cls(endpoint=endpoint, **kwargs)

    def retry_policy(self) -> Optional[RetryPolicy]:
        """Retry policy matching these settings, or None when retries are disabled."""
        if not self.retry_enabled:
            return None
        return ExponentialBackoff(
            max_attempts=self.max_retries,
            base_delay=self.retry_delay,
            factor=self.retry_backoff,
        )
