"""
Massa client facade.

Wires the transport, node API client, wallet and submission client
together from a single ``ClientConfig``.

Example:
    ```python
    from massa_client import ClientConfig, create_client

    async with create_client(ClientConfig.for_network("buildnet")) as client:
        client.wallet.set_base_account({"secretKey": "S1..."})
        op_ids = await client.submission.buy_rolls(RollBuy(fee=0, amount=1))
    ```
"""

from __future__ import annotations
import logging
from typing import Optional

from .api_client import PublicApiClient
from .config import ClientConfig
from .keys.wallet import Wallet
from .signers.service import SigningService
from .transport.http import HttpTransport, Transport
from .tx.submission import SubmissionClient

logger = logging.getLogger(__name__)


class MassaClient:
    """Bundle of the collaborators a Massa application needs."""

    def __init__(self, config: ClientConfig, transport: Optional[Transport] = None,
                 signing_service: Optional[SigningService] = None):
        """
        Initialize the client.

        Args:
            config: Client configuration
            transport: Transport override; defaults to HttpTransport on config.endpoint
            signing_service: Signing service override
        """
        self.config = config
        self.transport = transport or HttpTransport(config.endpoint, timeout=config.timeout)
        self.api = PublicApiClient(self.transport, config.retry_policy())
        self.wallet = Wallet(self.api, signing_service or SigningService(), config.chain_id)
        self.submission = SubmissionClient(self.wallet, self.api, config)
        logger.debug(f"Client created for {config.endpoint} (chain id {config.chain_id})")

    async def close(self) -> None:
        await self.api.close()

    async def __aenter__(self) -> MassaClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


def create_client(config: ClientConfig, transport: Optional[Transport] = None) -> MassaClient:
    """Create a client from configuration."""
    return MassaClient(config, transport)
