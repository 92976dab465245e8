"""
Tests for client configuration and the client facade.
"""

import pytest
from unittest.mock import AsyncMock, Mock

from massa_client import (
    BUILDNET_CHAIN_ID,
    MAINNET_CHAIN_ID,
    ClientConfig,
    MassaClient,
    RollBuy,
    create_client,
)
from massa_client.recovery import ExponentialBackoff
from massa_client.runtime.errors import ValidationError
from massa_client.transport import HttpTransport, Transport


class TestClientConfig:
    """Test ClientConfig."""

    def test_defaults(self):
        config = ClientConfig(endpoint="http://localhost:33035")
        assert config.timeout == 30.0
        assert config.period_offset == 5
        assert config.chain_id is None

    def test_for_network(self):
        assert ClientConfig.for_network("mainnet").chain_id == MAINNET_CHAIN_ID == 77658377
        assert ClientConfig.for_network("buildnet").chain_id == BUILDNET_CHAIN_ID == 77658366
        assert ClientConfig.for_network("local").chain_id is None

    def test_for_network_overrides(self):
        config = ClientConfig.for_network("BuildNet", timeout=5.0)
        assert config.timeout == 5.0
        assert config.endpoint.startswith("https://buildnet")

    def test_unknown_network(self):
        with pytest.raises(ValidationError):
            ClientConfig.for_network("moonnet")

    def test_invalid_values(self):
        with pytest.raises(ValidationError):
            ClientConfig(endpoint="http://localhost", chain_id=-1)
        with pytest.raises(ValidationError):
            ClientConfig(endpoint="http://localhost", period_offset=-1)

    def test_retry_policy(self):
        config = ClientConfig(endpoint="http://localhost", max_retries=4, retry_delay=0.5, retry_backoff=3.0)
        policy = config.retry_policy()
        assert isinstance(policy, ExponentialBackoff)
        assert policy.max_attempts == 4
        assert policy.base_delay == 0.5
        assert policy.factor == 3.0

    def test_retry_disabled(self):
        assert ClientConfig(endpoint="http://localhost", retry_enabled=False).retry_policy() is None


class TestMassaClient:
    """Test wiring of the client facade."""

    def test_default_transport(self):
        client = create_client(ClientConfig.for_network("buildnet"))
        assert isinstance(client.transport, HttpTransport)
        assert client.wallet.api is client.api
        assert client.wallet.chain_id == BUILDNET_CHAIN_ID
        assert client.submission.wallet is client.wallet

    @pytest.mark.asyncio
    async def test_buy_rolls_through_facade(self, base_account_data):
        transport = Mock(spec=Transport)
        transport.request = AsyncMock(side_effect=[
            {"next_slot": {"period": 10, "thread": 0}},
            ["O1rolls"],
        ])
        transport.close = AsyncMock()

        async with MassaClient(ClientConfig.for_network("buildnet"), transport) as client:
            client.wallet.set_base_account(base_account_data)
            assert await client.submission.buy_rolls(RollBuy(fee=0, amount=1)) == ["O1rolls"]

        method, params = transport.request.call_args.args
        assert method == "send_operations"
        assert params[0][0]["serialized_content"] == list(b"\x00\x0f\x01\x01")
        transport.close.assert_awaited_once()
