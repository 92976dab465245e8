"""
Shared fixtures: published key/address vectors and wired-up wallets
backed by mocked node APIs.
"""

import pytest
from unittest.mock import AsyncMock, Mock

from massa_client.api_client import PublicApiClient
from massa_client.keys.wallet import Wallet
from massa_client.signers.service import SigningService
from massa_client.types import NodeStatus, Slot

BASE_ACCOUNT = {
    "address": "AU1QRRX6o2igWogY8qbBtqLYsNzYNHwvnpMC48Y6CLCv4cXe9gmK",
    "secretKey": "S12XuWmm5jULpJGXBnkeBsuiNmsGi2F4rMiTvriCzENxBR4Ev7vd",
    "publicKey": "P129tbNd4oVMRsnFvQcgSq4PUAZYYDA1pvqtef2ER6W7JqgY1Bfg",
}

DERIVATION_VECTOR = {
    "secretKey": "S12syP5uCVEwaJwvXLqJyD1a2GqZjsup13UnhY6uzbtyu7ExXWZS",
    "publicKey": "P12c2wsKxEyAhPC4ouNsgywzM41VsNSuwH9JdMbRt9bM8ZsMLPQA",
    "address": "AU12KgrLq2vhMgi8aAwbxytiC4wXBDGgvTtqGTM5R7wEB9En8WBHB",
}

RECEIVER_SECRET_KEY = "S1eK3SEXGDAWN6pZhdr4Q7WJv6UHss55EB14hPy4XqBpiktfPu6"
CONTRACT_ADDRESS = "AS12KgrLq2vhMgi8aAwbxytiC4wXBDGgvTtqGTM5R7wEB9En8WBHB"

TEST_MESSAGE_SIGNATURE = (
    "1TXucC8nai7BYpAnMPYrotVcKCZ5oxkfWHb2ykKj2tXmaGMDL1XTU5AbC6Z13RH3q59F8QtbzKq4gzBphGPWpiDonownxE"
)


@pytest.fixture
def base_account_data():
    return dict(BASE_ACCOUNT)


@pytest.fixture
def signing_service():
    return SigningService()


@pytest.fixture
def mock_api():
    """PublicApiClient double with async RPC methods."""
    api = Mock(spec=PublicApiClient)
    api.get_addresses = AsyncMock(return_value=[])
    api.get_status = AsyncMock(
        return_value=NodeStatus(next_slot=Slot(period=1000, thread=3))
    )
    api.send_operations = AsyncMock(return_value=["O1opid"])
    return api


@pytest.fixture
def wallet(mock_api, signing_service):
    return Wallet(mock_api, signing_service)


@pytest.fixture
def wallet_with_base(wallet, base_account_data):
    wallet.set_base_account(base_account_data)
    return wallet
