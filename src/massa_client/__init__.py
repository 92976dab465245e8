"""
Massa Python SDK

Key and address codecs, a bounded account wallet, message signing and
operation submission for the Massa network.
"""

from .api_client import PublicApiClient
from .config import BUILDNET_CHAIN_ID, MAINNET_CHAIN_ID, ClientConfig
from .crypto import PublicKey, SecretKey
from .facade import MassaClient, create_client
from .keys import (
    MAX_WALLET_ACCOUNTS,
    AccountCandidate,
    SignableAccount,
    UnverifiedAccount,
    Wallet,
    generate_account,
    verify_account,
)
from .recovery import ExponentialBackoff, FixedBackoff, RetryPolicy
from .runtime.address import Address, AddressCategory
from .runtime.errors import *
from .signers import SignedMessage, SigningBackend, SigningService
from .transport import HttpTransport, Transport
from .tx import OperationType, RollBuy, RollSell, SubmissionClient, Transfer, compact_operation
from .types import AddressInfo, Balance, FullAddressInfo, NodeStatus, Slot
from .utils import from_mas, to_mas

__version__ = "0.1.0"
__all__ = [
    # Client
    "ClientConfig",
    "MassaClient",
    "PublicApiClient",
    "create_client",
    "MAINNET_CHAIN_ID",
    "BUILDNET_CHAIN_ID",

    # Keys and addresses
    "PublicKey",
    "SecretKey",
    "Address",
    "AddressCategory",

    # Accounts and wallet
    "AccountCandidate",
    "SignableAccount",
    "UnverifiedAccount",
    "Wallet",
    "MAX_WALLET_ACCOUNTS",
    "generate_account",
    "verify_account",

    # Signing
    "SignedMessage",
    "SigningBackend",
    "SigningService",

    # Operations
    "OperationType",
    "Transfer",
    "RollBuy",
    "RollSell",
    "SubmissionClient",
    "compact_operation",

    # Transport and retry
    "Transport",
    "HttpTransport",
    "RetryPolicy",
    "ExponentialBackoff",
    "FixedBackoff",

    # Node records
    "AddressInfo",
    "Balance",
    "FullAddressInfo",
    "NodeStatus",
    "Slot",

    # Amounts
    "from_mas",
    "to_mas",
]
