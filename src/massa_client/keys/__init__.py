"""
Accounts and the wallet that stores them.
"""

from .account import (
    Account,
    AccountCandidate,
    SignableAccount,
    UnverifiedAccount,
    generate_account,
    verify_account,
)
from .wallet import MAX_WALLET_ACCOUNTS, Wallet

__all__ = [
    "Account",
    "AccountCandidate",
    "MAX_WALLET_ACCOUNTS",
    "SignableAccount",
    "UnverifiedAccount",
    "Wallet",
    "generate_account",
    "verify_account",
]
