r"""
Wallet management for Massa accounts.

An in-memory store of signable accounts keyed by address, with a selected
base account used as the default transaction sender. Callers own the
``Wallet`` instance; there is no process-wide wallet.

The store has no internal locking. Guard a shared instance externally when
several tasks mutate it concurrently.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

from ..api_client import PublicApiClient
from ..runtime.errors import (
    MassaError,
    MaxAccountsExceededError,
    SignerNotFoundError,
    ValidationError,
    WalletInfoMismatchError,
)
from ..signers.service import SignedMessage, SigningService
from ..types import Balance, FullAddressInfo
from ..utils.amounts import from_mas
from .account import SignableAccount, generate_account, verify_account

logger = logging.getLogger(__name__)

MAX_WALLET_ACCOUNTS = 256


def _normalize(address: str) -> str:
    return address.lower()


class Wallet:
    """
    Bounded set of signable accounts.

    At most ``MAX_WALLET_ACCOUNTS`` accounts are stored. Batches that would
    exceed the limit, or that contain an invalid account, are rejected
    before anything is inserted.
    """

    def __init__(self, api: Optional[PublicApiClient] = None,
                 signing_service: Optional[SigningService] = None,
                 chain_id: Optional[int] = None):
        """
        Initialize an empty wallet.

        Args:
            api: Node API client, needed for wallet_info and balances
            signing_service: Service used to derive keys and sign
            chain_id: Chain id the wallet signs for, if bound to a network
        """
        self.api = api
        self.signing_service = signing_service or SigningService()
        self.chain_id = chain_id
        self._accounts: Dict[str, SignableAccount] = {}
        self._base_account: Optional[SignableAccount] = None

    def __len__(self) -> int:
        return len(self._accounts)

    def __iter__(self) -> Iterator[SignableAccount]:
        return iter(list(self._accounts.values()))

    def __contains__(self, address: object) -> bool:
        return isinstance(address, str) and _normalize(address) in self._accounts

    @property
    def accounts(self) -> List[SignableAccount]:
        """Stored accounts in insertion order."""
        return list(self._accounts.values())

    def generate_account(self) -> SignableAccount:
        """Create a new random account without storing it."""
        return generate_account(self.signing_service)

    def account_from_secret_key(self, secret_key: str) -> SignableAccount:
        """Derive an account from secret key text without storing it."""
        return SignableAccount.from_secret_key(secret_key, self.signing_service)

    def add_accounts(self, candidates: Iterable[Any]) -> List[SignableAccount]:
        """
        Validate and insert accounts.

        Candidates already stored, or repeated within the batch, are skipped.

        Args:
            candidates: AccountCandidate objects, mappings or accounts

        Returns:
            Accounts actually inserted, in input order

        Raises:
            ValidationError, MissingSecretKeyError, KeyMismatchError,
            AddressMismatchError, InvalidKeyEncodingError: If any candidate is invalid
            MaxAccountsExceededError: If the batch would overflow the wallet
        """
        new_accounts: Dict[str, SignableAccount] = {}
        for candidate in candidates:
            account = verify_account(candidate, self.signing_service)
            key = _normalize(account.address.text)
            if key in self._accounts or key in new_accounts:
                continue
            new_accounts[key] = account

        if len(self._accounts) + len(new_accounts) > MAX_WALLET_ACCOUNTS:
            raise MaxAccountsExceededError(
                MAX_WALLET_ACCOUNTS,
                details={"stored": len(self._accounts), "new": len(new_accounts)},
            )

        self._accounts.update(new_accounts)
        logger.debug(f"Added {len(new_accounts)} account(s) to wallet, {len(self._accounts)} stored")
        return list(new_accounts.values())

    def add_secret_keys(self, secret_keys: List[str]) -> List[SignableAccount]:
        """
        Derive accounts from secret keys and insert the new ones.

        Args:
            secret_keys: ``S``-prefixed secret key texts

        Returns:
            Every account derived from ``secret_keys``, in input order,
            including those that were already stored

        Raises:
            MaxAccountsExceededError: If more keys than the wallet limit are given,
                or the new accounts would overflow the wallet
            InvalidKeyEncodingError: If a key is malformed
        """
        if len(secret_keys) > MAX_WALLET_ACCOUNTS:
            raise MaxAccountsExceededError(MAX_WALLET_ACCOUNTS, details={"keys": len(secret_keys)})

        accounts = [self.account_from_secret_key(key) for key in secret_keys]
        self.add_accounts(accounts)
        return accounts

    def get_by_address(self, address: str) -> Optional[SignableAccount]:
        """Look up an account; addresses compare case-insensitively."""
        if not isinstance(address, str):
            return None
        return self._accounts.get(_normalize(address))

    def remove_addresses(self, addresses: Iterable[str]) -> None:
        """
        Remove accounts by address. Unknown addresses and non-string entries are ignored.

        The base account is unset if it is among the removed ones.
        """
        for address in addresses:
            if not isinstance(address, str):
                continue
            removed = self._accounts.pop(_normalize(address), None)
            if removed is None:
                continue
            logger.debug(f"Removed {removed.address} from wallet")
            if self._base_account is not None and self._base_account.address == removed.address:
                self._base_account = None

    def set_base_account(self, account: Any) -> SignableAccount:
        """
        Select the default sender.

        The account is validated like in ``add_accounts`` and stored if absent.

        Returns:
            The validated base account
        """
        verified = verify_account(account, self.signing_service)
        if verified.address.text not in self:
            self.add_accounts([verified])
        self._base_account = self.get_by_address(verified.address.text)
        return self._base_account

    def get_base_account(self) -> Optional[SignableAccount]:
        return self._base_account

    def clean(self) -> None:
        """Remove every account and unset the base account."""
        self._accounts.clear()
        self._base_account = None

    async def wallet_info(self) -> List[FullAddressInfo]:
        """
        Fetch node records for every stored account in one call.

        Returns:
            One FullAddressInfo per stored account, in wallet order

        Raises:
            WalletInfoMismatchError: If the node returns a different number of records
        """
        accounts = self.accounts
        if not accounts:
            return []

        infos = await self._require_api().get_addresses([a.address.text for a in accounts])
        if len(infos) != len(accounts):
            raise WalletInfoMismatchError(len(accounts), len(infos))

        return [
            FullAddressInfo(
                **info.model_dump(),
                public_key=account.public_key.to_string(),
                secret_key=account.secret_key.to_string(),
            )
            for info, account in zip(infos, accounts)
        ]

    async def get_account_balance(self, address: str) -> Optional[Balance]:
        """
        Fetch the balance of any address.

        Failures are logged and reported as None (balance unknown).
        """
        try:
            infos = await self._require_api().get_addresses([address])
            if len(infos) != 1:
                raise WalletInfoMismatchError(1, len(infos))
            info = infos[0]
            return Balance(final=from_mas(info.final_balance), candidate=from_mas(info.candidate_balance))
        except MassaError as e:
            logger.error(f"Error while retrieving balance of {address}: {e}")
            return None

    def sign_message(self, data: Union[str, bytes], chain_id: int, signer_address: str) -> SignedMessage:
        """
        Sign data with a stored account.

        The chain id is checked but not signed: the digest covers ``data``
        only. A wallet bound to a chain id refuses to sign for any other
        chain, so a message meant for buildnet cannot be signed by a
        mainnet wallet by mistake.

        Args:
            data: Text or bytes to sign
            chain_id: Chain id of the network the signature is meant for
            signer_address: Address of the signing account

        Raises:
            ValidationError: If chain_id is invalid or not the wallet's chain
            SignerNotFoundError: If the address is not in the wallet
        """
        if isinstance(chain_id, bool) or not isinstance(chain_id, int) or chain_id < 0:
            raise ValidationError(f"Invalid chain id: {chain_id!r}")
        if self.chain_id is not None and chain_id != self.chain_id:
            raise ValidationError(f"Chain id {chain_id} does not match wallet chain id {self.chain_id}")

        account = self.get_by_address(signer_address)
        if account is None:
            raise SignerNotFoundError(signer_address)
        return self.signing_service.sign_message(data, account)

    def verify_signature(self, data: Union[str, bytes], signed_message: Any) -> bool:
        return self.signing_service.verify_signature(data, signed_message)

    def _require_api(self) -> PublicApiClient:
        if self.api is None:
            raise ValidationError("Wallet has no node API client configured")
        return self.api
