"""
Operation signing and submission.

``SubmissionClient`` turns operations into signed ``send_operations``
entries on behalf of a wallet account and returns the operation ids the
node assigns.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional, Sequence

from ..api_client import PublicApiClient
from ..config import ClientConfig, DEFAULT_PERIOD_OFFSET
from ..keys.account import SignableAccount
from ..keys.wallet import Wallet
from ..runtime.errors import InvalidRecipientCategoryError, NoSenderAvailableError
from .codec import compact_operation, signing_payload
from .operations import Operation, RollBuy, RollSell, Transfer

logger = logging.getLogger(__name__)


class SubmissionClient:
    """Signs and submits operations through the node API."""

    def __init__(self, wallet: Wallet, api: PublicApiClient, config: Optional[ClientConfig] = None):
        """
        Initialize the submission client.

        Args:
            wallet: Wallet holding the sender accounts
            api: Node API client
            config: Client configuration; supplies the chain id and period offset
        """
        self.wallet = wallet
        self.api = api
        self.config = config

    @property
    def chain_id(self) -> Optional[int]:
        if self.config is not None and self.config.chain_id is not None:
            return self.config.chain_id
        return self.wallet.chain_id

    @property
    def period_offset(self) -> int:
        return self.config.period_offset if self.config is not None else DEFAULT_PERIOD_OFFSET

    async def get_expiry_period(self) -> int:
        """Last period a new operation stays valid: next slot period plus the offset."""
        status = await self.api.get_status()
        return status.next_slot.period + self.period_offset

    def _resolve_sender(self, account: Optional[SignableAccount]) -> SignableAccount:
        sender = account or self.wallet.get_base_account()
        if sender is None:
            raise NoSenderAvailableError()
        return sender

    @staticmethod
    def _check_recipient(operation: Operation) -> None:
        if isinstance(operation, Transfer) and not operation.recipient.is_user:
            raise InvalidRecipientCategoryError(
                f"Transfer recipient {operation.recipient_address} must be a user address",
                details={"recipient": operation.recipient_address},
            )

    def sign_operation(self, operation: Operation, expiry_period: int,
                       sender: SignableAccount) -> Dict[str, Any]:
        """
        Build one signed ``send_operations`` entry.

        Returns:
            Dict with serialized_content, creator_public_key and signature
        """
        compact = compact_operation(operation, expiry_period)
        payload = signing_payload(compact, sender.public_key, self.chain_id)
        signed = self.wallet.signing_service.sign_message(payload, sender)
        return {
            "serialized_content": list(compact),
            "creator_public_key": sender.public_key.to_string(),
            "signature": signed.base58_encoded,
        }

    async def submit_operations(self, operations: Sequence[Operation],
                                account: Optional[SignableAccount] = None) -> List[str]:
        """
        Sign and submit operations as a single batch.

        Args:
            operations: Operations to submit
            account: Sender; defaults to the wallet's base account

        Returns:
            One operation id per operation, in order

        Raises:
            NoSenderAvailableError: If there is no sender
            InvalidRecipientCategoryError: If a transfer targets a contract address
            RpcProtocolError: If the node returns a different number of ids
        """
        sender = self._resolve_sender(account)
        for operation in operations:
            self._check_recipient(operation)

        expiry_period = await self.get_expiry_period()
        entries = [self.sign_operation(op, expiry_period, sender) for op in operations]

        logger.info(f"Submitting {len(entries)} operation(s) from {sender.address}")
        return await self.api.send_operations([entries])

    async def submit_operation(self, operation: Operation,
                               account: Optional[SignableAccount] = None) -> List[str]:
        """Sign and submit one operation; returns the node's id list."""
        return await self.submit_operations([operation], account)

    async def send_transaction(self, transfer: Transfer,
                               account: Optional[SignableAccount] = None) -> List[str]:
        return await self.submit_operation(transfer, account)

    async def buy_rolls(self, rolls: RollBuy, account: Optional[SignableAccount] = None) -> List[str]:
        return await self.submit_operation(rolls, account)

    async def sell_rolls(self, rolls: RollSell, account: Optional[SignableAccount] = None) -> List[str]:
        return await self.submit_operation(rolls, account)
