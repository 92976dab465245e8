r"""
Wallet accounts.

An account is either watch-only (``UnverifiedAccount``) or able to sign
(``SignableAccount``). Signable accounts are only built by the factories in
this module, which check once that public key and address are the ones the
secret key derives.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..crypto.keys import PublicKey, SecretKey
from ..runtime.address import Address
from ..runtime.errors import (
    AddressMismatchError,
    KeyMismatchError,
    MissingSecretKeyError,
    ValidationError,
)
from ..signers.service import SigningService


class AccountCandidate(BaseModel):
    """Loosely-typed account input: any subset of the three text fields."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    address: Optional[str] = None
    public_key: Optional[str] = Field(default=None, alias="publicKey")
    secret_key: Optional[str] = Field(default=None, alias="secretKey")


@dataclass(frozen=True)
class UnverifiedAccount:
    """Watch-only account; it cannot sign."""

    address: Address
    public_key: Optional[PublicKey] = None

    @property
    def secret_key(self) -> None:
        return None

    @property
    def can_sign(self) -> bool:
        return False

    @classmethod
    def from_address(cls, address: str) -> UnverifiedAccount:
        return cls(Address.from_string(address))


@dataclass(frozen=True)
class SignableAccount:
    """Account whose public key and address are derived from its secret key."""

    address: Address
    public_key: PublicKey
    secret_key: SecretKey = field(repr=False)

    @property
    def can_sign(self) -> bool:
        return True

    @classmethod
    def from_secret_key(cls, secret_key: Union[str, SecretKey],
                        signing_service: Optional[SigningService] = None) -> SignableAccount:
        """
        Build an account from a secret key.

        Raises:
            InvalidKeyEncodingError: If the secret key text is malformed
        """
        service = signing_service or SigningService()
        if isinstance(secret_key, str):
            secret_key = SecretKey.from_string(secret_key)
        public_key = service.derive_public_key(secret_key)
        return cls(Address.from_public_key(public_key), public_key, secret_key)

    def to_dict(self) -> Dict[str, str]:
        """Text form of the three fields."""
        return {
            "address": self.address.text,
            "public_key": self.public_key.to_string(),
            "secret_key": self.secret_key.to_string(),
        }


Account = Union[UnverifiedAccount, SignableAccount]


def _as_candidate(value: Any) -> AccountCandidate:
    if isinstance(value, AccountCandidate):
        return value
    if isinstance(value, SignableAccount):
        return AccountCandidate(**value.to_dict())
    if isinstance(value, UnverifiedAccount):
        return AccountCandidate(
            address=value.address.text,
            public_key=value.public_key.to_string() if value.public_key else None,
        )
    if isinstance(value, Mapping):
        try:
            return AccountCandidate.model_validate(dict(value))
        except PydanticValidationError as e:
            raise ValidationError("Malformed account fields", cause=e)
    raise ValidationError(f"Cannot build an account from {type(value).__name__}")


def verify_account(candidate: Any, signing_service: Optional[SigningService] = None) -> SignableAccount:
    """
    Validate an account candidate and return the signable account.

    Args:
        candidate: AccountCandidate, mapping with address/public_key/secret_key,
            or an existing account
        signing_service: Service used for key derivation

    Returns:
        SignableAccount derived from the secret key

    Raises:
        ValidationError: If the candidate is not an account-like value
        MissingSecretKeyError: If no secret key is supplied
        InvalidKeyEncodingError: If the secret key text is malformed
        KeyMismatchError: If the supplied public key differs from the derived one
        AddressMismatchError: If the supplied address differs from the derived one
    """
    candidate = _as_candidate(candidate)

    if not candidate.secret_key:
        raise MissingSecretKeyError()

    account = SignableAccount.from_secret_key(candidate.secret_key, signing_service)

    if candidate.public_key and candidate.public_key != account.public_key.to_string():
        raise KeyMismatchError(
            "Public key does not correspond to the private key submitted",
            details={"expected": account.public_key.to_string(), "submitted": candidate.public_key},
        )

    if candidate.address and candidate.address != account.address.text:
        raise AddressMismatchError(
            "Account address does not correspond to the address submitted",
            details={"expected": account.address.text, "submitted": candidate.address},
        )

    return account


def generate_account(signing_service: Optional[SigningService] = None) -> SignableAccount:
    """Create a signable account from a fresh random secret key."""
    service = signing_service or SigningService()
    return SignableAccount.from_secret_key(service.generate_secret_key(), service)
