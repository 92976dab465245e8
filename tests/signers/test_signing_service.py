"""
Tests for message signing and verification.
"""

import pytest

from massa_client.codec import hash_blake3
from massa_client.keys.account import SignableAccount, UnverifiedAccount
from massa_client.runtime.errors import (
    NoPrivateKeyError,
    NoPublicKeyError,
    SignatureLengthError,
    VerificationFailedError,
)
from massa_client.signers import (
    Ed25519Backend,
    SignedMessage,
    SigningService,
    decode_signature,
    encode_signature,
)

SECRET = "S12XuWmm5jULpJGXBnkeBsuiNmsGi2F4rMiTvriCzENxBR4Ev7vd"
PUBLIC = "P129tbNd4oVMRsnFvQcgSq4PUAZYYDA1pvqtef2ER6W7JqgY1Bfg"
SIGNATURE = "1TXucC8nai7BYpAnMPYrotVcKCZ5oxkfWHb2ykKj2tXmaGMDL1XTU5AbC6Z13RH3q59F8QtbzKq4gzBphGPWpiDonownxE"
FORGED_SIGNATURE = "2" + SIGNATURE[1:]


class ShortSignatureBackend(Ed25519Backend):
    """Backend whose signatures are truncated."""

    def sign(self, secret, digest):
        return super().sign(secret, digest)[:63]


class RejectingBackend(Ed25519Backend):
    """Backend that never accepts a signature."""

    def verify(self, signature, digest, public_key):
        return False


@pytest.fixture
def account():
    return SignableAccount.from_secret_key(SECRET)


class TestSignMessage:
    """Test SigningService.sign_message."""

    def test_known_signature(self, account):
        signed = SigningService().sign_message("Test message", account)

        assert signed.base58_encoded == SIGNATURE
        assert signed.public_key.to_string() == PUBLIC
        assert len(signed.signature) == 64

    def test_text_and_bytes_sign_identically(self, account):
        service = SigningService()
        assert service.sign_message("Test message", account) == service.sign_message(b"Test message", account)

    def test_signing_is_deterministic(self, account):
        service = SigningService()
        digest = hash_blake3(b"payload")
        assert service.sign(account.secret_key, digest) == service.sign(account.secret_key, digest)

    def test_sign_verify_property(self, account):
        service = SigningService()
        for data in (b"", b"a", bytes(range(256))):
            digest = hash_blake3(data)
            signature = service.sign(account.secret_key, digest)
            assert service.verify(signature, digest, account.public_key.bytes)

    def test_to_dict(self, account):
        signed = SigningService().sign_message("Test message", account)
        assert signed.to_dict() == {"public_key": PUBLIC, "signature": SIGNATURE}

    def test_account_without_secret_key(self, account):
        watch_only = UnverifiedAccount(account.address, account.public_key)
        with pytest.raises(NoPrivateKeyError, match="No private key to sign the message with"):
            SigningService().sign_message("Test message", watch_only)

    def test_account_without_public_key(self, account):
        class HalfAccount:
            secret_key = account.secret_key
            public_key = None

        with pytest.raises(NoPublicKeyError, match="No public key to verify the signed message with"):
            SigningService().sign_message("Test message", HalfAccount())

    def test_short_signature_rejected(self, account):
        service = SigningService(ShortSignatureBackend())
        with pytest.raises(SignatureLengthError, match="Invalid signature length. Expected 64, got 63"):
            service.sign_message("Test message", account)

    def test_self_check_failure(self, account):
        service = SigningService(RejectingBackend())
        with pytest.raises(VerificationFailedError, match="Signature could not be verified with public key"):
            service.sign_message("Test message", account)

    def test_signed_message_length_invariant(self, account):
        with pytest.raises(SignatureLengthError):
            SignedMessage(account.public_key, bytes(10), "x")


class TestVerifySignature:
    """Test SigningService.verify_signature."""

    def test_valid_wire_form(self):
        assert SigningService().verify_signature(
            "Test message", {"public_key": PUBLIC, "signature": SIGNATURE}
        )

    def test_valid_signed_message(self, account):
        service = SigningService()
        signed = service.sign_message("Test message", account)
        assert service.verify_signature("Test message", signed)

    def test_other_data_fails(self, account):
        service = SigningService()
        signed = service.sign_message("Test message", account)
        assert service.verify_signature("Other message", signed) is False

    def test_forged_signature_returns_false(self):
        assert SigningService().verify_signature(
            "Test message", {"public_key": PUBLIC, "signature": FORGED_SIGNATURE}
        ) is False

    def test_undecodable_input_returns_false(self):
        service = SigningService()
        assert service.verify_signature("Test message", {"public_key": "Pnope", "signature": SIGNATURE}) is False
        assert service.verify_signature("Test message", {"public_key": PUBLIC}) is False


class TestSignatureText:
    """Test the signature text encoding."""

    def test_decode_known_signature(self):
        version, signature = decode_signature(SIGNATURE)
        assert version == 0
        assert len(signature) == 64
        assert encode_signature(version, signature) == SIGNATURE


class TestEd25519Backend:
    """Test the raw Ed25519 backend."""

    def test_sign_and_verify(self):
        backend = Ed25519Backend()
        secret = backend.generate_secret()
        public_key = backend.derive_public_key(secret)
        digest = hash_blake3(b"Test message")

        signature = backend.sign(secret, digest)

        assert len(secret) == 32
        assert len(public_key) == 32
        assert len(signature) == 64
        assert backend.verify(signature, digest, public_key)

    def test_bad_signature_returns_false(self):
        backend = Ed25519Backend()
        secret = backend.generate_secret()
        digest = hash_blake3(b"Test message")
        assert backend.verify(bytes(64), digest, backend.derive_public_key(secret)) is False

    @pytest.mark.parametrize("public_key", [b"", bytes(31), bytes(33)])
    def test_bad_public_key_length_returns_false(self, public_key):
        assert Ed25519Backend().verify(bytes(64), bytes(32), public_key) is False
