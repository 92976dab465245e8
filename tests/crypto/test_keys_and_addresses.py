"""
Tests for key text encoding and address derivation.
"""

import pytest

from massa_client.codec import checksum_decode, checksum_encode
from massa_client.crypto import KEYS_VERSION_NUMBER, PublicKey, SecretKey
from massa_client.runtime.address import Address, AddressCategory
from massa_client.runtime.errors import (
    ChecksumMismatchError,
    EncodingError,
    InvalidAddressPrefixError,
    InvalidKeyEncodingError,
)
from massa_client.signers import SigningService

SECRET = "S12syP5uCVEwaJwvXLqJyD1a2GqZjsup13UnhY6uzbtyu7ExXWZS"
PUBLIC = "P12c2wsKxEyAhPC4ouNsgywzM41VsNSuwH9JdMbRt9bM8ZsMLPQA"
ADDRESS = "AU12KgrLq2vhMgi8aAwbxytiC4wXBDGgvTtqGTM5R7wEB9En8WBHB"
CONTRACT = "AS12KgrLq2vhMgi8aAwbxytiC4wXBDGgvTtqGTM5R7wEB9En8WBHB"


class TestKeyCodec:
    """Test secret and public key text forms."""

    def test_secret_key_roundtrip(self):
        key = SecretKey.from_string(SECRET)
        assert key.version == KEYS_VERSION_NUMBER
        assert len(key.bytes) == 32
        assert key.to_string() == SECRET

    def test_secret_key_repr_hides_bytes(self):
        key = SecretKey.from_string(SECRET)
        assert key.bytes.hex() not in repr(key)

    def test_public_key_derivation(self):
        service = SigningService()
        public_key = service.derive_public_key(SecretKey.from_string(SECRET))
        assert public_key.to_string() == PUBLIC
        assert str(public_key) == PUBLIC
        assert public_key.version == 0

    def test_public_key_versioned_bytes(self):
        public_key = PublicKey.from_string(PUBLIC)
        assert public_key.to_bytes() == b"\x00" + public_key.bytes

    def test_wrong_prefix(self):
        with pytest.raises(InvalidKeyEncodingError):
            SecretKey.from_string(PUBLIC)
        with pytest.raises(InvalidKeyEncodingError):
            PublicKey.from_string(SECRET)

    def test_corrupted_key_text(self):
        with pytest.raises(InvalidKeyEncodingError):
            SecretKey.from_string(SECRET[:-1] + ("2" if SECRET[-1] != "2" else "3"))

    def test_wrong_key_length(self):
        text = "S" + checksum_encode(b"\x00" + bytes(31))
        with pytest.raises(InvalidKeyEncodingError):
            SecretKey.from_string(text)

    def test_direct_construction_checks_length(self):
        with pytest.raises(InvalidKeyEncodingError):
            PublicKey(0, bytes(16))


class TestAddressCodec:
    """Test address derivation and parsing."""

    def test_derivation_vector(self):
        address = Address.from_public_key(PublicKey.from_string(PUBLIC))
        assert address.to_string() == ADDRESS
        assert address.category is AddressCategory.USER
        assert address.version == 0
        assert len(address.digest) == 32

    def test_derivation_is_deterministic(self):
        public_key = PublicKey.from_string(PUBLIC)
        assert Address.from_public_key(public_key) == Address.from_public_key(public_key)

    def test_parse_user_address(self):
        address = Address.from_string(ADDRESS)
        assert address.is_user
        assert not address.is_contract
        assert address == Address.from_public_key(PublicKey.from_string(PUBLIC))

    def test_parse_contract_address(self):
        address = Address.from_string(CONTRACT)
        assert address.is_contract
        assert address.category.prefix == "AS"

    def test_to_bytes(self):
        user = Address.from_string(ADDRESS)
        contract = Address.from_string(CONTRACT)
        payload = checksum_decode(ADDRESS[2:])

        assert user.to_bytes() == b"\x00" + payload
        assert contract.to_bytes() == b"\x01" + payload
        assert len(user.to_bytes()) == 34

    @pytest.mark.parametrize("text", ["", "XU12KgrLq2vhMgi8aAwbxytiC4wXBDGgvTtqGTM5R7wEB9En8WBHB", "A"])
    def test_invalid_prefix(self, text):
        with pytest.raises(InvalidAddressPrefixError):
            Address.from_string(text)

    @pytest.mark.parametrize("digest_size", [0, 31, 33])
    def test_wrong_digest_length(self, digest_size):
        text = "AU" + checksum_encode(b"\x00" + bytes(digest_size))
        with pytest.raises(EncodingError, match="digest length"):
            Address.from_string(text)

    def test_bad_checksum(self):
        text = ADDRESS[:-1] + ("2" if ADDRESS[-1] != "2" else "3")
        with pytest.raises(ChecksumMismatchError):
            Address.from_string(text)
