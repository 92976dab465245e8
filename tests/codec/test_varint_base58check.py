"""
Tests for the varint and Base58Check codecs.
"""

import pytest

from massa_client.codec import (
    BinaryReader,
    BinaryWriter,
    checksum_decode,
    checksum_encode,
    decode_varint,
    encode_varint,
)
from massa_client.runtime.errors import ChecksumMismatchError, EncodingError


class TestVarint:
    """Test unsigned LEB128 varints."""

    @pytest.mark.parametrize("value,encoded", [
        (0, b"\x00"),
        (1, b"\x01"),
        (127, b"\x7f"),
        (128, b"\x80\x01"),
        (300, b"\xac\x02"),
        (16384, b"\x80\x80\x01"),
    ])
    def test_known_encodings(self, value, encoded):
        assert encode_varint(value) == encoded
        assert decode_varint(encoded) == (value, len(encoded))

    def test_decode_reports_consumed_bytes(self):
        """Trailing bytes are left for the caller."""
        value, consumed = decode_varint(b"\xac\x02\xff\xee")
        assert value == 300
        assert consumed == 2

    def test_negative_value_rejected(self):
        with pytest.raises(ValueError):
            encode_varint(-1)

    def test_truncated_varint(self):
        with pytest.raises(EncodingError):
            decode_varint(b"\x80\x80")

    def test_u64_is_big_endian(self):
        writer = BinaryWriter()
        writer.u64be(77658366)
        assert writer.to_bytes() == (77658366).to_bytes(8, "big")

    def test_reader_remaining(self):
        reader = BinaryReader(b"\x05abc")
        assert reader.uvarint() == 5
        assert reader.remaining() == b"abc"
        assert reader.eof


class TestBase58Check:
    """Test checksummed base58 text encoding."""

    def test_known_vector(self):
        """Version byte 0 followed by twenty zero bytes."""
        assert checksum_encode(bytes(21)) == "1111111111111111111114oLvT2"
        assert checksum_decode("1111111111111111111114oLvT2") == bytes(21)

    def test_roundtrip_arbitrary_payload(self):
        payload = bytes(range(33))
        assert checksum_decode(checksum_encode(payload)) == payload

    def test_checksum_mismatch(self):
        text = checksum_encode(b"\x00" + bytes(range(32)))
        # Swap the last character for a different alphabet symbol
        tampered = text[:-1] + ("2" if text[-1] != "2" else "3")
        with pytest.raises(ChecksumMismatchError):
            checksum_decode(tampered)

    def test_invalid_alphabet(self):
        """0, O, I and l are not base58 symbols."""
        with pytest.raises(EncodingError):
            checksum_decode("0OIl")

    def test_too_short(self):
        with pytest.raises(EncodingError):
            checksum_decode("2")

    def test_non_string_input(self):
        with pytest.raises(EncodingError):
            checksum_decode(b"abc")
