"""
Base-58 Codec Unit Tests
Tests for rewardtree/crypto/encoding.py
"""
import pytest

from rewardtree.crypto.encoding import (
    DEFAULT_ADDRESS,
    decode_digest,
    decode_digests,
    encode_digest,
    encode_digests,
    is_valid_address,
)
from rewardtree.crypto.hashing import sha256
from rewardtree.schemas.errors import ErrorCodes, InvalidEncodingError


class TestDigestCodec:

    def test_round_trip(self):
        digest = sha256(b"payload")
        assert decode_digest(encode_digest(digest)) == digest

    def test_zero_digest_is_default_address(self):
        assert encode_digest(bytes(32)) == DEFAULT_ADDRESS
        assert decode_digest(DEFAULT_ADDRESS) == bytes(32)

    def test_sequence_round_trip_preserves_order(self):
        digests = [sha256(bytes([i])) for i in range(5)]
        encoded = encode_digests(digests)

        assert len(encoded) == 5
        assert decode_digests(encoded) == digests

    def test_encode_rejects_wrong_length(self):
        with pytest.raises(InvalidEncodingError):
            encode_digest(b"short")

    def test_decode_rejects_invalid_characters(self):
        # 0, O, I and l are not in the base-58 alphabet
        with pytest.raises(InvalidEncodingError) as exc_info:
            decode_digest("0OIl" * 8)
        assert exc_info.value.code == ErrorCodes.INVALID_ENCODING

    def test_decode_rejects_wrong_length(self):
        with pytest.raises(InvalidEncodingError, match="32 bytes"):
            decode_digest("3mJr7AoUXx2Wqd")

    def test_decode_rejects_trailing_whitespace(self):
        text = encode_digest(sha256(b"x"))
        with pytest.raises(InvalidEncodingError, match="Non-canonical"):
            decode_digest(text + " ")

    def test_decode_rejects_non_string(self):
        with pytest.raises(InvalidEncodingError):
            decode_digest(sha256(b"x"))

    def test_decode_digests_rejects_bare_string(self):
        with pytest.raises(InvalidEncodingError):
            decode_digests(encode_digest(sha256(b"x")))

    def test_decode_empty_string_fails(self):
        with pytest.raises(InvalidEncodingError):
            decode_digest("")


class TestAddressValidation:

    def test_default_address_valid(self):
        assert is_valid_address(DEFAULT_ADDRESS)

    def test_encoded_key_valid(self):
        assert is_valid_address(encode_digest(sha256(b"wallet")))

    @pytest.mark.parametrize("value", ["", "A", "not-a-key", None, 123, "0" * 44])
    def test_invalid_values(self, value):
        assert not is_valid_address(value)
