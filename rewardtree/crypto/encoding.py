"""
Digest Text Encoding
Base-58 codec for digests crossing the boundary to logs, CLI output and
claim payloads. Internal computation always works on raw bytes.

Uses the Bitcoin base-58 alphabet, which is what Solana uses for public
keys and for the proof strings submitted to the on-chain verifier.
"""
from __future__ import annotations

from typing import Iterable, Sequence

import base58

from rewardtree.crypto.hashing import DIGEST_SIZE
from rewardtree.schemas.errors import InvalidEncodingError


# System program address: 32 zero bytes in base-58
DEFAULT_ADDRESS = "11111111111111111111111111111111"


def encode_digest(digest: bytes) -> str:
    """
    Encode a 32-byte digest as base-58 text.

    Raises:
        InvalidEncodingError: If digest is not 32 bytes
    """
    if not isinstance(digest, (bytes, bytearray)) or len(digest) != DIGEST_SIZE:
        raise InvalidEncodingError(
            f"Digest must be {DIGEST_SIZE} bytes, got {type(digest).__name__}"
            + (f" of length {len(digest)}" if isinstance(digest, (bytes, bytearray)) else "")
        )
    return base58.b58encode(bytes(digest)).decode("ascii")


def _b58decode_exact(text: str) -> bytes:
    if not isinstance(text, str):
        raise InvalidEncodingError(
            f"Expected base-58 string, got {type(text).__name__}"
        )
    try:
        raw = base58.b58decode(text)
    except ValueError as e:
        raise InvalidEncodingError(f"Invalid base-58 string: {e}", value=text) from e
    # base58 tolerates trailing whitespace; only canonical text round-trips
    if base58.b58encode(raw).decode("ascii") != text:
        raise InvalidEncodingError("Non-canonical base-58 string", value=text)
    return raw


def decode_digest(text: str) -> bytes:
    """
    Decode base-58 text into a 32-byte digest.

    Raises:
        InvalidEncodingError: On non-string input, characters outside the
            alphabet, non-canonical text, or a decoded length other than 32
    """
    raw = _b58decode_exact(text)
    if len(raw) != DIGEST_SIZE:
        raise InvalidEncodingError(
            f"Decoded digest must be {DIGEST_SIZE} bytes, got {len(raw)}",
            value=text,
        )
    return raw


def encode_digests(digests: Iterable[bytes]) -> list[str]:
    """Encode a sequence of digests, preserving order."""
    return [encode_digest(d) for d in digests]


def decode_digests(texts: Sequence[str]) -> list[bytes]:
    """Decode a sequence of base-58 strings, preserving order."""
    if isinstance(texts, str):
        raise InvalidEncodingError("Expected a sequence of base-58 strings, got a single string")
    return [decode_digest(t) for t in texts]


def is_valid_address(address: object) -> bool:
    """
    Check that a value is a syntactically valid wallet address.

    A valid address is canonical base-58 text decoding to exactly 32 bytes.
    Whether the key lies on the curve is not checked.
    """
    if not isinstance(address, str) or not address:
        return False
    try:
        decode_digest(address)
    except InvalidEncodingError:
        return False
    return True


__all__ = [
    "DEFAULT_ADDRESS",
    "encode_digest",
    "decode_digest",
    "encode_digests",
    "decode_digests",
    "is_valid_address",
]
