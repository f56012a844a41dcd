"""
Hashing Utilities
Digest primitives shared by the tree builder, prover and verifier.

This module provides:
- SHA-256 hashing for raw bytes
- Concatenation hashing for parent nodes
- Leaf/node hashing with optional domain separation prefixes

Determinism Notes:
- Always hash raw bytes exactly as given
- Leaf text is produced upstream (RecipientInput.leaf_text) and encoded as UTF-8
- Domain separation changes every digest; builder, prover and verifier
  must be configured identically
"""
from __future__ import annotations

import hashlib


DIGEST_SIZE = 32

# Prefixes used when domain separation is enabled
LEAF_PREFIX: bytes = b"\x00"
NODE_PREFIX: bytes = b"\x01"


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte SHA-256 digest

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def hash_concat(left: bytes, right: bytes) -> bytes:
    """
    Hash the concatenation of two byte sequences.

    parent = sha256(left + right), no separator.
    """
    return sha256(left + right)


def hash_leaf(text: str, domain_separation: bool = False) -> bytes:
    """
    Hash the canonical text of a leaf.

    Args:
        text: Canonical leaf text, e.g. "address,amount,usdcAmount"
        domain_separation: Prepend LEAF_PREFIX before hashing

    Returns:
        32-byte leaf digest
    """
    data = text.encode("utf-8")
    if domain_separation:
        data = LEAF_PREFIX + data
    return sha256(data)


def hash_node(left: bytes, right: bytes, domain_separation: bool = False) -> bytes:
    """
    Hash two child digests into their parent.

    Args:
        left: Left child digest
        right: Right child digest
        domain_separation: Prepend NODE_PREFIX before hashing

    Returns:
        32-byte parent digest
    """
    if domain_separation:
        return sha256(NODE_PREFIX + left + right)
    return hash_concat(left, right)


__all__ = [
    "DIGEST_SIZE",
    "LEAF_PREFIX",
    "NODE_PREFIX",
    "sha256",
    "hash_concat",
    "hash_leaf",
    "hash_node",
]
