"""
Crypto primitives: SHA-256 hashing and base-58 digest encoding.
"""
from .hashing import (
    DIGEST_SIZE,
    LEAF_PREFIX,
    NODE_PREFIX,
    hash_concat,
    hash_leaf,
    hash_node,
    sha256,
)
from .encoding import (
    DEFAULT_ADDRESS,
    decode_digest,
    decode_digests,
    encode_digest,
    encode_digests,
    is_valid_address,
)

__all__ = [
    "DIGEST_SIZE",
    "LEAF_PREFIX",
    "NODE_PREFIX",
    "sha256",
    "hash_concat",
    "hash_leaf",
    "hash_node",
    "DEFAULT_ADDRESS",
    "encode_digest",
    "decode_digest",
    "encode_digests",
    "decode_digests",
    "is_valid_address",
]
