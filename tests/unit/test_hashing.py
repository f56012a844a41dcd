"""
Hashing Unit Tests
Tests for rewardtree/crypto/hashing.py

Tests:
- sha256 stability
- leaf/node hashing with and without domain separation
"""
import hashlib
import pytest

from rewardtree.crypto.hashing import (
    DIGEST_SIZE,
    LEAF_PREFIX,
    NODE_PREFIX,
    sha256,
    hash_concat,
    hash_leaf,
    hash_node,
)


class TestSha256:
    """Tests for sha256() function."""

    def test_sha256_known_value(self):
        expected = hashlib.sha256(b"hello").digest()
        result = sha256(b"hello")

        assert result == expected
        assert len(result) == DIGEST_SIZE

    def test_sha256_empty_bytes(self):
        assert sha256(b"") == hashlib.sha256(b"").digest()

    def test_sha256_different_inputs_different_outputs(self):
        assert sha256(b"input1") != sha256(b"input2")


class TestLeafAndNodeHashing:
    """Tests for hash_leaf() and hash_node()."""

    def test_leaf_is_sha256_of_utf8_text(self):
        assert hash_leaf("A,100,50") == hashlib.sha256(b"A,100,50").digest()

    def test_leaf_with_domain_separation(self):
        expected = hashlib.sha256(LEAF_PREFIX + b"A,100,50").digest()
        assert hash_leaf("A,100,50", domain_separation=True) == expected

    def test_domain_separation_changes_leaf(self):
        assert hash_leaf("A,1,2") != hash_leaf("A,1,2", domain_separation=True)

    def test_node_is_concat_hash(self):
        left, right = sha256(b"l"), sha256(b"r")
        assert hash_node(left, right) == hashlib.sha256(left + right).digest()
        assert hash_node(left, right) == hash_concat(left, right)

    def test_node_order_matters(self):
        left, right = sha256(b"l"), sha256(b"r")
        assert hash_node(left, right) != hash_node(right, left)

    def test_node_with_domain_separation(self):
        left, right = sha256(b"l"), sha256(b"r")
        expected = hashlib.sha256(NODE_PREFIX + left + right).digest()
        assert hash_node(left, right, domain_separation=True) == expected
