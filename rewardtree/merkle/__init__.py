"""
Merkle Tree and Proofs
Deterministic reward-distribution tree, proof generation and verification.

This package provides:
- InputNormalizer / normalize: validate, check order, pad to 2^N
- MerkleTree / build_merkle_tree: level-by-level tree over recipients
- MerkleProver / build_merkle_proof: sibling path for one leaf
- verify_proof / MerkleVerifier: recompute and compare a root
- Distribution: normalize + build + prove for one distribution event

Canonical Commitment Rules:
1. Leaf hashing: sha256("{address},{amount},{usdc_amount}".encode("utf-8"))
2. Parent hashing: sha256(left + right)
3. Padding: zero-amount placeholder entries up to the next power of two
4. Single leaf: root = leaf, proof is empty

Usage:
    from rewardtree.merkle import Distribution, verify_proof

    dist = Distribution.from_recipients(recipients)
    proof = dist.prove(2)
    assert verify_proof(dist.recipients[2], proof, dist.root)
"""
from .normalizer import (
    InputNormalizer,
    address_sort_key,
    next_power_of_two,
    normalize,
    sort_recipients,
)
from .merkle_tree import (
    MerkleTree,
    build_merkle_tree,
)
from .merkle_proofs import (
    MerkleProver,
    MerkleVerifier,
    build_merkle_proof,
    verify_proof,
)
from .distribution import (
    Distribution,
    proof_to_base58,
    roots_equal,
    tree_to_base58,
)


__all__ = [
    # Normalizer
    "InputNormalizer",
    "address_sort_key",
    "normalize",
    "next_power_of_two",
    "sort_recipients",
    # Tree
    "MerkleTree",
    "build_merkle_tree",
    # Proofs
    "MerkleProver",
    "MerkleVerifier",
    "build_merkle_proof",
    "verify_proof",
    # Distribution
    "Distribution",
    "roots_equal",
    "tree_to_base58",
    "proof_to_base58",
]
