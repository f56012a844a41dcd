"""
Merkle Proof Generation and Verification

- MerkleProver: derives the sibling path for one leaf of a built tree
- verify_proof: recomputes a root from leaf data and a proof
- MerkleVerifier: verify_proof bound to a config, plus payload entry point

Path convention (shared with the on-chain verifier):
    path[i] is True  -> sibling on the left:  current = H(sibling + current)
    path[i] is False -> sibling on the right: current = H(current + sibling)

Verification never needs the tree: leaf data, proof and root are enough.
"""
from __future__ import annotations

import hmac
import logging
from typing import Union

from rewardtree.config.runtime import MerkleConfig
from rewardtree.crypto.encoding import decode_digest
from rewardtree.crypto.hashing import DIGEST_SIZE, hash_node
from rewardtree.merkle.merkle_tree import MerkleTree
from rewardtree.schemas.errors import (
    InvalidEncodingError,
    LeafIndexError,
    LeafMismatchError,
    MissingSiblingError,
    ProofConstructionError,
    ProofShapeError,
)
from rewardtree.schemas.proof import Proof, ProofPayload
from rewardtree.schemas.recipient import RecipientInput


logger = logging.getLogger(__name__)

LeafData = Union[RecipientInput, bytes]


def _leaf_digest(leaf: LeafData, domain_separation: bool) -> bytes:
    if isinstance(leaf, RecipientInput):
        return leaf.leaf_hash(domain_separation)
    if isinstance(leaf, (bytes, bytearray)) and len(leaf) == DIGEST_SIZE:
        return bytes(leaf)
    length = f" of length {len(leaf)}" if isinstance(leaf, (bytes, bytearray)) else ""
    raise InvalidEncodingError(
        f"Leaf must be a RecipientInput or a {DIGEST_SIZE}-byte digest, "
        f"got {type(leaf).__name__}{length}"
    )


def verify_proof(
    leaf: LeafData,
    proof: Proof,
    root: bytes,
    domain_separation: bool = False,
) -> bool:
    """
    Verify that a leaf belongs to the tree with the given root.

    Args:
        leaf: Recipient data (hashed canonically) or a pre-hashed leaf digest
        proof: Siblings and path flags, leaf to root
        root: Claimed root digest
        domain_separation: Must match how the tree was built

    Returns:
        True if the recomputed root equals root, False otherwise

    Raises:
        ProofShapeError: If siblings and path differ in length
    """
    if len(proof.siblings) != len(proof.path):
        raise ProofShapeError(
            f"Proof has {len(proof.siblings)} siblings but {len(proof.path)} path flags",
            siblings=len(proof.siblings),
            path=len(proof.path),
        )

    current = _leaf_digest(leaf, domain_separation)
    for sibling, sibling_on_left in zip(proof.siblings, proof.path):
        if sibling_on_left:
            current = hash_node(sibling, current, domain_separation)
        else:
            current = hash_node(current, sibling, domain_separation)

    return hmac.compare_digest(current, bytes(root))


class MerkleProver:
    """
    Generates proofs against one built tree.

    The tree is only read, so one prover can serve many threads.

    With strict=True (the default) the declared recipient data must hash to
    the stored leaf and every proof is verified against the root before it
    is returned. strict=False skips both checks so tests can build proofs
    that are meant to fail on-chain.

    Example:
        >>> prover = MerkleProver(tree)
        >>> proof = prover.prove(2, recipients[2])
        >>> verify_proof(recipients[2], proof, tree.root)
        True
    """

    def __init__(self, tree: MerkleTree, strict: bool = True) -> None:
        self.tree = tree
        self.strict = strict

    @classmethod
    def from_config(cls, tree: MerkleTree, config: MerkleConfig) -> "MerkleProver":
        return cls(tree, strict=config.strict)

    def prove(self, index: int, declared: RecipientInput) -> Proof:
        """
        Build the sibling path for the leaf at index.

        Args:
            index: 0-based leaf position
            declared: Recipient data the caller claims sits at index

        Returns:
            Proof with one sibling per level below the root

        Raises:
            LeafIndexError: index outside the leaf level
            LeafMismatchError: declared data does not hash to the stored leaf
            MissingSiblingError: a sibling position is absent (malformed tree)
            ProofConstructionError: the proof does not verify against the root
        """
        tree = self.tree
        if index < 0 or index >= tree.leaf_count:
            raise LeafIndexError(
                f"Leaf index {index} out of range for {tree.leaf_count} leaves",
                leaf_index=index,
            )

        leaf = declared.leaf_hash(tree.domain_separation)
        if self.strict and not hmac.compare_digest(leaf, tree.leaves[index]):
            raise LeafMismatchError(
                f"Leaf hash for {declared.address} does not match tree leaf {index}",
                leaf_index=index,
                details={"address": declared.address},
            )

        siblings: list[bytes] = []
        path: list[bool] = []
        node_index = index

        # Every level from the leaves up to the one below the root
        for level in range(tree.height - 1):
            nodes = tree.level(level)
            if node_index % 2 == 0:
                sibling_index = node_index + 1
                sibling_on_left = False
            else:
                sibling_index = node_index - 1
                sibling_on_left = True

            if sibling_index >= len(nodes):
                raise MissingSiblingError(
                    f"No sibling at position {sibling_index} on level {level}",
                    leaf_index=index,
                    level=level,
                )

            siblings.append(nodes[sibling_index])
            path.append(sibling_on_left)
            node_index //= 2

        proof = Proof(siblings=tuple(siblings), path=tuple(path))

        if self.strict and not verify_proof(leaf, proof, tree.root, tree.domain_separation):
            raise ProofConstructionError(
                f"Generated proof for leaf {index} does not verify against the root",
                leaf_index=index,
            )

        logger.debug("Generated proof for leaf %d (%d siblings)", index, len(proof))
        return proof


def build_merkle_proof(
    tree: MerkleTree,
    index: int,
    declared: RecipientInput,
    strict: bool = True,
) -> Proof:
    """Generate a proof for one leaf. See MerkleProver.prove."""
    return MerkleProver(tree, strict=strict).prove(index, declared)


class MerkleVerifier:
    """
    Verifier bound to one hashing configuration.

    Provides the raw-bytes check and a base-58 payload check for claims
    received over the wire.
    """

    def __init__(self, config: MerkleConfig | None = None) -> None:
        self.config = config or MerkleConfig()

    def verify(self, leaf: LeafData, proof: Proof, root: bytes) -> bool:
        return verify_proof(leaf, proof, root, self.config.domain_separation)

    def verify_payload(
        self,
        recipient: RecipientInput,
        payload: ProofPayload,
        root_b58: str,
    ) -> bool:
        """
        Verify a claim payload against a base-58 root.

        Raises:
            InvalidEncodingError: If the root or a sibling is malformed
            ProofShapeError: If proof and path lengths differ
        """
        return self.verify(recipient, payload.to_proof(), decode_digest(root_b58))


__all__ = [
    "MerkleProver",
    "MerkleVerifier",
    "build_merkle_proof",
    "verify_proof",
]
