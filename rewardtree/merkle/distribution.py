"""
Distribution
One reward distribution event: the normalized recipient list, its tree and
the proofs handed to each recipient.

Typical flow:
    dist = Distribution.from_recipients(recipients)
    publish(dist.root)                      # written on-chain by a collaborator
    payload = dist.claim_payload_for("Addr...")
"""
from __future__ import annotations

import hmac
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Sequence

from rewardtree.config.runtime import MerkleConfig
from rewardtree.crypto.encoding import encode_digest, encode_digests
from rewardtree.merkle.merkle_proofs import MerkleProver
from rewardtree.merkle.merkle_tree import MerkleTree, build_merkle_tree
from rewardtree.merkle.normalizer import InputNormalizer, RecipientLike
from rewardtree.schemas.errors import LeafIndexError
from rewardtree.schemas.proof import Proof, ProofPayload
from rewardtree.schemas.recipient import RecipientInput


logger = logging.getLogger(__name__)


def roots_equal(a: bytes, b: bytes) -> bool:
    """Byte-wise root comparison."""
    return hmac.compare_digest(bytes(a), bytes(b))


def tree_to_base58(tree: MerkleTree) -> list[list[str]]:
    """Every level of the tree as base-58 strings, leaves first."""
    return [encode_digests(level) for level in tree.levels]


def proof_to_base58(proof: Proof) -> list[str]:
    return encode_digests(proof.siblings)


@dataclass
class Distribution:
    """
    Normalized recipients plus the tree built over them.

    Attributes:
        recipients: Padded recipient list, leaf order
        tree: Tree over recipients
        config: Options used to build it
        recipient_count: Number of real (non-placeholder) entries
    """
    recipients: tuple[RecipientInput, ...]
    tree: MerkleTree
    config: MerkleConfig = field(default_factory=MerkleConfig)
    recipient_count: int = 0

    def __post_init__(self) -> None:
        self._index = {
            r.address: i for i, r in enumerate(self.recipients[: self.recipient_count])
        }
        self._prover = MerkleProver.from_config(self.tree, self.config)

    @classmethod
    def from_recipients(
        cls,
        recipients: Sequence[RecipientLike],
        config: MerkleConfig | None = None,
    ) -> "Distribution":
        """
        Normalize recipients and build their tree.

        Raises:
            InputValidationException: Any normalization failure
        """
        config = config or MerkleConfig()
        normalized = InputNormalizer(config).normalize(recipients)
        tree = build_merkle_tree(normalized, config)
        dist = cls(
            recipients=tuple(normalized),
            tree=tree,
            config=config,
            recipient_count=len(recipients),
        )
        logger.info(
            "Built distribution: %d recipients, %d leaves, root %s",
            dist.recipient_count, tree.leaf_count, dist.root_b58,
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Tree levels: %s", tree_to_base58(tree))
        return dist

    @property
    def root(self) -> bytes:
        return self.tree.root

    @property
    def root_b58(self) -> str:
        return encode_digest(self.tree.root)

    def index_of(self, address: str) -> int:
        """
        Leaf position of a real recipient.

        Raises:
            LeafIndexError: If the address is not a recipient
        """
        try:
            return self._index[address]
        except KeyError:
            raise LeafIndexError(
                f"Address {address} is not part of this distribution",
                details={"address": address},
            ) from None

    def prove(self, index: int) -> Proof:
        """Proof for the entry stored at index (placeholders included)."""
        if index < 0 or index >= len(self.recipients):
            raise LeafIndexError(
                f"Leaf index {index} out of range for {len(self.recipients)} leaves",
                leaf_index=index,
            )
        proof = self._prover.prove(index, self.recipients[index])
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Proof for leaf %d: %s", index, proof_to_base58(proof))
        return proof

    def prove_address(self, address: str) -> Proof:
        return self.prove(self.index_of(address))

    def prove_all(self, max_workers: int | None = None) -> list[Proof]:
        """
        Proofs for every real recipient, in leaf order.

        Proofs are generated in a thread pool; the tree is immutable so the
        workers share it without locking.
        """
        indices = range(self.recipient_count)
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(self.prove, indices))

    def claim_payload(self, index: int, proof: Proof | None = None) -> ProofPayload:
        """Wire payload for the recipient at index."""
        if proof is None:
            proof = self.prove(index)
        recipient = self.recipients[index]
        return ProofPayload.from_proof(
            proof,
            index=index,
            address=recipient.address,
            amount=recipient.amount,
            usdc_amount=recipient.usdc_amount,
            root=self.root_b58,
        )

    def claim_payload_for(self, address: str) -> ProofPayload:
        return self.claim_payload(self.index_of(address))

    def claim_payloads(self, max_workers: int | None = None) -> list[ProofPayload]:
        """Wire payloads for every real recipient, in leaf order."""
        proofs = self.prove_all(max_workers=max_workers)
        return [self.claim_payload(i, proof) for i, proof in enumerate(proofs)]


__all__ = [
    "Distribution",
    "roots_equal",
    "tree_to_base58",
    "proof_to_base58",
]
