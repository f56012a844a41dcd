"""
Merkle Tree Construction
Deterministic level-by-level tree over a normalized recipient list.

Canonical Commitment Rules (Hard Contracts):
1. Leaf hashing: leaf = sha256("{address},{amount},{usdc_amount}".encode("utf-8"))
   - Implemented via RecipientInput.leaf_hash()
2. Parent hashing: parent = sha256(left + right), no separator
3. No padding at this layer: the normalizer pads the leaf level to a power
   of two with zero-amount placeholders, so every level below the root has
   even length
4. Single leaf: one level, root = leaf

With domain separation enabled the rules become sha256(0x00 + text) and
sha256(0x01 + left + right). The on-chain verifier must use the same rules.

Determinism Notes:
- No randomness or non-deterministic ordering
- This module never sorts: leaf order is the normalized input order
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from rewardtree.config.runtime import MerkleConfig
from rewardtree.crypto.hashing import hash_node
from rewardtree.schemas.errors import EmptyInputError, TreeShapeError
from rewardtree.schemas.recipient import RecipientInput


logger = logging.getLogger(__name__)


def _is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


@dataclass(frozen=True)
class MerkleTree:
    """
    Immutable Merkle tree stored as levels of digests.

    levels[0] holds the leaves, levels[-1] holds the root alone. The parent
    of position j on level k is position j // 2 on level k + 1.

    Attributes:
        levels: Digests per level, leaves first
        domain_separation: Whether prefixed hashing was used
    """
    levels: tuple[tuple[bytes, ...], ...]
    domain_separation: bool = False

    def __post_init__(self) -> None:
        if not self.levels or len(self.levels[-1]) != 1:
            raise TreeShapeError("Tree must end in a single root digest")

    @property
    def root(self) -> bytes:
        return self.levels[-1][0]

    @property
    def leaves(self) -> tuple[bytes, ...]:
        return self.levels[0]

    @property
    def leaf_count(self) -> int:
        return len(self.levels[0])

    @property
    def height(self) -> int:
        """Number of levels, leaves and root included."""
        return len(self.levels)

    def level(self, k: int) -> tuple[bytes, ...]:
        return self.levels[k]

    def node(self, level: int, position: int) -> bytes:
        return self.levels[level][position]

    @classmethod
    def from_leaves(
        cls,
        leaves: Sequence[bytes],
        domain_separation: bool = False,
    ) -> "MerkleTree":
        """
        Build a tree from pre-hashed leaves.

        Raises:
            EmptyInputError: If leaves is empty
            TreeShapeError: If the leaf count is not a power of two
        """
        if len(leaves) == 0:
            raise EmptyInputError("Cannot build a tree without leaves")
        if not _is_power_of_two(len(leaves)):
            raise TreeShapeError(
                f"Leaf count must be a power of two, got {len(leaves)}; "
                "normalize the recipient list first",
                details={"leaf_count": len(leaves)},
            )

        levels: list[tuple[bytes, ...]] = [tuple(leaves)]
        current = levels[0]

        # Hash every sequential pair to build the parent level
        while len(current) > 1:
            current = tuple(
                hash_node(current[i], current[i + 1], domain_separation)
                for i in range(0, len(current), 2)
            )
            levels.append(current)

        return cls(levels=tuple(levels), domain_separation=domain_separation)


def build_merkle_tree(
    normalized: Sequence[RecipientInput],
    config: MerkleConfig | None = None,
) -> MerkleTree:
    """
    Build the full tree for a normalized recipient list.

    Args:
        normalized: Output of InputNormalizer.normalize (sorted, unique,
                    padded to a power of two)
        config: Hashing options; defaults to MerkleConfig()

    Returns:
        MerkleTree whose root commits to every entry

    Example:
        >>> tree = build_merkle_tree([RecipientInput("A", 100, 50)])
        >>> tree.root == sha256(b"A,100,50")
        True
    """
    config = config or MerkleConfig()
    leaves = [r.leaf_hash(config.domain_separation) for r in normalized]
    tree = MerkleTree.from_leaves(leaves, domain_separation=config.domain_separation)
    logger.debug("Built merkle tree: %d leaves, height %d", tree.leaf_count, tree.height)
    return tree


__all__ = [
    "MerkleTree",
    "build_merkle_tree",
]
