"""
Schemas
File: proof.py

Purpose: Merkle proof value type and its wire payload.

A Proof holds raw digests and is what the prover and verifier exchange.
A ProofPayload is the JSON form handed to claim submitters: siblings as
base-58 strings, path flags as booleans.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class Proof:
    """
    Sibling path from one leaf to the root.

    Attributes:
        siblings: Sibling digests ordered leaf to root
        path: One flag per sibling; True means the sibling sits to the
              LEFT of the computed node, False means to the right
    """
    siblings: tuple[bytes, ...]
    path: tuple[bool, ...]

    def __post_init__(self) -> None:
        # Accept any sequence, store tuples
        object.__setattr__(self, "siblings", tuple(self.siblings))
        object.__setattr__(self, "path", tuple(self.path))

    @classmethod
    def empty(cls) -> "Proof":
        """Proof for a single-leaf tree: the leaf is the root."""
        return cls(siblings=(), path=())

    def __len__(self) -> int:
        return len(self.siblings)


class ProofPayload(BaseModel):
    """
    Claim payload for an external submitter.

    Only `proof` and `path` are needed by the verifier; the remaining
    fields describe the claimed leaf and are filled in by Distribution.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    proof: list[str] = Field(
        default_factory=list,
        description="Sibling digests as base-58 strings, leaf to root",
    )
    path: list[bool] = Field(
        default_factory=list,
        description="True where the sibling is on the left",
    )
    index: int | None = Field(default=None, ge=0)
    address: str | None = Field(default=None)
    amount: int | None = Field(default=None, ge=0)
    usdc_amount: int | None = Field(default=None, ge=0, alias="usdcAmount")
    root: str | None = Field(
        default=None,
        description="Base-58 root the proof was generated against",
    )

    @classmethod
    def from_proof(cls, proof: Proof, **fields: Any) -> "ProofPayload":
        """Encode a Proof, attaching optional claim fields."""
        from rewardtree.crypto.encoding import encode_digests

        return cls(proof=encode_digests(proof.siblings), path=list(proof.path), **fields)

    def to_proof(self) -> Proof:
        """
        Decode back into a Proof.

        Raises:
            InvalidEncodingError: If any sibling is not a base-58 digest
        """
        from rewardtree.crypto.encoding import decode_digests

        return Proof(siblings=decode_digests(self.proof), path=self.path)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


__all__ = [
    "Proof",
    "ProofPayload",
]
