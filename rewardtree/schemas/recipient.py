"""
Schemas
File: recipient.py

Purpose: The recipient record a distribution commits to, and its canonical
leaf text.

The leaf text "{address},{amount},{usdc_amount}" is load-bearing: the
on-chain verifier rebuilds exactly this string, so any change to the
separator or integer rendering produces an incompatible root.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from rewardtree.crypto.hashing import hash_leaf
from .errors import InvalidAddressError, NonIntegerAmountError


# Accepted mapping keys, first match wins
_AMOUNT_KEYS = ("amount", "tokenAmount", "token_amount")
_USDC_KEYS = ("usdcAmount", "usdc_amount")


@dataclass(frozen=True)
class RecipientInput:
    """
    A single payout entry.

    Attributes:
        address: Wallet address (base-58 public key)
        amount: Reward token amount, base units
        usdc_amount: USDC amount, base units
    """
    address: str
    amount: int
    usdc_amount: int

    @classmethod
    def placeholder(cls, address: str) -> "RecipientInput":
        """Inert zero-amount entry used to pad the leaf level."""
        return cls(address=address, amount=0, usdc_amount=0)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RecipientInput":
        """
        Build a recipient from a JSON-style mapping.

        Values are taken as-is; type checks happen during normalization.
        """
        if "address" not in data:
            raise InvalidAddressError("Recipient entry has no address")
        amount = _first_present(data, _AMOUNT_KEYS)
        if amount is _MISSING:
            raise NonIntegerAmountError(
                "Recipient entry has no amount", address=data["address"]
            )
        usdc_amount = _first_present(data, _USDC_KEYS)
        if usdc_amount is _MISSING:
            raise NonIntegerAmountError(
                "Recipient entry has no usdcAmount", address=data["address"]
            )
        return cls(address=data["address"], amount=amount, usdc_amount=usdc_amount)

    def leaf_text(self) -> str:
        """
        Canonical leaf text: fields joined by commas, integers in base 10.

        Raises:
            NonIntegerAmountError: If an amount is not a non-negative int
        """
        for name, value in (("amount", self.amount), ("usdc_amount", self.usdc_amount)):
            if not is_valid_amount(value):
                raise NonIntegerAmountError(
                    f"{name} {value!r} for {self.address} is not a non-negative integer",
                    address=str(self.address),
                )
        return f"{self.address},{self.amount:d},{self.usdc_amount:d}"

    def leaf_hash(self, domain_separation: bool = False) -> bytes:
        """Digest of the canonical leaf text."""
        return hash_leaf(self.leaf_text(), domain_separation=domain_separation)

    def to_dict(self) -> dict[str, Any]:
        return {
            "address": self.address,
            "amount": self.amount,
            "usdcAmount": self.usdc_amount,
        }


_MISSING = object()


def is_valid_amount(value: Any) -> bool:
    """Amounts are non-negative ints; bool is an int subclass but never an amount."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _first_present(data: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return _MISSING


__all__ = [
    "RecipientInput",
    "is_valid_amount",
]
