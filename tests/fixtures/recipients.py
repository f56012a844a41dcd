"""
Recipient fixtures shared by all test modules.

Addresses are derived from fixed byte patterns so they are valid base-58
public keys and stable across runs. Factories return lists already sorted
by address, which is what the normalizer requires.
"""

from typing import Optional

from rewardtree.crypto.encoding import encode_digest
from rewardtree.merkle.normalizer import sort_recipients
from rewardtree.schemas.recipient import RecipientInput


def make_address(seed: int) -> str:
    """Deterministic valid wallet address for a small integer seed."""
    return encode_digest(bytes([seed % 256]) * 31 + bytes([(seed * 7 + 1) % 256]))


def make_recipients(
    count: int,
    base_amount: int = 1_000,
    usdc_amount: Optional[int] = None,
) -> list[RecipientInput]:
    """
    Build `count` sorted recipients with distinct amounts.

    usdc_amount defaults to a per-recipient value; pass 0 for token-only
    airdrops.
    """
    entries = [
        RecipientInput(
            address=make_address(seed),
            amount=base_amount * (seed + 1),
            usdc_amount=(seed * 10 if usdc_amount is None else usdc_amount),
        )
        for seed in range(1, count + 1)
    ]
    return sort_recipients(entries)


def make_letter_recipients(letters: str = "ABCD") -> list[RecipientInput]:
    """Recipients with single-letter addresses; only valid with address checks off."""
    return [
        RecipientInput(address=letter, amount=100 * (i + 1), usdc_amount=7 * (i + 1))
        for i, letter in enumerate(letters)
    ]
