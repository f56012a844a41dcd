"""
Input Normalizer
Validates a recipient list and pads it to a power-of-two length.

Checks run in a fixed order so the first problem reported is stable:
1. Non-empty
2. Every address is a valid wallet address
3. Every amount is a non-negative integer
4. Addresses are unique
5. Addresses are in strict ascending order (see address_sort_key)

The normalizer verifies order, it never re-sorts: callers must supply the
canonical list so that the published root is reproducible from their data.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Sequence, Union

from rewardtree.config.runtime import MerkleConfig
from rewardtree.crypto.encoding import is_valid_address
from rewardtree.schemas.errors import (
    DuplicateAddressError,
    EmptyInputError,
    InvalidAddressError,
    NonIntegerAmountError,
    UnsortedInputError,
)
from rewardtree.schemas.recipient import RecipientInput, is_valid_amount


logger = logging.getLogger(__name__)

RecipientLike = Union[RecipientInput, Mapping[str, Any]]


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n (n >= 1)."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    return 1 << (n - 1).bit_length()


def address_sort_key(address: str) -> tuple[str, tuple[bool, ...]]:
    """
    Collation key for wallet addresses.

    Letters compare case-insensitively first; addresses equal up to case
    then order lowercase before uppercase at the first differing position.
    Digits sort before letters. This matches the root-publishing tooling,
    which sorts with String.localeCompare, for any base-58 address.
    """
    return address.lower(), tuple(c.isupper() for c in address)


def sort_recipients(recipients: Sequence[RecipientInput]) -> list[RecipientInput]:
    """Return a copy ordered by address_sort_key."""
    return sorted(recipients, key=lambda r: address_sort_key(r.address))


class InputNormalizer:
    """
    Validates and pads recipient lists.

    Example:
        >>> normalizer = InputNormalizer()
        >>> padded = normalizer.normalize(recipients)
        >>> len(padded) & (len(padded) - 1) == 0
        True
    """

    def __init__(
        self,
        config: MerkleConfig | None = None,
        address_validator: Callable[[str], bool] | None = None,
    ) -> None:
        self.config = config or MerkleConfig()
        if address_validator is not None:
            self._validate_address = address_validator
        elif self.config.validate_addresses:
            self._validate_address = is_valid_address
        else:
            self._validate_address = lambda address: isinstance(address, str) and bool(address)

    def validate(self, recipients: Sequence[RecipientLike]) -> list[RecipientInput]:
        """
        Run every check and return the recipients as RecipientInput values.

        Raises:
            EmptyInputError: No entries
            InvalidAddressError: An address fails the validator
            NonIntegerAmountError: An amount is not a non-negative int
            DuplicateAddressError: An address repeats
            UnsortedInputError: Addresses are not strictly ascending
        """
        if len(recipients) == 0:
            raise EmptyInputError("Recipient list cannot be empty")

        entries = [
            r if isinstance(r, RecipientInput) else RecipientInput.from_mapping(r)
            for r in recipients
        ]

        for i, entry in enumerate(entries):
            if not self._validate_address(entry.address):
                raise InvalidAddressError(
                    f"{entry.address!r} is not a valid wallet address",
                    index=i,
                    address=str(entry.address),
                )
            for name, value in (("amount", entry.amount), ("usdc_amount", entry.usdc_amount)):
                if not is_valid_amount(value):
                    raise NonIntegerAmountError(
                        f"{name} {value!r} for {entry.address} is not a non-negative integer",
                        index=i,
                        address=entry.address,
                    )

        seen: set[str] = set()
        for i, entry in enumerate(entries):
            if entry.address in seen:
                raise DuplicateAddressError(
                    f"Address {entry.address} appears more than once",
                    index=i,
                    address=entry.address,
                )
            seen.add(entry.address)

        expected = sort_recipients(entries)
        for i, (given, wanted) in enumerate(zip(entries, expected)):
            if given.address != wanted.address:
                raise UnsortedInputError(
                    f"Recipients must be sorted by address; position {i} holds "
                    f"{given.address}, expected {wanted.address}",
                    index=i,
                    address=given.address,
                )

        return entries

    def pad(self, entries: Sequence[RecipientInput]) -> list[RecipientInput]:
        """Append placeholder entries up to the next power of two."""
        padded = list(entries)
        target = next_power_of_two(len(padded))
        placeholder = RecipientInput.placeholder(self.config.placeholder_address)
        padded.extend(placeholder for _ in range(target - len(padded)))
        if target != len(entries):
            logger.debug(
                "Padded %d recipients to %d with %s",
                len(entries), target, self.config.placeholder_address,
            )
        return padded

    def normalize(self, recipients: Sequence[RecipientLike]) -> list[RecipientInput]:
        """Validate, then pad. Returns a new list; the input is untouched."""
        return self.pad(self.validate(recipients))


def normalize(
    recipients: Sequence[RecipientLike],
    config: MerkleConfig | None = None,
) -> list[RecipientInput]:
    """Validate and pad a recipient list with a default InputNormalizer."""
    return InputNormalizer(config).normalize(recipients)


__all__ = [
    "InputNormalizer",
    "address_sort_key",
    "normalize",
    "next_power_of_two",
    "sort_recipients",
]
