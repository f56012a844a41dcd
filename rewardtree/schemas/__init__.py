"""
Schemas
File: __init__.py

Purpose: Export the value types and error taxonomy shared by every
reward tree component.
"""

# Error models and exceptions
from .errors import (
    DuplicateAddressError,
    EmptyInputError,
    ErrorCodes,
    InputValidationException,
    InvalidAddressError,
    InvalidEncodingError,
    LeafIndexError,
    LeafMismatchError,
    MissingSiblingError,
    NonIntegerAmountError,
    ProofConstructionError,
    ProofGenerationException,
    ProofShapeError,
    RewardTreeError,
    RewardTreeException,
    TreeShapeError,
    UnsortedInputError,
)

# Value types
from .recipient import RecipientInput
from .proof import Proof, ProofPayload


__all__ = [
    # Errors
    "ErrorCodes",
    "RewardTreeError",
    "RewardTreeException",
    "InputValidationException",
    "EmptyInputError",
    "InvalidAddressError",
    "NonIntegerAmountError",
    "DuplicateAddressError",
    "UnsortedInputError",
    "TreeShapeError",
    "ProofGenerationException",
    "LeafIndexError",
    "LeafMismatchError",
    "MissingSiblingError",
    "ProofConstructionError",
    "ProofShapeError",
    "InvalidEncodingError",
    # Value types
    "RecipientInput",
    "Proof",
    "ProofPayload",
]
