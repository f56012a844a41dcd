"""
Schemas
File: errors.py

Purpose: Error taxonomy for tree construction, proof generation and
verification. Defines both a Pydantic model for structured error
communication and Python exceptions for control flow.

None of these errors are retryable: every operation is pure and
deterministic, so callers fix their input and call again.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Input normalization errors
    EMPTY_INPUT = "EMPTY_INPUT"
    INVALID_ADDRESS = "INVALID_ADDRESS"
    NON_INTEGER_AMOUNT = "NON_INTEGER_AMOUNT"
    DUPLICATE_ADDRESS = "DUPLICATE_ADDRESS"
    UNSORTED_INPUT = "UNSORTED_INPUT"

    # Tree construction errors
    TREE_SHAPE_INVALID = "TREE_SHAPE_INVALID"

    # Proof generation errors
    LEAF_INDEX_INVALID = "LEAF_INDEX_INVALID"
    LEAF_HASH_MISMATCH = "LEAF_HASH_MISMATCH"
    MISSING_SIBLING = "MISSING_SIBLING"
    PROOF_CONSTRUCTION_FAILED = "PROOF_CONSTRUCTION_FAILED"

    # Verification errors
    PROOF_SHAPE_INVALID = "PROOF_SHAPE_INVALID"

    # Codec errors
    INVALID_ENCODING = "INVALID_ENCODING"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class RewardTreeError(BaseModel):
    """
    Error model for structured error communication.

    Used where an error has to be serialized (CLI JSON output, logs)
    instead of raised.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.UNSORTED_INPUT],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )

    def to_exception(self) -> "RewardTreeException":
        """Convert this error model to a raisable exception."""
        return RewardTreeException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class RewardTreeException(Exception):
    """
    Base exception for all reward tree errors.

    Carries structured error information and can be converted to a
    RewardTreeError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "REWARD_TREE_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> RewardTreeError:
        """Convert this exception to a RewardTreeError model."""
        return RewardTreeError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


# -----------------------------------------------------------------------------
# Input normalization
# -----------------------------------------------------------------------------

class InputValidationException(RewardTreeException):
    """Base for caller-data problems found while normalizing recipients."""

    default_code = "INPUT_VALIDATION_ERROR"

    def __init__(
        self,
        message: str,
        index: int | None = None,
        address: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if index is not None:
            full_details["index"] = index
        if address is not None:
            full_details["address"] = address
        super().__init__(
            message=message,
            code=self.default_code,
            details=full_details,
            retryable=False,
        )


class EmptyInputError(InputValidationException):
    """Raised when the recipient list has no entries."""

    default_code = ErrorCodes.EMPTY_INPUT


class InvalidAddressError(InputValidationException):
    """Raised when an address is not a valid wallet address."""

    default_code = ErrorCodes.INVALID_ADDRESS


class NonIntegerAmountError(InputValidationException):
    """Raised when amount or usdc_amount is not a non-negative integer."""

    default_code = ErrorCodes.NON_INTEGER_AMOUNT


class DuplicateAddressError(InputValidationException):
    """Raised when an address appears more than once."""

    default_code = ErrorCodes.DUPLICATE_ADDRESS


class UnsortedInputError(InputValidationException):
    """Raised when recipients are not in strict ascending address order."""

    default_code = ErrorCodes.UNSORTED_INPUT


# -----------------------------------------------------------------------------
# Tree construction
# -----------------------------------------------------------------------------

class TreeShapeError(RewardTreeException):
    """Raised when the builder is handed input that was not normalized."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.TREE_SHAPE_INVALID,
            details=details,
            retryable=False,
        )


# -----------------------------------------------------------------------------
# Proof generation
# -----------------------------------------------------------------------------

class ProofGenerationException(RewardTreeException):
    """Base for internal-consistency failures while building a proof."""

    default_code = "PROOF_GENERATION_ERROR"

    def __init__(
        self,
        message: str,
        leaf_index: int | None = None,
        level: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if leaf_index is not None:
            full_details["leaf_index"] = leaf_index
        if level is not None:
            full_details["level"] = level
        super().__init__(
            message=message,
            code=self.default_code,
            details=full_details,
            retryable=False,
        )


class LeafIndexError(ProofGenerationException):
    """Raised when the requested leaf position does not exist."""

    default_code = ErrorCodes.LEAF_INDEX_INVALID


class LeafMismatchError(ProofGenerationException):
    """Raised when declared recipient data does not hash to the stored leaf."""

    default_code = ErrorCodes.LEAF_HASH_MISMATCH


class MissingSiblingError(ProofGenerationException):
    """Raised when a sibling position is absent from a tree level."""

    default_code = ErrorCodes.MISSING_SIBLING


class ProofConstructionError(ProofGenerationException):
    """Raised when a freshly generated proof fails self-verification."""

    default_code = ErrorCodes.PROOF_CONSTRUCTION_FAILED


# -----------------------------------------------------------------------------
# Verification and codec
# -----------------------------------------------------------------------------

class ProofShapeError(RewardTreeException):
    """Raised when a proof's siblings and path lengths differ."""

    def __init__(
        self,
        message: str,
        siblings: int | None = None,
        path: int | None = None,
    ) -> None:
        details: dict[str, Any] = {}
        if siblings is not None:
            details["siblings"] = siblings
        if path is not None:
            details["path"] = path
        super().__init__(
            message=message,
            code=ErrorCodes.PROOF_SHAPE_INVALID,
            details=details,
            retryable=False,
        )


class InvalidEncodingError(RewardTreeException):
    """Raised when base-58 text cannot be decoded into a digest."""

    def __init__(
        self,
        message: str,
        value: str | None = None,
    ) -> None:
        details: dict[str, Any] = {}
        if value is not None:
            details["value"] = value
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_ENCODING,
            details=details,
            retryable=False,
        )
