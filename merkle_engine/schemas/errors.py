"""
Module 01 - Schemas
File: errors.py

Purpose: Error taxonomy for the Merkle engine.
Defines both Pydantic models for structured error reporting
and Python exceptions for control flow at the package edges.

The tree engine itself never raises for an absent leaf, an empty tree or a
failed verification: those are ordinary results (None / False). Exceptions
are reserved for configuration, registry lookups and decoding untrusted
proof documents.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used across the engine and CLI."""

    # Tree query results
    LEAF_NOT_FOUND = "LEAF_NOT_FOUND"
    EMPTY_TREE = "EMPTY_TREE"

    # Merkle & Commitment Errors
    MERKLE_PROOF_INVALID = "MERKLE_PROOF_INVALID"
    ROOT_MISMATCH = "ROOT_MISMATCH"
    VARIANT_MISMATCH = "VARIANT_MISMATCH"

    # Input & Configuration Errors
    UNSUPPORTED_HASH_ALGORITHM = "UNSUPPORTED_HASH_ALGORITHM"
    PROOF_FORMAT_ERROR = "PROOF_FORMAT_ERROR"
    CONFIG_ERROR = "CONFIG_ERROR"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class MerkleError(BaseModel):
    """
    Base error model for structured error reporting.

    Used for passing errors around without exceptions, e.g. in CLI JSON
    output or cross-check reports.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.LEAF_NOT_FOUND],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )

    def to_exception(self) -> "MerkleException":
        """Convert this error model to a raised exception."""
        return MerkleException(
            code=self.code,
            message=self.message,
            details=self.details,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class MerkleException(Exception):
    """
    Base exception for all Merkle engine errors.

    Carries structured error information and can be converted to a
    MerkleError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "MERKLE_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_error_model(self) -> MerkleError:
        """Convert this exception to a MerkleError model."""
        return MerkleError(
            code=self.code,
            message=self.message,
            details=self.details,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class UnsupportedHashAlgorithmError(MerkleException):
    """Raised when a digest algorithm name cannot be resolved."""

    def __init__(self, algorithm: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            message=f"Unsupported hash algorithm: {algorithm!r}",
            code=ErrorCodes.UNSUPPORTED_HASH_ALGORITHM,
            details={"algorithm": algorithm, **(details or {})},
        )
        self.algorithm = algorithm


class ProofFormatError(MerkleException):
    """Raised when a serialized proof document cannot be decoded."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.PROOF_FORMAT_ERROR,
            details=details,
        )


class ConfigError(MerkleException):
    """Raised when runtime configuration holds an invalid value."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIG_ERROR,
            details=details,
        )
