"""
Module 01 - Schemas
File: __init__.py

Purpose: Export the public API for the schemas module: the error taxonomy,
the portable proof document and the cross-check report.
"""

from .errors import (
    ErrorCodes,
    MerkleError,
    MerkleException,
    UnsupportedHashAlgorithmError,
    ProofFormatError,
    ConfigError,
)

from .proof import (
    PROOF_SCHEMA_VERSION,
    ProofDocument,
)

from .verification import CrossCheckReport


__all__ = [
    # Errors
    "ErrorCodes",
    "MerkleError",
    "MerkleException",
    "UnsupportedHashAlgorithmError",
    "ProofFormatError",
    "ConfigError",
    # Proof exchange
    "PROOF_SCHEMA_VERSION",
    "ProofDocument",
    # Reports
    "CrossCheckReport",
]
