"""
Module 02 - Hashing Utilities
Pluggable digest primitives and byte helpers for Merkle commitments.

Owner: Protocol/Crypto Engineer
Module ID: M02

This module provides:
- HashFunction: the digest capability every tree is generic over
- Sha256Hash / HashlibHash: concrete digests backed by hashlib
- A name registry for resolving digests from configuration
- Byte helpers: lexicographic comparison, concatenation, canonical pairing
- Hex encoding/decoding

Security/Determinism Notes:
- Collision resistance is a property of the chosen digest, not of the tree
- All operations are deterministic and stateless
- Variable-length digests (SHAKE) are rejected: every digest of a tree must
  have the same fixed size
"""
from __future__ import annotations

import hashlib
from abc import ABC, abstractmethod

from merkle_engine.schemas.errors import UnsupportedHashAlgorithmError


DEFAULT_HASH_ALGORITHM = "sha256"


class HashFunction(ABC):
    """
    One-way function from bytes to a fixed-size digest.

    Implementations must be deterministic and free of side effects.
    """

    name: str = ""

    @property
    @abstractmethod
    def digest_size(self) -> int:
        """Size in bytes of every digest this function produces."""

    @abstractmethod
    def hash(self, data: bytes) -> bytes:
        """Return the digest of ``data``."""

    def __call__(self, data: bytes) -> bytes:
        return self.hash(data)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class HashlibHash(HashFunction):
    """
    Digest backed by any fixed-size ``hashlib`` algorithm.

    Example:
        >>> HashlibHash("sha3_256").hash(b"a").hex()[:8]
        '80084bf2'
    """

    def __init__(self, algorithm: str) -> None:
        try:
            probe = hashlib.new(algorithm)
        except (ValueError, TypeError) as e:
            raise UnsupportedHashAlgorithmError(algorithm) from e

        if probe.digest_size == 0:
            raise UnsupportedHashAlgorithmError(
                algorithm, details={"reason": "variable-length digest"}
            )

        self.name = probe.name
        self._algorithm = algorithm
        self._digest_size = probe.digest_size

    @property
    def digest_size(self) -> int:
        return self._digest_size

    def hash(self, data: bytes) -> bytes:
        return hashlib.new(self._algorithm, data).digest()


class Sha256Hash(HashFunction):
    """SHA-256, the default digest."""

    name = "sha256"

    @property
    def digest_size(self) -> int:
        return 32

    def hash(self, data: bytes) -> bytes:
        return hashlib.sha256(data).digest()


def available_hash_algorithms() -> list[str]:
    """
    List the digest names accepted by get_hash_function().

    Only algorithms guaranteed on every platform and with a fixed digest size
    are listed.
    """
    return sorted(
        name for name in hashlib.algorithms_guaranteed
        if not name.startswith("shake_")
    )


def get_hash_function(name: str | None = None) -> HashFunction:
    """
    Resolve a digest by name.

    Args:
        name: hashlib algorithm name (case-insensitive).
              Defaults to sha256.

    Returns:
        A HashFunction instance

    Raises:
        UnsupportedHashAlgorithmError: If the name is unknown or the
            algorithm has no fixed digest size
    """
    normalized = (name or DEFAULT_HASH_ALGORITHM).strip().lower()
    if normalized == "sha256":
        return Sha256Hash()
    return HashlibHash(normalized)


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


# =============================================================================
# Byte helpers
# =============================================================================


def compare_bytes(a: bytes, b: bytes) -> int:
    """
    Compare two byte sequences lexicographically.

    Bytes are compared pairwise from the start; when one sequence is a
    prefix of the other the shorter one sorts first.

    Returns:
        A negative number if a < b, zero if equal, positive if a > b
    """
    for x, y in zip(a, b):
        if x != y:
            return -1 if x < y else 1
    return len(a) - len(b)


def concat_bytes(a: bytes, b: bytes) -> bytes:
    """Concatenate two byte sequences."""
    return a + b


def canonical_pair(a: bytes, b: bytes) -> bytes:
    """
    Concatenate two digests smaller-first.

    The result does not depend on which argument is the left child, so a
    parent digest can be recomputed from a child and its sibling alone.
    """
    if compare_bytes(a, b) < 0:
        return concat_bytes(a, b)
    return concat_bytes(b, a)


def to_hex(data: bytes) -> str:
    """
    Convert bytes to a lowercase hexadecimal string (no prefix).

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        'deadbeef'
    """
    return data.hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert a hexadecimal string to bytes.

    An optional ``0x`` prefix is accepted.

    Raises:
        ValueError: If the string has odd length or contains invalid
                   hex characters
    """
    hex_content = hex_string[2:] if hex_string.startswith(("0x", "0X")) else hex_string

    if len(hex_content) % 2 != 0:
        raise ValueError(
            f"Hex string must have even length, got length {len(hex_content)}"
        )

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise ValueError(f"Invalid hex characters in string: {e}") from e


__all__ = [
    "DEFAULT_HASH_ALGORITHM",
    "HashFunction",
    "HashlibHash",
    "Sha256Hash",
    "available_hash_algorithms",
    "get_hash_function",
    "sha256",
    "compare_bytes",
    "concat_bytes",
    "canonical_pair",
    "to_hex",
    "from_hex",
]
