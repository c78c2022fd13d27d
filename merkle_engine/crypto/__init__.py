"""
Core cryptographic utilities.

Module 02 provides the pluggable digest primitive and byte helpers
used by every tree variant.
"""
from .hashing import (
    DEFAULT_HASH_ALGORITHM,
    HashFunction,
    HashlibHash,
    Sha256Hash,
    available_hash_algorithms,
    get_hash_function,
    sha256,
    compare_bytes,
    concat_bytes,
    canonical_pair,
    to_hex,
    from_hex,
)

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
