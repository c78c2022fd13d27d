"""
Module 03 - Merkle Tree Interface
Shared combination rule, standalone proof verification and the abstract
interface implemented by every tree variant.

Owner: Protocol/Crypto Engineer
Module ID: M03

Canonical Commitment Rules (Hard Contracts):
1. Leaf hashing: leaf = H(item)
2. Parent hashing: parent = H(min(a, b) + max(a, b)), bytes compared
   lexicographically, so proofs carry sibling digests only
3. Padding rule: the last node of an odd-length layer is paired with itself
   (parent = H(x + x)); its proof step carries x as its own sibling
4. Empty leaves: no layers, no root
5. Single leaf: root = H(item), no combination step, empty proof
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from merkle_engine.crypto.hashing import HashFunction, Sha256Hash, canonical_pair


logger = logging.getLogger(__name__)


def merkle_parent(hash_function: HashFunction, a: bytes, b: bytes) -> bytes:
    """
    Compute the parent digest of two sibling digests.

    The pair is ordered canonically before hashing, so
    merkle_parent(h, a, b) == merkle_parent(h, b, a).
    """
    return hash_function.hash(canonical_pair(a, b))


def compute_root_from_proof(
    leaf: bytes,
    proof: Sequence[bytes],
    hash_function: HashFunction,
) -> bytes:
    """Fold sibling digests into a leaf digest, leaf to root."""
    current = leaf
    for sibling in proof:
        current = merkle_parent(hash_function, current, sibling)
    return current


def verify_proof(
    item: bytes,
    proof: Sequence[bytes],
    root: Optional[bytes],
    hash_function: HashFunction,
) -> bool:
    """
    Verify an inclusion proof against a claimed root.

    Recomputes the root by folding each sibling digest into the running
    hash, leaf to root.

    Args:
        item: The original (unhashed) item
        proof: Sibling digests, leaf to root
        root: The claimed root; None never verifies
        hash_function: Digest the tree was built with

    Returns:
        True iff the recomputed digest equals root byte-for-byte
    """
    if root is None:
        return False

    leaf = hash_function.hash(item)
    return compute_root_from_proof(leaf, proof, hash_function) == root


class MerkleTreeBase(ABC):
    """
    Interface shared by the layered and linked-node tree variants.

    A tree is built once from an ordered sequence of items and only queried
    afterwards; calling build() again replaces the previous contents.
    Queries on an empty tree return None (or False for verification).
    """

    variant: str = ""

    def __init__(self, hash_function: Optional[HashFunction] = None) -> None:
        self._hash_function: HashFunction = hash_function or Sha256Hash()

    @property
    def hash_function(self) -> HashFunction:
        return self._hash_function

    def hash_leaf(self, item: bytes) -> bytes:
        """Digest an input item the way build() does."""
        return self._hash_function.hash(item)

    @abstractmethod
    def build(self, leaves: Sequence[bytes]) -> None:
        """Build the tree from an ordered sequence of items."""

    @abstractmethod
    def get_root(self) -> Optional[bytes]:
        """Root digest, or None for an empty tree."""

    @abstractmethod
    def get_layer(self, level: int) -> Optional[list[bytes]]:
        """Digests at ``level`` (0 = leaves), or None when out of range."""

    @abstractmethod
    def get_leaf_count(self) -> int:
        """Number of items the tree was built from."""

    @abstractmethod
    def get_tree_height(self) -> int:
        """Number of layers, leaves and root included (0 when empty)."""

    @abstractmethod
    def find_leaf_index(self, item: bytes) -> Optional[int]:
        """Position of the first leaf whose digest equals H(item)."""

    @abstractmethod
    def generate_proof_at(self, index: int) -> Optional[list[bytes]]:
        """Inclusion proof for the leaf at ``index``, or None if out of range."""

    @abstractmethod
    def dump_tree(self) -> str:
        """Deterministic human-readable rendering of the tree."""

    def generate_proof(self, item: bytes) -> Optional[list[bytes]]:
        """
        Generate an inclusion proof for an item.

        Duplicate items are indistinguishable by value; the first matching
        leaf is proven. Use generate_proof_at() for positional identity.

        Returns:
            Sibling digests leaf to root, or None if the item is not a leaf
        """
        index = self.find_leaf_index(item)
        if index is None:
            logger.debug(f"{self.variant} tree: item not found among {self.get_leaf_count()} leaves")
            return None
        return self.generate_proof_at(index)

    def verify_proof(
        self,
        item: bytes,
        proof: Sequence[bytes],
        root: Optional[bytes] = None,
    ) -> bool:
        """
        Verify a proof with this tree's digest.

        Args:
            item: The original (unhashed) item
            proof: Sibling digests, leaf to root
            root: Claimed root; defaults to this tree's root

        Returns:
            True if the proof recomputes the root, False otherwise
            (including when the tree is empty)
        """
        if root is None:
            root = self.get_root()
        return verify_proof(item, proof, root, self._hash_function)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(hash={self._hash_function.name!r}, "
            f"leaves={self.get_leaf_count()}, height={self.get_tree_height()})"
        )


__all__ = [
    "merkle_parent",
    "compute_root_from_proof",
    "verify_proof",
    "MerkleTreeBase",
]
