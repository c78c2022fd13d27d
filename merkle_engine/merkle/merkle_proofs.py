"""
Module 03 - Merkle Proofs Convenience Wrappers
Class-based interfaces around tree proof generation and verification.

Owner: Protocol/Crypto Engineer
Module ID: M03

This module provides:
- MerkleProof: a self-contained proof (leaf digest, index, siblings, root)
- MerkleProver: Generate proofs from any tree variant
- MerkleVerifier: Verify proofs without the tree

Tree methods return bare sibling lists; these wrappers bundle the pieces a
verifier needs so a proof can be checked on its own.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from merkle_engine.crypto.hashing import HashFunction, get_hash_function, to_hex
from merkle_engine.merkle.base import (
    MerkleTreeBase,
    compute_root_from_proof,
    verify_proof,
)
from merkle_engine.schemas.proof import ProofDocument


@dataclass(frozen=True)
class MerkleProof:
    """
    A Merkle inclusion proof for a single leaf.

    Attributes:
        leaf: The leaf digest being proven
        index: The 0-based position of the leaf in the original ordering
        siblings: Sibling digests from leaf to root
        root: The Merkle root this proof is against
    """
    leaf: bytes
    index: int
    siblings: list[bytes]
    root: bytes

    def __post_init__(self) -> None:
        """Validate proof structure."""
        if self.index < 0:
            raise ValueError(f"Leaf index must be non-negative, got {self.index}")

    @property
    def depth(self) -> int:
        """Number of combination steps from leaf to root."""
        return len(self.siblings)

    def to_document(self, item: bytes, algorithm: str, variant: str = "layered") -> ProofDocument:
        """Hex-encode this proof together with the item it proves."""
        return ProofDocument(
            algorithm=algorithm,
            variant=variant,
            leaf_index=self.index,
            item_hex=to_hex(item),
            leaf_hex=to_hex(self.leaf),
            siblings=[to_hex(s) for s in self.siblings],
            root_hex=to_hex(self.root),
        )

    @classmethod
    def from_document(cls, document: ProofDocument) -> "MerkleProof":
        return cls(
            leaf=document.leaf,
            index=document.leaf_index,
            siblings=document.sibling_digests,
            root=document.root,
        )


class MerkleProver:
    """
    Convenience class for generating Merkle proofs.

    Example:
        >>> tree = LayeredMerkleTree()
        >>> tree.build([b"a", b"b", b"c"])
        >>> proof = MerkleProver.prove(tree, b"b")
        >>> proof.index
        1
    """

    @staticmethod
    def prove(tree: MerkleTreeBase, item: bytes) -> Optional[MerkleProof]:
        """
        Generate a proof for the first leaf equal to H(item).

        Returns:
            MerkleProof, or None if the item is absent or the tree is empty
        """
        index = tree.find_leaf_index(item)
        if index is None:
            return None
        return MerkleProver.prove_index(tree, index)

    @staticmethod
    def prove_index(tree: MerkleTreeBase, index: int) -> Optional[MerkleProof]:
        """
        Generate a proof for the leaf at the given position.

        Returns:
            MerkleProof, or None if the index is out of range or the tree
            is empty
        """
        siblings = tree.generate_proof_at(index)
        root = tree.get_root()
        if siblings is None or root is None:
            return None

        leaf_layer = tree.get_layer(0) or []
        return MerkleProof(
            leaf=leaf_layer[index],
            index=index,
            siblings=siblings,
            root=root,
        )


class MerkleVerifier:
    """
    Convenience class for verifying Merkle proofs.

    Example:
        >>> proof = MerkleProver.prove(tree, b"b")
        >>> MerkleVerifier.verify(proof, tree.hash_function)
        True
    """

    @staticmethod
    def verify(proof: MerkleProof, hash_function: HashFunction) -> bool:
        """
        Verify a bundled proof.

        Returns:
            True if the siblings fold the leaf digest into the root
        """
        return compute_root_from_proof(proof.leaf, proof.siblings, hash_function) == proof.root

    @staticmethod
    def verify_item(
        item: bytes,
        siblings: Sequence[bytes],
        root: Optional[bytes],
        hash_function: HashFunction,
    ) -> bool:
        """
        Verify an unhashed item against a root using raw components.

        Args:
            item: The original item
            siblings: Sibling digests (leaf to root)
            root: The claimed Merkle root
            hash_function: Digest the tree was built with
        """
        return verify_proof(item, siblings, root, hash_function)

    @staticmethod
    def verify_document(document: ProofDocument, root: Optional[bytes] = None) -> bool:
        """
        Verify a portable proof document offline.

        The item must hash to the document's leaf digest and the siblings
        must fold it into the root.

        Args:
            document: Parsed proof document
            root: Trusted root to check against; defaults to the root
                  recorded in the document

        Raises:
            UnsupportedHashAlgorithmError: If the document names an unknown digest
        """
        hash_function = get_hash_function(document.algorithm)
        if hash_function.hash(document.item) != document.leaf:
            return False
        expected_root = root if root is not None else document.root
        return verify_proof(document.item, document.sibling_digests, expected_root, hash_function)


__all__ = [
    "MerkleProof",
    "MerkleProver",
    "MerkleVerifier",
]
