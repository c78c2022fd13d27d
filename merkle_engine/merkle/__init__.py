"""
Module 03 - Merkle Trees and Inclusion Proofs
Merkle tree construction + proof generation/verification in two
interchangeable representations.

Owner: Protocol/Crypto Engineer
Module ID: M03

This module provides:
- LayeredMerkleTree: tree kept as an ordered list of digest layers
- LinkedMerkleTree / MerkleNode: tree kept as explicit linked nodes
- verify_proof: standalone verifier shared by both variants
- MerkleProof / MerkleProver / MerkleVerifier: self-contained proofs
- create_tree / build_tree / TreeVariant: variant selection
- cross_check: compare variants by hex digest

Canonical Commitment Rules:
1. Leaf hashing: H(item)
2. Parent hashing: H(smaller + larger), bytes compared lexicographically
3. Padding: the last node of an odd-length layer pairs with itself
4. Empty tree: no root
5. Single leaf: root = H(item)

Usage:
    from merkle_engine.merkle import build_tree, verify_proof

    tree = build_tree([b"a", b"b", b"c"], variant="linked")
    proof = tree.generate_proof(b"c")
    assert verify_proof(b"c", proof, tree.get_root(), tree.hash_function)
"""
from .base import (
    MerkleTreeBase,
    merkle_parent,
    compute_root_from_proof,
    verify_proof,
)

from .layered_tree import LayeredMerkleTree

from .linked_tree import (
    MerkleNode,
    LinkedMerkleTree,
)

from .merkle_proofs import (
    MerkleProof,
    MerkleProver,
    MerkleVerifier,
)

from .factory import (
    TreeVariant,
    create_tree,
    build_tree,
)

from .conformance import cross_check


__all__ = [
    # Interface and combination rule
    "MerkleTreeBase",
    "merkle_parent",
    "compute_root_from_proof",
    "verify_proof",
    # Variants
    "LayeredMerkleTree",
    "LinkedMerkleTree",
    "MerkleNode",
    # Convenience classes
    "MerkleProof",
    "MerkleProver",
    "MerkleVerifier",
    # Selection and conformance
    "TreeVariant",
    "create_tree",
    "build_tree",
    "cross_check",
]
