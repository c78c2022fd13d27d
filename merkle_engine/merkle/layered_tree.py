"""
Module 03 - Layered Merkle Tree
Tree stored as an ordered list of digest layers.

Owner: Protocol/Crypto Engineer
Module ID: M03

Layer 0 holds the leaf digests in input order; each following layer holds
ceil(n / 2) parents of the layer below; the last layer is the root
singleton. Proof generation reads siblings straight out of the stored
layers, so no digest is recomputed after build().

Determinism Notes:
- No randomness or non-deterministic ordering
- Leaf ordering is defined by the caller; leaves are never sorted,
  only sibling pairs are ordered before hashing
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from merkle_engine.crypto.hashing import HashFunction, to_hex
from merkle_engine.merkle.base import MerkleTreeBase, merkle_parent


logger = logging.getLogger(__name__)


class LayeredMerkleTree(MerkleTreeBase):
    """
    Merkle tree kept as a flat sequence of layers.

    Example:
        >>> tree = LayeredMerkleTree()
        >>> tree.build([b"a", b"b", b"c"])
        >>> tree.get_tree_height()
        3
        >>> tree.verify_proof(b"c", tree.generate_proof(b"c"))
        True
    """

    variant = "layered"

    def __init__(self, hash_function: Optional[HashFunction] = None) -> None:
        super().__init__(hash_function)
        self._layers: list[list[bytes]] = []
        self._leaf_count = 0

    def build(self, leaves: Sequence[bytes]) -> None:
        """
        Build the layers bottom-up.

        Algorithm:
        1. Layer 0 = H(leaf) for each leaf
        2. While the current layer has more than one digest, pair digests at
           stride 2; a lone last digest is paired with itself
        3. Stop at a layer of length 1 (the root)
        """
        self._leaf_count = len(leaves)
        self._layers = []

        if not leaves:
            logger.debug("Built empty layered tree")
            return

        current_layer = [self.hash_leaf(item) for item in leaves]
        self._layers.append(current_layer)

        while len(current_layer) > 1:
            next_layer: list[bytes] = []
            for i in range(0, len(current_layer), 2):
                left = current_layer[i]
                right = current_layer[i + 1] if i + 1 < len(current_layer) else left
                next_layer.append(merkle_parent(self._hash_function, left, right))
            self._layers.append(next_layer)
            current_layer = next_layer

        logger.debug(
            f"Built layered tree: {self._leaf_count} leaves, height {len(self._layers)}"
        )

    def get_root(self) -> Optional[bytes]:
        if not self._layers:
            return None
        return self._layers[-1][0]

    def get_layer(self, level: int) -> Optional[list[bytes]]:
        if level < 0 or level >= len(self._layers):
            return None
        return list(self._layers[level])

    def get_leaf_count(self) -> int:
        return self._leaf_count

    def get_tree_height(self) -> int:
        return len(self._layers)

    def find_leaf_index(self, item: bytes) -> Optional[int]:
        if not self._layers:
            return None
        target = self.hash_leaf(item)
        for index, digest in enumerate(self._layers[0]):
            if digest == target:
                return index
        return None

    def generate_proof_at(self, index: int) -> Optional[list[bytes]]:
        """
        Collect the sibling digests from the leaf at ``index`` up to the root.

        At each layer below the root the sibling is index - 1 for odd indexes
        and index + 1 for even ones. The lone last digest of an odd-length
        layer was paired with itself during build(), so its own digest is
        emitted as the sibling.

        Returns:
            Sibling digests leaf to root (empty for a single-leaf tree),
            or None if the tree is empty or the index is out of range
        """
        if not self._layers or index < 0 or index >= self._leaf_count:
            return None

        proof: list[bytes] = []
        for layer in self._layers[:-1]:
            sibling_index = index - 1 if index % 2 == 1 else index + 1
            if sibling_index < len(layer):
                proof.append(layer[sibling_index])
            else:
                proof.append(layer[index])
            index //= 2

        return proof

    def dump_tree(self) -> str:
        """
        Render one line per level, root first.

        Example output for two leaves:
            Level 1: 5e2b...
            Level 0: ca97..., 3e23...
        """
        lines = []
        for level in range(len(self._layers) - 1, -1, -1):
            digests = ", ".join(to_hex(d) for d in self._layers[level])
            lines.append(f"Level {level}: {digests}\n")
        return "".join(lines)


__all__ = ["LayeredMerkleTree"]
