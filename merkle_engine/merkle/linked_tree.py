"""
Module 03 - Linked-Node Merkle Tree
Tree stored as an explicit binary tree of digest nodes.

Owner: Protocol/Crypto Engineer
Module ID: M03

Uses the same combination rule as the layered tree and produces
byte-identical roots and proofs for the same leaf ordering. Where the
layered tree keeps flat digest arrays, this variant keeps one MerkleNode
per vertex: more per-node overhead, but the structure can be navigated
from the root.

Ownership Notes:
- Each parent holds its two children for the lifetime of the tree
- The lone last node of an odd-length level is both children of its parent;
  this is the only node referenced twice, and the structure stays acyclic
- Nodes are never mutated after build()
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from merkle_engine.crypto.hashing import HashFunction, to_hex
from merkle_engine.merkle.base import MerkleTreeBase, merkle_parent


logger = logging.getLogger(__name__)


@dataclass(eq=False)
class MerkleNode:
    """
    A vertex of a linked Merkle tree.

    Attributes:
        hash: Digest of this node
        left: Left child (None for leaves)
        right: Right child (None for leaves; same object as left when the
               node pairs a lone child with itself)
    """
    hash: bytes
    left: Optional["MerkleNode"] = None
    right: Optional["MerkleNode"] = None

    def is_leaf(self) -> bool:
        """Check if this is a leaf node."""
        return self.left is None and self.right is None

    @property
    def is_self_paired(self) -> bool:
        """True when both children are the same node."""
        return self.left is not None and self.right is self.left


class LinkedMerkleTree(MerkleTreeBase):
    """
    Merkle tree kept as linked MerkleNode objects.

    Example:
        >>> tree = LinkedMerkleTree()
        >>> tree.build([b"a", b"b", b"c"])
        >>> tree.root_node.right.is_self_paired
        True
    """

    variant = "linked"

    def __init__(self, hash_function: Optional[HashFunction] = None) -> None:
        super().__init__(hash_function)
        self._root: Optional[MerkleNode] = None
        self._leaves: list[MerkleNode] = []
        self._height = 0

    @property
    def root_node(self) -> Optional[MerkleNode]:
        return self._root

    def build(self, leaves: Sequence[bytes]) -> None:
        """
        Build the node tree bottom-up.

        Leaves become childless nodes; consecutive nodes are paired into
        parents level by level until a single node remains.
        """
        self._leaves = [MerkleNode(hash=self.hash_leaf(item)) for item in leaves]
        self._root = None
        self._height = 0

        if not self._leaves:
            logger.debug("Built empty linked tree")
            return

        self._root = self._build_recursive(self._leaves)

        # Every leaf sits at the same depth, so the left spine gives the height.
        node: Optional[MerkleNode] = self._root
        while node is not None:
            self._height += 1
            node = node.left

        logger.debug(
            f"Built linked tree: {len(self._leaves)} leaves, height {self._height}"
        )

    def _build_recursive(self, nodes: list[MerkleNode]) -> MerkleNode:
        if len(nodes) == 1:
            return nodes[0]

        parents: list[MerkleNode] = []
        for i in range(0, len(nodes), 2):
            left = nodes[i]
            right = nodes[i + 1] if i + 1 < len(nodes) else left
            parents.append(
                MerkleNode(
                    hash=merkle_parent(self._hash_function, left.hash, right.hash),
                    left=left,
                    right=right,
                )
            )

        return self._build_recursive(parents)

    def _levels(self) -> list[list[MerkleNode]]:
        """Node levels reconstructed breadth-first, root level first."""
        if self._root is None:
            return []

        levels = [[self._root]]
        while levels[-1][0].left is not None:
            children: list[MerkleNode] = []
            for node in levels[-1]:
                children.append(node.left)
                if not node.is_self_paired:
                    children.append(node.right)
            levels.append(children)
        return levels

    def get_root(self) -> Optional[bytes]:
        return self._root.hash if self._root is not None else None

    def get_layer(self, level: int) -> Optional[list[bytes]]:
        if level < 0 or level >= self._height:
            return None
        if level == 0:
            return [leaf.hash for leaf in self._leaves]
        return [node.hash for node in self._levels()[self._height - 1 - level]]

    def get_leaf_count(self) -> int:
        return len(self._leaves)

    def get_tree_height(self) -> int:
        return self._height

    def find_leaf_index(self, item: bytes) -> Optional[int]:
        target = self.hash_leaf(item)
        for index, leaf in enumerate(self._leaves):
            if leaf.hash == target:
                return index
        return None

    def generate_proof_at(self, index: int) -> Optional[list[bytes]]:
        """
        Collect sibling digests by walking from the root down to a leaf.

        At each depth the bits of ``index`` select the child on the path;
        the other child is the sibling. A self-paired node's sibling is the
        node itself, matching the layered tree's odd-tail rule.

        Returns:
            Sibling digests leaf to root, or None if the tree is empty or
            the index is out of range
        """
        if self._root is None or index < 0 or index >= len(self._leaves):
            return None

        siblings: list[bytes] = []
        node = self._root
        for level in range(self._height - 1, 0, -1):
            if (index >> (level - 1)) % 2 == 0:
                node, sibling = node.left, node.right
            else:
                node, sibling = node.right, node.left
            siblings.append(sibling.hash)

        siblings.reverse()
        return siblings

    def dump_tree(self) -> str:
        """
        Render the tree sideways with box-drawing connectors.

        Right subtrees are printed above their parent and left subtrees
        below, so the root sits at the left margin.
        """
        if self._root is None:
            return "Empty tree"
        lines: list[str] = []
        self._dump_node(self._root, "", True, lines)
        return "".join(lines)

    def _dump_node(
        self,
        node: MerkleNode,
        prefix: str,
        is_left: bool,
        lines: list[str],
    ) -> None:
        if node.right is not None:
            self._dump_node(node.right, prefix + ("│   " if is_left else "    "), False, lines)

        lines.append(f"{prefix}{'└── ' if is_left else '┌── '}{to_hex(node.hash)}\n")

        if node.left is not None:
            self._dump_node(node.left, prefix + ("    " if is_left else "│   "), True, lines)


__all__ = ["MerkleNode", "LinkedMerkleTree"]
