"""
Module 03 - Tree Variant Factory
Tree variant selection.

Owner: Protocol/Crypto Engineer
Module ID: M03

Maps variant names (as used in configuration and on the command line) to
tree classes.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence

from merkle_engine.crypto.hashing import HashFunction
from merkle_engine.merkle.base import MerkleTreeBase
from merkle_engine.merkle.layered_tree import LayeredMerkleTree
from merkle_engine.merkle.linked_tree import LinkedMerkleTree


class TreeVariant(str, Enum):
    """Available tree representations."""
    LAYERED = "layered"
    LINKED = "linked"


_VARIANTS: dict[TreeVariant, type[MerkleTreeBase]] = {
    TreeVariant.LAYERED: LayeredMerkleTree,
    TreeVariant.LINKED: LinkedMerkleTree,
}


def create_tree(
    variant: TreeVariant | str = TreeVariant.LAYERED,
    hash_function: Optional[HashFunction] = None,
) -> MerkleTreeBase:
    """
    Instantiate an empty tree of the given variant.

    Raises:
        ValueError: If the variant name is unknown
    """
    return _VARIANTS[TreeVariant(variant)](hash_function)


def build_tree(
    items: Sequence[bytes],
    variant: TreeVariant | str = TreeVariant.LAYERED,
    hash_function: Optional[HashFunction] = None,
) -> MerkleTreeBase:
    """Instantiate and build a tree in one step."""
    tree = create_tree(variant, hash_function)
    tree.build(items)
    return tree


__all__ = [
    "TreeVariant",
    "create_tree",
    "build_tree",
]
