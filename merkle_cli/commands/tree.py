"""
Module 04 - CLI Root and Dump Commands

Build a tree over an item file and print its root or its full structure.

Usage:
    merkle root items.txt [--json]
    merkle dump items.txt
"""

from __future__ import annotations

import json
from argparse import Namespace

from merkle_cli.exit_codes import EXIT_SUCCESS
from merkle_cli.inputs import build_from_args
from merkle_engine.crypto import to_hex


def root_cmd(args: Namespace) -> int:
    """Print the root digest of the item set."""
    tree, items = build_from_args(args)
    root = tree.get_root()
    root_hex = to_hex(root) if root is not None else None

    if args.json:
        print(json.dumps({
            "variant": tree.variant,
            "algorithm": tree.hash_function.name,
            "leaf_count": tree.get_leaf_count(),
            "height": tree.get_tree_height(),
            "root": root_hex,
        }, indent=2))
    else:
        print(root_hex if root_hex is not None else "(empty tree)")

    return EXIT_SUCCESS


def dump_cmd(args: Namespace) -> int:
    """Print the variant's debug rendering of the tree."""
    tree, _ = build_from_args(args)
    output = tree.dump_tree()
    print(output, end="" if output.endswith("\n") else "\n")
    return EXIT_SUCCESS
