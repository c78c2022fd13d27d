"""
Module 04 - CLI Prove Command

Generate an inclusion proof for one item and emit it as a portable
ProofDocument (JSON).

Usage:
    merkle prove items.txt "some item" [--out proof.json] [--json]
    merkle prove items.txt --index 3 [--out proof.json]
"""

from __future__ import annotations

import logging
import os
import sys
from argparse import Namespace
from pathlib import Path

from merkle_cli.exit_codes import EXIT_RUNTIME_ERROR, EXIT_SUCCESS, EXIT_VERIFICATION_FAILED
from merkle_cli.inputs import build_from_args
from merkle_engine.merkle import MerkleProver
from merkle_engine.schemas import ErrorCodes, MerkleError


logger = logging.getLogger(__name__)


def _not_found_error(leaf_count: int, target: str) -> MerkleError:
    """Structured error for a prove request with nothing to prove."""
    if leaf_count == 0:
        return MerkleError(
            code=ErrorCodes.EMPTY_TREE,
            message=f"{target}: the tree has no leaves",
            details={"leaf_count": 0},
        )
    return MerkleError(
        code=ErrorCodes.LEAF_NOT_FOUND,
        message=f"{target} is not among {leaf_count} leaves",
        details={"leaf_count": leaf_count},
    )


def prove_cmd(args: Namespace) -> int:
    """
    Execute the prove command.

    Returns:
        Exit code (2 when the item or index is not in the tree)
    """
    # With --random there is no items file, so a lone positional is the item.
    if args.random is not None and args.items is not None and args.item is None:
        args.item, args.items = args.items, None

    if args.item is None and args.index is None:
        print("Error: pass an item or --index", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    tree, items = build_from_args(args)

    if args.index is not None:
        proof = MerkleProver.prove_index(tree, args.index)
        target = f"index {args.index}"
    else:
        # argv is decoded with surrogateescape; fsencode restores the raw bytes
        proof = MerkleProver.prove(tree, os.fsencode(args.item))
        target = repr(args.item)

    if proof is None:
        error = _not_found_error(tree.get_leaf_count(), target)
        if args.json:
            print(error.model_dump_json(indent=2))
        else:
            print(f"not found: {error.message}", file=sys.stderr)
        return EXIT_VERIFICATION_FAILED

    item = items[proof.index]
    document = proof.to_document(item, tree.hash_function.name, tree.variant)
    logger.info(f"Generated proof for {target}: {proof.depth} sibling(s)")

    if args.out:
        out_path = Path(args.out)
        out_path.write_text(document.to_json() + "\n")
        print(f"Wrote proof to {out_path}")
    elif args.json:
        print(document.to_json())
    else:
        print(f"leaf_index: {document.leaf_index}")
        print(f"leaf: {document.leaf_hex}")
        print(f"root: {document.root_hex}")
        print(f"siblings ({len(document.siblings)}):")
        for sibling in document.siblings:
            print(f"  {sibling}")

    return EXIT_SUCCESS
