"""
Module 04 - CLI Compare Command

Build every tree variant over the same items and compare roots and proofs.

Usage:
    merkle compare items.txt [--json]
    merkle compare --random 1000 --seed 7
"""

from __future__ import annotations

import json
from argparse import Namespace

from merkle_cli.exit_codes import EXIT_SUCCESS, EXIT_VERIFICATION_FAILED
from merkle_cli.inputs import load_items, resolve_hash_function
from merkle_engine.merkle import TreeVariant, cross_check


def compare_cmd(args: Namespace) -> int:
    """Execute the compare command."""
    items = load_items(args)
    report = cross_check(items, resolve_hash_function(args), list(TreeVariant))

    if args.json:
        print(json.dumps(report.summary(), indent=2))
    else:
        print(f"algorithm: {report.algorithm}")
        print(f"leaf_count: {report.leaf_count}")
        for variant, root in report.roots.items():
            print(f"root[{variant}]: {root if root is not None else '(empty tree)'}")
        print(f"proofs_checked: {report.proofs_checked}")
        print(f"match: {str(report.ok).lower()}")
        for mismatch in report.mismatches[:10]:
            print(f"  ✗ {mismatch.message}")

    return EXIT_SUCCESS if report.ok else EXIT_VERIFICATION_FAILED
