"""
Module 04 - CLI Verify Command

Verify a ProofDocument offline, optionally against a trusted root.

Usage:
    merkle verify proof.json [--root HEX] [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from pathlib import Path

from merkle_cli.exit_codes import EXIT_RUNTIME_ERROR, EXIT_SUCCESS, EXIT_VERIFICATION_FAILED
from merkle_engine.crypto import from_hex
from merkle_engine.merkle import MerkleVerifier
from merkle_engine.schemas import ProofDocument, ProofFormatError


logger = logging.getLogger(__name__)


def verify_cmd(args: Namespace) -> int:
    """
    Execute the verify command.

    Returns:
        Exit code (0 valid, 2 invalid, 1 unreadable input)
    """
    proof_path = Path(args.proof_path)
    if not proof_path.exists():
        print(f"Error: Proof not found: {proof_path}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    try:
        document = ProofDocument.from_json(proof_path.read_text())
    except ProofFormatError as e:
        print(f"Error loading proof: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    trusted_root = None
    if args.root:
        try:
            trusted_root = from_hex(args.root)
        except ValueError as e:
            print(f"Error: --root is not valid hex: {e}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

    logger.info(f"Verifying {document.algorithm} proof for leaf {document.leaf_index}")
    valid = MerkleVerifier.verify_document(document, root=trusted_root)
    root_hex = trusted_root.hex() if trusted_root is not None else document.root_hex

    if args.json:
        print(json.dumps({
            "proof_path": str(proof_path),
            "valid": valid,
            "leaf_index": document.leaf_index,
            "algorithm": document.algorithm,
            "root": root_hex,
        }, indent=2))
    else:
        print(f"proof: {proof_path}")
        print(f"root: {root_hex}")
        print(f"valid: {str(valid).lower()}")

    return EXIT_SUCCESS if valid else EXIT_VERIFICATION_FAILED
