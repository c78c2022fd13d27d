"""
Module 03 - Variant Conformance
Cross-variant conformance checking.

Owner: Protocol/Crypto Engineer
Module ID: M03

Builds every requested tree variant from the same ordered items and digest,
then compares roots and the proof of every leaf position by hex digest.
Any other implementation that produces hex roots and proofs for the same
ordering can be checked the same way.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from merkle_engine.crypto.hashing import HashFunction, Sha256Hash, to_hex
from merkle_engine.merkle.factory import TreeVariant, build_tree
from merkle_engine.schemas.errors import ErrorCodes, MerkleError
from merkle_engine.schemas.verification import CrossCheckReport


logger = logging.getLogger(__name__)


def _hex_or_none(digest: Optional[bytes]) -> Optional[str]:
    return to_hex(digest) if digest is not None else None


def cross_check(
    items: Sequence[bytes],
    hash_function: Optional[HashFunction] = None,
    variants: Sequence[TreeVariant | str] = (TreeVariant.LAYERED, TreeVariant.LINKED),
) -> CrossCheckReport:
    """
    Compare tree variants built from identical input.

    The first variant is the reference; every other variant must match its
    root, its tree height and, for every leaf index, its proof.

    Args:
        items: Ordered input items
        hash_function: Digest shared by all variants (default SHA-256)
        variants: Variants to build

    Returns:
        CrossCheckReport listing every mismatch found
    """
    hash_function = hash_function or Sha256Hash()
    names = [TreeVariant(v).value for v in variants]
    trees = {name: build_tree(items, name, hash_function) for name in names}

    report = CrossCheckReport(
        algorithm=hash_function.name,
        leaf_count=len(items),
        variants=names,
        roots={name: _hex_or_none(tree.get_root()) for name, tree in trees.items()},
    )
    if len(names) < 2:
        return report

    reference_name = names[0]
    reference = trees[reference_name]

    for name in names[1:]:
        tree = trees[name]
        if report.roots[name] != report.roots[reference_name]:
            report.mismatches.append(MerkleError(
                code=ErrorCodes.ROOT_MISMATCH,
                message=f"{name} root {report.roots[name]} != {reference_name} root {report.roots[reference_name]}",
                details={"variant": name},
            ))
        if tree.get_tree_height() != reference.get_tree_height():
            report.mismatches.append(MerkleError(
                code=ErrorCodes.VARIANT_MISMATCH,
                message=f"{name} height {tree.get_tree_height()} != {reference_name} height {reference.get_tree_height()}",
                details={"variant": name},
            ))

        for index in range(len(items)):
            expected = [to_hex(d) for d in reference.generate_proof_at(index) or []]
            actual = [to_hex(d) for d in tree.generate_proof_at(index) or []]
            report.proofs_checked += 1
            if actual != expected:
                report.mismatches.append(MerkleError(
                    code=ErrorCodes.MERKLE_PROOF_INVALID,
                    message=f"{name} proof for leaf {index} differs from {reference_name}",
                    details={"variant": name, "index": index, "expected": expected, "actual": actual},
                ))

    if report.ok:
        logger.debug(f"Cross-check passed: {names} over {len(items)} leaves")
    else:
        logger.warning(f"Cross-check found {len(report.mismatches)} mismatch(es) across {names}")

    return report


__all__ = ["cross_check"]
