"""
Module 04 - CLI Bench Command

Time tree construction, proof generation and proof verification for each
tree variant over the same synthetic items, proving one randomly chosen
item.

Usage:
    merkle bench [--count N] [--seed S] [--json]
"""

from __future__ import annotations

import json
import logging
import random
import time
from argparse import Namespace
from dataclasses import asdict, dataclass

from merkle_cli.exit_codes import EXIT_SUCCESS, EXIT_VERIFICATION_FAILED
from merkle_cli.inputs import generate_items, resolve_hash_function
from merkle_engine.crypto import to_hex
from merkle_engine.merkle import TreeVariant, create_tree


logger = logging.getLogger(__name__)


@dataclass
class BenchResult:
    """Timings for one tree variant."""
    variant: str = ""
    build_ms: float = 0.0
    prove_ms: float = 0.0
    verify_ms: float = 0.0
    proof_length: int = 0
    valid: bool = False
    root: str = ""


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000.0


def run_benchmark(items: list[bytes], leaf: bytes, variant: str, hash_function) -> BenchResult:
    """Build, prove ``leaf`` and verify with one variant."""
    tree = create_tree(variant, hash_function)

    start = time.perf_counter()
    tree.build(items)
    build_ms = _elapsed_ms(start)

    start = time.perf_counter()
    proof = tree.generate_proof(leaf)
    prove_ms = _elapsed_ms(start)

    start = time.perf_counter()
    valid = proof is not None and tree.verify_proof(leaf, proof)
    verify_ms = _elapsed_ms(start)

    root = tree.get_root()
    result = BenchResult(
        variant=variant,
        build_ms=build_ms,
        prove_ms=prove_ms,
        verify_ms=verify_ms,
        proof_length=len(proof) if proof is not None else 0,
        valid=valid,
        root=to_hex(root) if root is not None else "",
    )
    logger.info(
        f"{variant}: build {build_ms:.2f} ms, prove {prove_ms:.3f} ms, verify {verify_ms:.3f} ms"
    )
    return result


def bench_cmd(args: Namespace) -> int:
    """Execute the bench command."""
    config = args.cli_config
    count = args.count if args.count is not None else config.bench.count
    seed = args.seed if args.seed is not None else config.bench.seed
    if count < 1:
        raise ValueError(f"--count must be positive, got {count}")

    hash_function = resolve_hash_function(args)
    items = generate_items(count, seed)
    leaf = items[random.Random(seed).randrange(count)]

    results = [run_benchmark(items, leaf, v.value, hash_function) for v in TreeVariant]
    roots_agree = len({r.root for r in results}) == 1
    all_valid = all(r.valid for r in results)

    if args.json:
        print(json.dumps({
            "count": count,
            "algorithm": hash_function.name,
            "roots_agree": roots_agree,
            "results": [asdict(r) for r in results],
        }, indent=2))
    else:
        print(f"items: {count} ({hash_function.name})")
        for r in results:
            print(
                f"{r.variant:>8}: build {r.build_ms:10.2f} ms | prove {r.prove_ms:8.3f} ms | "
                f"verify {r.verify_ms:8.3f} ms | proof {r.proof_length} | valid {str(r.valid).lower()}"
            )
        print(f"root: {results[0].root}")
        print(f"roots_agree: {str(roots_agree).lower()}")

    return EXIT_SUCCESS if roots_agree and all_valid else EXIT_VERIFICATION_FAILED
