"""
Module 04 - CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m merkle_cli root <items> [--json]
    python -m merkle_cli dump <items>
    python -m merkle_cli prove <items> "<item>" [--index N] [--out PATH] [--json]
    python -m merkle_cli verify <proof.json> [--root HEX] [--json]
    python -m merkle_cli compare <items> [--json]
    python -m merkle_cli bench [--count N] [--seed S] [--json]
    python -m merkle_cli config --init | --show

Any <items> argument may be replaced by --random N [--seed S].

Environment Variables:
    MERKLE_HASH_ALGORITHM       Digest name (default: sha256)
    MERKLE_TREE_VARIANT         layered or linked (default: layered)
    MERKLE_LOG_LEVEL            Log level (default: INFO)
    MERKLE_LOG_FILE             Optional log file
    MERKLE_BENCH_COUNT          Items for bench (default: 65536)
    MERKLE_BENCH_SEED           Seed for bench items
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from merkle_cli.commands import bench, compare, prove, tree, verify
from merkle_cli.config import get_default_config_template, load_config
from merkle_cli.exit_codes import EXIT_RUNTIME_ERROR, EXIT_SUCCESS
from merkle_cli.inputs import add_input_arguments
from merkle_engine import __version__
from merkle_engine.crypto import get_hash_function
from merkle_engine.merkle import TreeVariant
from merkle_engine.schemas import UnsupportedHashAlgorithmError


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )


def _hash_algorithm(value: str) -> str:
    """argparse type for --hash: any name the digest registry resolves."""
    try:
        return get_hash_function(value).name
    except UnsupportedHashAlgorithmError as e:
        raise argparse.ArgumentTypeError(e.message) from e


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Print tracebacks on errors",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="merkle",
        description="Merkle tree CLI - compute roots, generate and verify inclusion proofs, compare tree variants.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: ./merkle.yaml or ~/.config/merkle/config.yaml)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--variant",
        type=str,
        default=None,
        choices=[v.value for v in TreeVariant],
        help="Tree variant (overrides config)",
    )
    parser.add_argument(
        "--hash",
        default=None,
        type=_hash_algorithm,
        metavar="NAME",
        help="Digest algorithm: any fixed-size hashlib name, e.g. sha256, sha3_256, blake2b (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- root command ---
    root_parser = subparsers.add_parser(
        "root",
        help="Print the Merkle root of an item set",
    )
    add_input_arguments(root_parser)
    _add_output_arguments(root_parser)
    root_parser.set_defaults(func=tree.root_cmd)

    # --- dump command ---
    dump_parser = subparsers.add_parser(
        "dump",
        help="Print the tree structure",
        description="Layered trees print one line per level; linked trees print a box-drawing tree.",
    )
    add_input_arguments(dump_parser)
    _add_output_arguments(dump_parser)
    dump_parser.set_defaults(func=tree.dump_cmd)

    # --- prove command ---
    prove_parser = subparsers.add_parser(
        "prove",
        help="Generate an inclusion proof for one item",
    )
    add_input_arguments(prove_parser)
    prove_parser.add_argument(
        "item",
        type=str,
        nargs="?",
        default=None,
        help="Item to prove (first matching leaf)",
    )
    prove_parser.add_argument(
        "--index",
        type=int,
        default=None,
        help="Prove the leaf at this position instead of matching by value",
    )
    prove_parser.add_argument(
        "--out", "-o",
        type=str,
        default=None,
        help="Write the proof document to this path",
    )
    _add_output_arguments(prove_parser)
    prove_parser.set_defaults(func=prove.prove_cmd)

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify a proof document offline",
    )
    verify_parser.add_argument(
        "proof_path",
        type=str,
        help="Path to a proof document written by 'prove --out'",
    )
    verify_parser.add_argument(
        "--root",
        type=str,
        default=None,
        help="Trusted root (hex) to verify against instead of the document's root",
    )
    _add_output_arguments(verify_parser)
    verify_parser.set_defaults(func=verify.verify_cmd)

    # --- compare command ---
    compare_parser = subparsers.add_parser(
        "compare",
        help="Cross-check all tree variants on the same items",
    )
    add_input_arguments(compare_parser)
    _add_output_arguments(compare_parser)
    compare_parser.set_defaults(func=compare.compare_cmd)

    # --- bench command ---
    bench_parser = subparsers.add_parser(
        "bench",
        help="Time build/prove/verify for each variant on synthetic items",
    )
    bench_parser.add_argument(
        "--count",
        type=int,
        default=None,
        help="Number of synthetic items (default: from config, 65536)",
    )
    bench_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for synthetic items and the proven leaf",
    )
    _add_output_arguments(bench_parser)
    bench_parser.set_defaults(func=bench.bench_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage CLI configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="merkle.yaml",
        help="Path for config file (default: merkle.yaml)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("\nEdit this file to configure your settings.")
        print("You can also use environment variables (MERKLE_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.cli_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    # Default: show help
    print("Usage: merkle config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=verification failed / not found)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    # Load configuration
    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    # Setup logging
    log_level = args.log_level or config.log_level
    setup_logging(level=log_level, log_file=config.log_file)

    # Attach config to args for commands to use
    args.cli_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if getattr(args, "debug", False):
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
