"""
Item loading and tree construction shared by the CLI commands.

Items come from a file (one item per line, "-" for stdin) or are
synthesized as random alphanumeric strings for benchmarks.
"""

from __future__ import annotations

import logging
import random
import string
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path

from merkle_engine.config import RuntimeConfig
from merkle_engine.crypto import HashFunction, get_hash_function
from merkle_engine.merkle import MerkleTreeBase, create_tree


logger = logging.getLogger(__name__)


SYNTHETIC_ALPHABET = string.digits + string.ascii_lowercase
SYNTHETIC_ITEM_LENGTH = 26


def add_input_arguments(parser: ArgumentParser) -> None:
    """Attach the item-source arguments to a subcommand parser."""
    parser.add_argument(
        "items",
        type=str,
        nargs="?",
        default=None,
        help="File with one item per line ('-' for stdin)",
    )
    parser.add_argument(
        "--random",
        type=int,
        default=None,
        metavar="N",
        help="Use N synthetic random items instead of a file",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for --random",
    )


def read_items(source: str) -> list[bytes]:
    """
    Read items from a file, one per line.

    Lines end at ``\\n`` (one trailing ``\\r`` is dropped for CRLF files);
    any other byte, a lone ``\\r`` included, is part of the item. Blank
    lines are kept as empty items.
    """
    if source == "-":
        data = sys.stdin.buffer.read()
    else:
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"Items file not found: {path}")
        data = path.read_bytes()

    if not data:
        return []
    lines = data.split(b"\n")
    if lines[-1] == b"":
        lines.pop()
    return [line[:-1] if line.endswith(b"\r") else line for line in lines]


def generate_items(count: int, seed: int | None = None) -> list[bytes]:
    """
    Generate ``count`` random alphanumeric items.

    With a seed the output is reproducible.
    """
    rng = random.Random(seed)
    return [
        "".join(rng.choices(SYNTHETIC_ALPHABET, k=SYNTHETIC_ITEM_LENGTH)).encode("utf-8")
        for _ in range(count)
    ]


def load_items(args: Namespace) -> list[bytes]:
    """Resolve the item source selected on the command line."""
    if getattr(args, "random", None) is not None:
        if args.random < 0:
            raise ValueError(f"--random must be non-negative, got {args.random}")
        return generate_items(args.random, args.seed)
    if getattr(args, "items", None) is None:
        raise ValueError("No items given: pass a file path, '-' for stdin, or --random N")
    return read_items(args.items)


def resolve_hash_function(args: Namespace) -> HashFunction:
    """Digest selected by --hash, falling back to the configuration."""
    config: RuntimeConfig = args.cli_config
    return get_hash_function(getattr(args, "hash", None) or config.tree.hash_algorithm)


def resolve_variant(args: Namespace) -> str:
    config: RuntimeConfig = args.cli_config
    return getattr(args, "variant", None) or config.tree.variant


def build_from_args(args: Namespace) -> tuple[MerkleTreeBase, list[bytes]]:
    """Load items and build the configured tree variant over them."""
    items = load_items(args)
    tree = create_tree(resolve_variant(args), resolve_hash_function(args))
    tree.build(items)
    logger.info(
        f"Built {tree.variant} tree over {len(items)} items "
        f"({tree.hash_function.name}, height {tree.get_tree_height()})"
    )
    return tree, items
