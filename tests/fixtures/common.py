"""
Common test fixtures shared by all modules.

Provides factory functions for tree inputs and an independent, by-hand
reference computation of the expected layers, so tests never derive
expected values from the code under test.
"""

import hashlib
from typing import Callable, Optional

from merkle_engine.crypto.hashing import HashFunction, Sha256Hash


def make_items(count: int, prefix: str = "leaf") -> list[bytes]:
    """Distinct items leaf0, leaf1, ..."""
    return [f"{prefix}{i}".encode() for i in range(count)]


def sorted_parent(hash_fn: Callable[[bytes], bytes], a: bytes, b: bytes) -> bytes:
    """Parent digest with the smaller child first."""
    lo, hi = sorted([a, b])
    return hash_fn(lo + hi)


def reference_layers(
    items: list[bytes],
    hash_function: Optional[HashFunction] = None,
) -> list[list[bytes]]:
    """
    Expected layers for ``items`` (duplicate-last padding).

    Kept deliberately naive: pads every odd layer with a copy of its last
    digest, then pairs.
    """
    hash_fn = (hash_function or Sha256Hash()).hash
    if not items:
        return []

    layers = [[hash_fn(item) for item in items]]
    while len(layers[-1]) > 1:
        layer = list(layers[-1])
        if len(layer) % 2 == 1:
            layer.append(layer[-1])
        layers.append([
            sorted_parent(hash_fn, layer[i], layer[i + 1])
            for i in range(0, len(layer), 2)
        ])
    return layers


def h(data: bytes) -> bytes:
    """Plain SHA-256, independent of the package under test."""
    return hashlib.sha256(data).digest()
