"""
Test fixtures package for merkle-engine tests.

This package provides factory functions for creating test inputs and
independently computed expected values.

Usage:
    from fixtures import make_items, reference_layers

    def test_something():
        items = make_items(5)
        layers = reference_layers(items)
"""

from .common import (
    h,
    make_items,
    reference_layers,
    sorted_parent,
)

__all__ = [
    "h",
    "make_items",
    "reference_layers",
    "sorted_parent",
]
