"""
CLI command modules.
"""

from merkle_cli.commands import bench, compare, prove, tree, verify

__all__ = ["bench", "compare", "prove", "tree", "verify"]
