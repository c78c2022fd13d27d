"""
merkle-engine: Merkle tree commitments over ordered batches of opaque items.

Two structurally different tree representations share one interface:
- LayeredMerkleTree: ordered list of digest layers
- LinkedMerkleTree: explicit binary tree of digest nodes
"""

__version__ = "0.1.0"
