"""
merkle CLI - build Merkle trees over item files, emit and verify inclusion
proofs, cross-check tree variants and benchmark them.
"""
