"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Canopy, a product of Garudex Labs

Canopy - Merkle commitments over ordered byte buffers

Canopy builds a binary Merkle tree over an ordered set of leaves, produces
a root commitment and per-leaf inclusion proofs, and verifies proofs
without access to the original dataset.
"""

from canopy._version import __version__
from canopy.merkle import MerkleTree, verify

__all__ = ["__version__", "MerkleTree", "verify"]
