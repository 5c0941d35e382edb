"""
Merkle tree implementation for dataset commitments.

This module provides Merkle tree construction, inclusion proof generation,
and standalone proof verification.
"""

from canopy.merkle.hasher import (
    DEFAULT_ALGORITHM,
    SENTINEL,
    SUPPORTED_ALGORITHMS,
    Hasher,
    combined_hash,
)
from canopy.merkle.tree import MerkleTree, build_layers, next_layer
from canopy.merkle.utils import dedup_leaves, from_hex, to_hex_list
from canopy.merkle.verifier import verify

__all__ = [
    "DEFAULT_ALGORITHM",
    "SENTINEL",
    "SUPPORTED_ALGORITHMS",
    "Hasher",
    "combined_hash",
    "MerkleTree",
    "build_layers",
    "next_layer",
    "dedup_leaves",
    "from_hex",
    "to_hex_list",
    "verify",
]
