"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Canopy, a product of Garudex Labs

Merkle tree construction and inclusion proofs.

This module implements a binary Merkle tree over an ordered sequence of
byte buffers. It supports:
- Layer construction with sentinel padding of odd-length layers
- A position index from leaf hex to leaf index for O(1) proof lookup
- Inclusion proof generation by indexing the precomputed layer stack
- Proof verification against the tree's own root
"""

import time
from typing import Dict, List, Optional, Sequence

from canopy.exceptions import EmptyTreeError, InvariantError, LeafNotFoundError
from canopy.logging_config import get_logger, log_merkle_root_computation
from canopy.merkle.hasher import SENTINEL, Hasher, default_hasher
from canopy.merkle.utils import to_hex_list
from canopy.merkle.verifier import verify as verify_proof

logger = get_logger(__name__)


def _as_leaf(leaf) -> bytes:
    if not isinstance(leaf, (bytes, bytearray)):
        raise InvariantError(f"Leaf must be a byte buffer, got {type(leaf).__name__}")
    return bytes(leaf)


def next_layer(layer: List[bytes], hasher: Hasher = default_hasher) -> List[bytes]:
    """
    Reduce a layer to its parent layer.

    An odd-length layer is paired as if padded with SENTINEL. The input
    list is not modified.

    Args:
        layer: Current layer
        hasher: Hasher providing the pairwise combination rule

    Returns:
        Parent layer, half the length of the padded input
    """
    if len(layer) % 2 == 1:
        layer = list(layer) + [SENTINEL]

    return [
        hasher.combined_hash(layer[i], layer[i + 1])
        for i in range(0, len(layer), 2)
    ]


def build_layers(leaves: Sequence[bytes], hasher: Hasher = default_hasher) -> List[List[bytes]]:
    """
    Build the layer stack from leaves up to the root.

    layers[0] is the leaf layer, padded with SENTINEL when the leaf count is
    odd; layers[-1] holds only the root. A single leaf is its own root and
    is left unpadded.

    Args:
        leaves: Ordered leaf buffers
        hasher: Hasher providing the pairwise combination rule

    Returns:
        List of layers, bottom to top

    Raises:
        EmptyTreeError: If leaves is empty
        InvariantError: If a leaf is not a byte buffer
    """
    if len(leaves) == 0:
        raise EmptyTreeError("Cannot create Merkle tree from empty leaves list")

    layers = [[_as_leaf(leaf) for leaf in leaves]]
    while len(layers[-1]) > 1:
        # Stored non-root layers keep their padding so proofs can index it
        if len(layers[-1]) % 2 == 1:
            layers[-1].append(SENTINEL)
        layers.append(next_layer(layers[-1], hasher))

    return layers


class MerkleTree:
    """
    Immutable binary Merkle tree with sorted-pair hashing.

    Leaves are used as given (they are not hashed first). Siblings are
    combined in sorted order, so proofs carry no left/right directions.

    Example:
        >>> leaves = [b"\\x01", b"\\x02", b"\\x03"]
        >>> tree = MerkleTree(leaves)
        >>> proof = tree.get_proof(b"\\x02")
        >>> tree.verify(proof, b"\\x02")
        True
    """

    def __init__(self, leaves: Sequence[bytes], hasher: Optional[Hasher] = None):
        """
        Build Merkle tree from leaf data.

        Args:
            leaves: Ordered leaf buffers
            hasher: Hasher to use (default: SHA3-256)

        Raises:
            EmptyTreeError: If leaves list is empty
            InvariantError: If a leaf is not a byte buffer
        """
        self.hasher = hasher or default_hasher
        self.leaf_count = len(leaves)

        start = time.perf_counter()
        self._layers = build_layers(leaves, self.hasher)
        duration_ms = (time.perf_counter() - start) * 1000

        # Later duplicates overwrite earlier ones
        self._position_index: Dict[str, int] = {
            element.hex(): index for index, element in enumerate(self._layers[0])
        }

        log_merkle_root_computation(
            logger,
            leaf_count=self.leaf_count,
            layer_count=len(self._layers),
            merkle_root=self.get_hex_root(),
            duration_ms=duration_ms,
            algorithm=self.hasher.algorithm,
        )

    @property
    def root(self) -> bytes:
        return self.get_root()

    def get_root(self) -> bytes:
        """Get the Merkle root."""
        return self._layers[-1][0]

    def get_hex_root(self) -> str:
        """Get the Merkle root as lowercase hex, without a 0x prefix."""
        return self.get_root().hex()

    def get_elements(self) -> List[bytes]:
        """Get a copy of the padded leaf layer."""
        return list(self._layers[0])

    def get_layers(self) -> List[List[bytes]]:
        """Get a copy of the layer stack, leaf layer first."""
        return [list(layer) for layer in self._layers]

    def get_position(self, leaf: bytes) -> Optional[int]:
        """Get the index of a leaf in the padded leaf layer, or None if absent."""
        return self._position_index.get(_as_leaf(leaf).hex())

    def get_proof(self, leaf: bytes) -> List[bytes]:
        """
        Generate an inclusion proof for a leaf.

        The proof holds one entry per non-root layer, bottom to top. Each
        entry is the sibling of the current node, or SENTINEL when the node
        has no sibling.

        Args:
            leaf: Leaf buffer to prove

        Returns:
            Ordered list of sibling buffers

        Raises:
            LeafNotFoundError: If the leaf is not in the tree
        """
        index = self.get_position(leaf)
        if index is None:
            raise LeafNotFoundError("Element does not exist in Merkle tree")

        proof = []
        for layer in self._layers[:-1]:
            sibling_index = index + 1 if index % 2 == 0 else index - 1

            if sibling_index < len(layer):
                proof.append(layer[sibling_index])
            else:
                proof.append(SENTINEL)

            index //= 2

        return proof

    def get_hex_proof(self, leaf: bytes) -> List[str]:
        """Generate an inclusion proof as 0x-prefixed lowercase hex strings."""
        return to_hex_list(self.get_proof(leaf))

    def verify(self, proof: Sequence[bytes], leaf: bytes) -> bool:
        """Verify a proof against this tree's root."""
        return verify_proof(proof, leaf, self.get_root(), hasher=self.hasher)

    def __len__(self) -> int:
        return self.leaf_count

    def __repr__(self) -> str:
        return f"MerkleTree(leaves={self.leaf_count}, root={self.get_hex_root()})"
