"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Canopy, a product of Garudex Labs

Standalone Merkle proof verification.

Verification needs only the proof, the leaf and the expected root; it does
not depend on a constructed MerkleTree.
"""

import time
from typing import Iterable, Optional

from canopy.exceptions import InvariantError
from canopy.logging_config import get_logger, log_merkle_verification
from canopy.merkle.hasher import Hasher, default_hasher

logger = get_logger(__name__)


def verify(
    proof: Iterable[bytes],
    leaf: bytes,
    root: bytes,
    hasher: Optional[Hasher] = None,
) -> bool:
    """
    Verify a Merkle inclusion proof.

    Recomputes the root by folding each proof entry into the running hash
    with the pairwise combination rule, smaller buffer first, then compares
    the result with the expected root. Sentinel entries go through the same
    two-argument call.

    Args:
        proof: Ordered sibling buffers, bottom to top (any iterable)
        leaf: Leaf buffer being proven
        root: Expected Merkle root
        hasher: Hasher to use (default: SHA3-256)

    Returns:
        True if the recomputed root equals root, False otherwise

    Raises:
        InvariantError: If the leaf, the root or a proof entry is not a byte buffer
    """
    hasher = hasher or default_hasher
    proof = list(proof)

    for name, value in (("leaf", leaf), ("root", root)):
        if not isinstance(value, (bytes, bytearray)):
            raise InvariantError(f"{name} must be a byte buffer, got {type(value).__name__}")

    start = time.perf_counter()
    computed = bytes(leaf)

    for element in proof:
        if not isinstance(element, (bytes, bytearray)):
            raise InvariantError(
                f"Proof element must be a byte buffer, got {type(element).__name__}"
            )
        element = bytes(element)

        if computed <= element:
            computed = hasher.combined_hash(computed, element)
        else:
            computed = hasher.combined_hash(element, computed)

    result = computed == bytes(root)

    log_merkle_verification(
        logger,
        success=result,
        proof_length=len(proof),
        duration_ms=(time.perf_counter() - start) * 1000,
        failure_reason=None if result else "root mismatch",
    )

    return result
