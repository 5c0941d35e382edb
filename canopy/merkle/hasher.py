"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Canopy, a product of Garudex Labs

Pairwise hashing rule for Canopy Merkle trees.

Two nodes are combined by sorting them byte-lexicographically, concatenating
and digesting the result, so the parent does not depend on argument order.
A node without a partner (the other side is None or the zero-length
sentinel) is digested alone, with no domain-separation prefix.
"""

import hashlib
from typing import Optional

from canopy.exceptions import InvariantError, UnsupportedDigestError

# Zero-length buffer used to pad odd layers and to mark "no sibling" in proofs
SENTINEL = b""

DEFAULT_ALGORITHM = "sha3_256"

SUPPORTED_ALGORITHMS = ("sha3_256", "sha256", "blake2s")

DIGEST_SIZE = 32


class Hasher:
    """
    Digest primitive plus the pairwise combination rule.

    Example:
        >>> hasher = Hasher()
        >>> hasher.combined_hash(b"\\x01", b"\\x02") == hasher.combined_hash(b"\\x02", b"\\x01")
        True
    """

    def __init__(self, algorithm: str = DEFAULT_ALGORITHM):
        """
        Args:
            algorithm: hashlib algorithm name, one of SUPPORTED_ALGORITHMS

        Raises:
            UnsupportedDigestError: If the algorithm is not supported
        """
        if algorithm not in SUPPORTED_ALGORITHMS:
            raise UnsupportedDigestError(
                f"Unsupported digest algorithm '{algorithm}', "
                f"expected one of {list(SUPPORTED_ALGORITHMS)}"
            )
        self.algorithm = algorithm

    def __repr__(self) -> str:
        return f"Hasher(algorithm={self.algorithm!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Hasher) and other.algorithm == self.algorithm

    def __hash__(self) -> int:
        return hash(self.algorithm)

    def digest(self, data: bytes) -> bytes:
        """Digest data with the configured algorithm (32 bytes)."""
        return hashlib.new(self.algorithm, data).digest()

    def combined_hash(self, first: Optional[bytes], second: Optional[bytes]) -> bytes:
        """
        Combine two nodes into their parent.

        Args:
            first: First node, or None/SENTINEL when absent
            second: Second node, or None/SENTINEL when absent

        Returns:
            Digest of the sorted concatenation, or of the single present node

        Raises:
            InvariantError: If both sides are None
        """
        if first is None and second is None:
            raise InvariantError("at least one element of a pair must exist")
        if not first:
            return self.digest(second if second is not None else first)
        if not second:
            return self.digest(first)

        return self.digest(b"".join(sorted((first, second))))


default_hasher = Hasher()


def combined_hash(first: Optional[bytes], second: Optional[bytes]) -> bytes:
    """Combine two nodes with the default SHA3-256 hasher."""
    return default_hasher.combined_hash(first, second)
