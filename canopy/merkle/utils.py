"""
Pre- and post-processing helpers for Merkle leaves and proofs.

Neither helper is applied implicitly by tree construction.
"""

from typing import List, Sequence

from canopy.exceptions import InvariantError


def dedup_leaves(leaves: Sequence[bytes]) -> List[bytes]:
    """
    Drop leaves equal to the leaf immediately before them.

    Only consecutive duplicates are removed, so sort the leaves first for
    global deduplication.

    Example:
        >>> dedup_leaves([b"a", b"a", b"b", b"a"])
        [b'a', b'b', b'a']
    """
    return [
        leaf for idx, leaf in enumerate(leaves)
        if idx == 0 or leaves[idx - 1] != leaf
    ]


def to_hex_list(buffers: Sequence[bytes]) -> List[str]:
    """
    Encode buffers as 0x-prefixed lowercase hex strings.

    Raises:
        InvariantError: If any element is not a byte buffer
    """
    if any(not isinstance(buf, (bytes, bytearray)) for buf in buffers):
        raise InvariantError("Array is not an array of buffers")

    return ["0x" + bytes(buf).hex() for buf in buffers]


def from_hex(value: str) -> bytes:
    """
    Decode a hex string, with or without a 0x prefix.

    Raises:
        ValueError: If the string is not valid hex
    """
    value = value.strip()
    if value[:2].lower() == "0x":
        value = value[2:]
    return bytes.fromhex(value)
