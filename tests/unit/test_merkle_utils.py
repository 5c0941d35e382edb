"""
Unit tests for leaf and proof helpers.
"""

import pytest

from canopy.exceptions import InvariantError
from canopy.merkle import MerkleTree, dedup_leaves, from_hex, to_hex_list


class TestDedupLeaves:
    """Test dedup_leaves."""

    def test_removes_consecutive_duplicates(self):
        """Test that adjacent repeats collapse to one."""
        assert dedup_leaves([b"a", b"a", b"b", b"b", b"b", b"c"]) == [b"a", b"b", b"c"]

    def test_keeps_non_adjacent_duplicates(self):
        """Test that only consecutive duplicates are removed."""
        assert dedup_leaves([b"a", b"b", b"a"]) == [b"a", b"b", b"a"]

    def test_sorted_input_is_fully_deduplicated(self):
        """Test global deduplication after sorting."""
        leaves = [b"c", b"a", b"c", b"b", b"a"]

        assert dedup_leaves(sorted(leaves)) == [b"a", b"b", b"c"]

    def test_empty_input(self):
        """Test that an empty sequence stays empty."""
        assert dedup_leaves([]) == []

    def test_construction_does_not_deduplicate(self):
        """Test that MerkleTree keeps duplicates unless the caller dedups."""
        leaves = [b"a", b"a", b"b", b"c"]

        assert MerkleTree(leaves).get_elements() == leaves
        assert MerkleTree(leaves).get_root() != MerkleTree(dedup_leaves(leaves)).get_root()


class TestHexHelpers:
    """Test to_hex_list and from_hex."""

    def test_to_hex_list(self):
        """Test 0x-prefixed lowercase encoding."""
        assert to_hex_list([b"\xab\xcd", b"", bytearray(b"\x01")]) == ["0xabcd", "0x", "0x01"]

    def test_to_hex_list_rejects_non_buffers(self):
        """Test that non-buffer elements raise InvariantError."""
        with pytest.raises(InvariantError, match="not an array of buffers"):
            to_hex_list([b"\x01", "0x02"])

    @pytest.mark.parametrize("value", ["0xABcd", "abcd", "  0xabcd\n", "0Xabcd"])
    def test_from_hex(self, value):
        """Test decoding with and without prefix."""
        assert from_hex(value) == b"\xab\xcd"

    def test_from_hex_sentinel(self):
        """Test that a bare prefix decodes to the empty buffer."""
        assert from_hex("0x") == b""

    def test_from_hex_invalid(self):
        """Test that invalid hex raises ValueError."""
        with pytest.raises(ValueError):
            from_hex("0xzz")
