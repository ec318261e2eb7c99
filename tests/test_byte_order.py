"""Tests for explicit byte-order helpers."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from rowversion.utils.byte_order import bytes_to_uint64, swap_byte_order, uint64_to_bytes


class TestUInt64ToBytes:
    """Test cases for integer encoding."""

    def test_big_endian_default(self):
        """Test that the default order puts the most significant byte first."""
        encoded = uint64_to_bytes(43339131)

        assert encoded == bytes([0x00, 0x00, 0x00, 0x00, 0x02, 0x95, 0x4D, 0x7B])

    def test_little_endian(self):
        """Test explicit little-endian encoding."""
        encoded = uint64_to_bytes(1, byteorder="little")

        assert encoded == bytes([0x01, 0, 0, 0, 0, 0, 0, 0])

    def test_bounds(self):
        """Test zero and the largest unsigned 64-bit value."""
        assert uint64_to_bytes(0) == bytes(8)
        assert uint64_to_bytes(2**64 - 1) == bytes([0xFF] * 8)

    def test_out_of_range(self):
        """Test that values outside 0..2**64-1 are rejected."""
        with pytest.raises(ValueError, match="Value must be"):
            uint64_to_bytes(2**64)

        with pytest.raises(ValueError, match="Value must be"):
            uint64_to_bytes(-1)

    def test_unknown_byteorder(self):
        """Test that only 'big' and 'little' are accepted."""
        with pytest.raises(ValueError, match="byteorder"):
            uint64_to_bytes(1, byteorder="native")


class TestBytesToUInt64:
    """Test cases for integer decoding."""

    def test_big_endian_default(self):
        """Test decoding storage-order bytes."""
        assert bytes_to_uint64(bytes([0, 0, 0, 0, 0x02, 0x95, 0x4D, 0x7B])) == 43339131

    def test_byteorder_matters(self):
        """Test that the same bytes decode differently per byte order."""
        data = bytes([0x01, 0, 0, 0, 0, 0, 0, 0])

        assert bytes_to_uint64(data) == 2**56
        assert bytes_to_uint64(data, byteorder="little") == 1

    def test_list_input(self):
        """Test that a list of ints is accepted."""
        assert bytes_to_uint64([255] * 8) == 2**64 - 1

    def test_wrong_length(self):
        """Test that anything but 8 bytes is rejected."""
        with pytest.raises(ValueError, match="Expected 8 bytes"):
            bytes_to_uint64(bytes(7))

        with pytest.raises(ValueError, match="Expected 8 bytes"):
            bytes_to_uint64(bytes(9))

    def test_roundtrip(self):
        """Test encode followed by decode in both byte orders."""
        for value in [0, 1, 255, 256, 43339131, 2**63, 2**64 - 1]:
            for order in ("big", "little"):
                assert bytes_to_uint64(uint64_to_bytes(value, order), order) == value


class TestSwapByteOrder:
    """Test cases for byte order reversal."""

    def test_swap(self):
        """Test that big-endian bytes become little-endian bytes."""
        big = uint64_to_bytes(43339131, "big")

        assert swap_byte_order(big) == uint64_to_bytes(43339131, "little")
        assert swap_byte_order(big) == bytes([0x7B, 0x4D, 0x95, 0x02, 0, 0, 0, 0])

    def test_swap_twice(self):
        """Test that swapping twice restores the original."""
        data = bytes(range(8))

        assert swap_byte_order(swap_byte_order(data)) == data

    def test_wrong_length(self):
        """Test that anything but 8 bytes is rejected."""
        with pytest.raises(ValueError):
            swap_byte_order(b"\x01\x02")
