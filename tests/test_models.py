"""Tests for row version models."""

import dataclasses

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from rowversion.models.result import (
    EmptyConversion,
    FailedConversion,
    InputType,
    SuccessfulConversion,
    create_empty,
    create_failed,
    create_successful,
)
from rowversion.models.row_version import RowVersion


class TestRowVersion:
    """Test cases for the RowVersion value type."""

    def test_renderings(self):
        """Test all four renderings of a known value."""
        rv = RowVersion(bytes([0x00, 0x00, 0x00, 0x00, 0x02, 0x95, 0x4D, 0x7B]))

        assert rv.to_base64() == "AAAAAAKVTXs="
        assert rv.to_uint64() == 43339131
        assert rv.to_hex() == "0x0000000002954D7B"
        assert rv.to_byte_list() == "0, 0, 0, 0, 2, 149, 77, 123"
        assert str(rv) == "0x0000000002954D7B"

    def test_from_uint64(self):
        """Test construction from an integer."""
        assert RowVersion.from_uint64(0).data == bytes(8)
        assert RowVersion.from_uint64(2**64 - 1).to_hex() == "0xFFFFFFFFFFFFFFFF"

        with pytest.raises(ValueError):
            RowVersion.from_uint64(2**64)

    def test_from_bytes(self):
        """Test construction from a list or bytearray."""
        assert RowVersion.from_bytes([1, 2, 3, 4, 5, 6, 7, 8]).to_byte_list() == "1, 2, 3, 4, 5, 6, 7, 8"
        assert RowVersion(bytearray(8)).data == bytes(8)

    def test_length_enforced(self):
        """Test that only 8-byte values can be constructed."""
        for length in (0, 7, 9, 16):
            with pytest.raises(ValueError, match="must be 8 bytes"):
                RowVersion(bytes(length))

    def test_immutable(self):
        """Test that the value cannot be changed."""
        rv = RowVersion(bytes(8))

        with pytest.raises(dataclasses.FrozenInstanceError):
            rv.data = bytes([1] * 8)


class TestConversionResult:
    """Test cases for the result variants."""

    def test_successful(self):
        """Test the successful variant."""
        result = create_successful("AAAAAAKVTXs=", "43339131", "0x0000000002954D7B", "0, 0, 0, 0, 2, 149, 77, 123")

        assert isinstance(result, SuccessfulConversion)
        assert result.is_success
        assert result.error_message is None
        assert result.as_dict() == {
            "base64": "AAAAAAKVTXs=",
            "ulong": "43339131",
            "hexadecimal": "0x0000000002954D7B",
            "byte_array": "0, 0, 0, 0, 2, 149, 77, 123",
        }

    def test_empty(self):
        """Test the empty variant."""
        result = create_empty()

        assert isinstance(result, EmptyConversion)
        assert result.is_success
        assert result.error_message is None
        assert set(result.as_dict().values()) == {""}

    def test_failed_echoes_source_field(self):
        """Test that only the source field keeps the input."""
        for input_type in InputType:
            result = create_failed(input_type, "bad input", "Oops")

            assert isinstance(result, FailedConversion)
            assert not result.is_success
            assert result.error_message == "Oops"
            assert result.byte_array == ""
            assert result.as_dict()[input_type.value] == "bad input"
            others = [v for k, v in result.as_dict().items() if k != input_type.value]
            assert others == ["", "", ""]

    def test_failed_rejects_unknown_input_type(self):
        """Test that the source must be an InputType."""
        with pytest.raises(ValueError, match="Invalid InputType"):
            create_failed("ByteArray", "x", "Oops")

    def test_results_immutable(self):
        """Test that results cannot be modified."""
        result = create_successful("a", "b", "c", "d")

        with pytest.raises(dataclasses.FrozenInstanceError):
            result.ulong = "e"
