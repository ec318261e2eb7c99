"""
Explicit byte-order helpers for 64-bit row versions.

SQL Server stores a rowversion as 8 bytes, most significant byte first.
These helpers take the byte order as an argument instead of consulting the
host, so the same input gives the same bytes on every platform.

Example:
    >>> uint64_to_bytes(43339131)
    b'\\x00\\x00\\x00\\x00\\x02\\x95M{'
    >>> bytes_to_uint64(b'\\x00\\x00\\x00\\x00\\x02\\x95M{')
    43339131
"""

import struct
from typing import List, Union

from rowversion.config import ROWVERSION_BYTE_COUNT, UINT64_MAX

BIG_ENDIAN = "big"
LITTLE_ENDIAN = "little"

_STRUCT_FORMATS = {
    BIG_ENDIAN: ">Q",
    LITTLE_ENDIAN: "<Q",
}


def _struct_format(byteorder: str) -> str:
    try:
        return _STRUCT_FORMATS[byteorder]
    except KeyError:
        raise ValueError(f"byteorder must be 'big' or 'little', got {byteorder!r}") from None


def uint64_to_bytes(value: int, byteorder: str = BIG_ENDIAN) -> bytes:
    """
    Encode an unsigned 64-bit integer as 8 bytes.

    Args:
        value: Integer in range 0 to 2**64 - 1
        byteorder: "big" (storage order) or "little"

    Returns:
        8 encoded bytes

    Raises:
        ValueError: If value is out of range or byteorder is unknown
    """
    fmt = _struct_format(byteorder)

    if not 0 <= value <= UINT64_MAX:
        raise ValueError(f"Value must be 0-{UINT64_MAX}, got {value}")

    return struct.pack(fmt, value)


def bytes_to_uint64(data: Union[bytes, List[int]], byteorder: str = BIG_ENDIAN) -> int:
    """
    Decode 8 bytes into an unsigned 64-bit integer.

    Args:
        data: Exactly 8 bytes
        byteorder: "big" (storage order) or "little"

    Returns:
        Decoded integer

    Raises:
        ValueError: If data is not 8 bytes long or byteorder is unknown
    """
    fmt = _struct_format(byteorder)

    if isinstance(data, list):
        data = bytes(data)

    if len(data) != ROWVERSION_BYTE_COUNT:
        raise ValueError(f"Expected {ROWVERSION_BYTE_COUNT} bytes, got {len(data)}")

    return struct.unpack(fmt, data)[0]


def swap_byte_order(data: Union[bytes, List[int]]) -> bytes:
    """Reverse the byte order of an 8-byte value (big <-> little endian)."""
    if isinstance(data, list):
        data = bytes(data)

    if len(data) != ROWVERSION_BYTE_COUNT:
        raise ValueError(f"Expected {ROWVERSION_BYTE_COUNT} bytes, got {len(data)}")

    return data[::-1]
