"""Utility functions for row version conversion."""

from rowversion.utils.byte_order import bytes_to_uint64, swap_byte_order, uint64_to_bytes
from rowversion.utils.validation import (
    ValidationError,
    InvalidBase64Error,
    InvalidULongError,
    InvalidHexadecimalError,
    parse_base64,
    parse_ulong,
    parse_ulong_value,
    parse_hexadecimal,
)

__all__ = [
    "bytes_to_uint64",
    "swap_byte_order",
    "uint64_to_bytes",
    "ValidationError",
    "InvalidBase64Error",
    "InvalidULongError",
    "InvalidHexadecimalError",
    "parse_base64",
    "parse_ulong",
    "parse_ulong_value",
    "parse_hexadecimal",
]
