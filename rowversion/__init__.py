"""
rowversion - Converter for SQL Server rowversion values.

A rowversion is an 8-byte, big-endian value. This library converts it
between four representations:
- Base64 ("AAAAAAKVTXs=")
- Unsigned 64-bit decimal ("43339131")
- Hexadecimal ("0x0000000002954D7B")
- Byte list ("0, 0, 0, 0, 2, 149, 77, 123")

Example usage:
    from rowversion import convert_from_hexadecimal

    result = convert_from_hexadecimal("0x0000000002954D7B")
    if result.is_success:
        print(result.ulong)          # 43339131
    else:
        print(result.error_message)
"""

__version__ = "1.0.0"
__author__ = "rowversion Contributors"

from rowversion.models.result import (
    ConversionResult,
    EmptyConversion,
    FailedConversion,
    InputType,
    SuccessfulConversion,
)
from rowversion.models.row_version import RowVersion
from rowversion.converter import (
    RowVersionConverter,
    convert,
    convert_from_base64,
    convert_from_hexadecimal,
    convert_from_ulong,
)
from rowversion.form import RowVersionForm

__all__ = [
    "ConversionResult",
    "EmptyConversion",
    "FailedConversion",
    "InputType",
    "SuccessfulConversion",
    "RowVersion",
    "RowVersionConverter",
    "RowVersionForm",
    "convert",
    "convert_from_base64",
    "convert_from_hexadecimal",
    "convert_from_ulong",
]
