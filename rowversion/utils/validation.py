"""
Input validation for row version text formats.

Each parser accepts the text of one editable field and returns the 8 row
version bytes in storage order, or raises the validation error for that
field.
"""

import base64
import binascii
import re
from typing import Optional

from rowversion.config import (
    HEX_DIGIT_COUNT,
    HEX_PREFIX,
    HEX_SEPARATORS,
    ROWVERSION_BYTE_COUNT,
    UINT64_MAX,
    ErrorMessages,
)
from rowversion.models.result import InputType
from rowversion.utils.byte_order import uint64_to_bytes

_DECIMAL_DIGITS = re.compile(r"[0-9]+")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
UINT64_MAX_DIGITS = len(str(UINT64_MAX))


class ValidationError(Exception):
    """Raised when row version text cannot be parsed."""

    input_type: Optional[InputType] = None
    default_message = "Invalid row version"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class InvalidBase64Error(ValidationError):
    input_type = InputType.BASE64
    default_message = ErrorMessages.INVALID_BASE64


class InvalidULongError(ValidationError):
    input_type = InputType.ULONG
    default_message = ErrorMessages.INVALID_ULONG


class InvalidHexadecimalError(ValidationError):
    input_type = InputType.HEXADECIMAL
    default_message = ErrorMessages.INVALID_HEXADECIMAL


def is_blank(text: Optional[str]) -> bool:
    """Return True for None, empty or whitespace-only text."""
    return text is None or not text.strip()


def parse_base64(text: str) -> bytes:
    """
    Decode standard, padded Base64 holding exactly 8 bytes.

    Args:
        text: Base64 text, e.g. "AAAAAAKVTXs="

    Returns:
        The 8 decoded bytes (already in storage order)

    Raises:
        InvalidBase64Error: On characters outside the Base64 alphabet,
            bad padding, or a decoded length other than 8
    """
    try:
        data = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError):
        raise InvalidBase64Error() from None

    if len(data) != ROWVERSION_BYTE_COUNT:
        raise InvalidBase64Error()

    return data


def parse_ulong_value(text: str) -> int:
    """
    Parse an unsigned 64-bit decimal integer.

    Only ASCII digits are accepted; signs, separators and values above
    2**64 - 1 are rejected. Surrounding whitespace and leading zeros are
    ignored.

    Args:
        text: Decimal text, e.g. "43339131"

    Returns:
        The parsed value

    Raises:
        InvalidULongError: If text is not a valid unsigned 64-bit integer
    """
    digits = text.strip()

    if not _DECIMAL_DIGITS.fullmatch(digits):
        raise InvalidULongError()

    # int() refuses very long digit strings, so bound the length first
    digits = digits.lstrip("0") or "0"
    if len(digits) > UINT64_MAX_DIGITS:
        raise InvalidULongError()

    value = int(digits)
    if value > UINT64_MAX:
        raise InvalidULongError()

    return value


def parse_ulong(text: str) -> bytes:
    """
    Parse an unsigned 64-bit decimal integer into 8 big-endian bytes.

    Raises:
        InvalidULongError: If text is not a valid unsigned 64-bit integer
    """
    return uint64_to_bytes(parse_ulong_value(text))


def normalize_hex_digits(text: str) -> str:
    """
    Reduce hex text to its 16 digits.

    Trims the text, strips one leading "0x"/"0X", then drops space and
    hyphen separators. Any other non-hex character is rejected.

    Args:
        text: Hex text, e.g. "0x00-00-00-00-02-95-4D-7B"

    Returns:
        The 16 hex digits, case preserved

    Raises:
        InvalidHexadecimalError: On a foreign character or a digit count
            other than 16
    """
    cleaned = text.strip()

    if cleaned[: len(HEX_PREFIX)].lower() == HEX_PREFIX:
        cleaned = cleaned[len(HEX_PREFIX) :]

    digits = []
    for char in cleaned:
        if char in HEX_SEPARATORS:
            continue
        if char not in _HEX_DIGITS:
            raise InvalidHexadecimalError()
        if len(digits) >= HEX_DIGIT_COUNT:
            raise InvalidHexadecimalError()
        digits.append(char)

    if len(digits) != HEX_DIGIT_COUNT or len(digits) % 2 != 0:
        raise InvalidHexadecimalError()

    return "".join(digits)


def parse_hexadecimal(text: str) -> bytes:
    """
    Parse hex text into 8 bytes, two digits per byte, left to right.

    Raises:
        InvalidHexadecimalError: If the text is not 16 hex digits after
            normalization
    """
    return bytes.fromhex(normalize_hex_digits(text))
