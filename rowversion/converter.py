"""
Row version converter.

Converts an 8-byte SQL Server rowversion between its four representations:

- Base64:       "AAAAAAKVTXs="
- ULong:        "43339131"
- Hexadecimal:  "0x0000000002954D7B"
- Byte array:   "0, 0, 0, 0, 2, 149, 77, 123"

The three editable formats each have an entry point. Bad input never
raises; it comes back as a FailedConversion that keeps the original text in
its own field.

Example:
    from rowversion.converter import convert_from_ulong

    result = convert_from_ulong("43339131")
    result.base64       # "AAAAAAKVTXs="
    result.hexadecimal  # "0x0000000002954D7B"
"""

import logging
from typing import Callable, Optional

from rowversion.models.result import (
    ConversionResult,
    InputType,
    create_empty,
    create_failed,
    create_successful,
)
from rowversion.models.row_version import RowVersion
from rowversion.utils.validation import (
    ValidationError,
    is_blank,
    parse_base64,
    parse_hexadecimal,
    parse_ulong_value,
)

logger = logging.getLogger(__name__)


class RowVersionConverter:
    """
    Handles row version conversion between Base64, ULong, hexadecimal and
    byte array formats.

    The converter holds no state; one instance can serve any number of
    callers.
    """

    def convert_from_base64(self, base64: Optional[str]) -> ConversionResult:
        """
        Convert Base64 text to all other formats.

        The Base64 field of a successful result is the input text as given.
        """
        return self._convert(
            InputType.BASE64,
            base64,
            lambda text: RowVersion.from_bytes(parse_base64(text)),
            lambda rv: create_successful(
                base64=base64,
                ulong=str(rv.to_uint64()),
                hexadecimal=rv.to_hex(),
                byte_array=rv.to_byte_list(),
            ),
        )

    def convert_from_ulong(self, ulong: Optional[str]) -> ConversionResult:
        """
        Convert unsigned 64-bit decimal text to all other formats.

        The ULong field of a successful result is the input text as given.
        """
        return self._convert(
            InputType.ULONG,
            ulong,
            lambda text: RowVersion.from_uint64(parse_ulong_value(text)),
            lambda rv: create_successful(
                base64=rv.to_base64(),
                ulong=ulong,
                hexadecimal=rv.to_hex(),
                byte_array=rv.to_byte_list(),
            ),
        )

    def convert_from_hexadecimal(self, hexadecimal: Optional[str]) -> ConversionResult:
        """
        Convert hexadecimal text to all other formats.

        Accepts an optional 0x prefix and space or hyphen separators. The
        Hexadecimal field of a successful result is the input text as given,
        not a canonical rendering.
        """
        return self._convert(
            InputType.HEXADECIMAL,
            hexadecimal,
            lambda text: RowVersion.from_bytes(parse_hexadecimal(text)),
            lambda rv: create_successful(
                base64=rv.to_base64(),
                ulong=str(rv.to_uint64()),
                hexadecimal=hexadecimal,
                byte_array=rv.to_byte_list(),
            ),
        )

    def convert(self, input_type: InputType, text: Optional[str]) -> ConversionResult:
        """Dispatch to the entry point for input_type."""
        handlers = {
            InputType.BASE64: self.convert_from_base64,
            InputType.ULONG: self.convert_from_ulong,
            InputType.HEXADECIMAL: self.convert_from_hexadecimal,
        }
        try:
            handler = handlers[input_type]
        except KeyError:
            raise ValueError(f"Invalid InputType was provided: {input_type!r}") from None
        return handler(text)

    def _convert(
        self,
        input_type: InputType,
        text: Optional[str],
        parse: Callable[[str], RowVersion],
        render: Callable[[RowVersion], ConversionResult],
    ) -> ConversionResult:
        if is_blank(text):
            return create_empty()

        try:
            row_version = parse(text)
        except ValidationError as e:
            logger.debug("Rejected %s input %r: %s", input_type.value, text, e)
            return create_failed(input_type, text, e.message)

        logger.debug("Converted %s input %r to %s", input_type.value, text, row_version)
        return render(row_version)


_converter = RowVersionConverter()

convert_from_base64 = _converter.convert_from_base64
convert_from_ulong = _converter.convert_from_ulong
convert_from_hexadecimal = _converter.convert_from_hexadecimal
convert = _converter.convert
