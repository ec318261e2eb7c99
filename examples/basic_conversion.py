#!/usr/bin/env python3
"""
Example: Basic row version conversion

Shows how to convert a rowversion between formats and handle bad input.
"""

import sys

sys.path.insert(0, "..")

from rowversion import RowVersionForm, InputType, convert_from_base64, convert_from_hexadecimal


def main():
    # Convert a Base64 rowversion as returned by most SQL Server drivers
    result = convert_from_base64("AAAAAAKVTXs=")

    print(f"Base64:      {result.base64}")
    print(f"ULong:       {result.ulong}")
    print(f"Hexadecimal: {result.hexadecimal}")
    print(f"Bytes:       {result.byte_array}")
    print()

    # Rejected input keeps the original text in its own field
    bad = convert_from_hexadecimal("0x1234")
    print(f"Input '{bad.hexadecimal}': {bad.error_message}")
    print()

    # Form state as a converter UI would hold it
    form = RowVersionForm(listener=lambda name, text: print(f"  {name} <- {text!r}"))
    print("Typing 43339131 into the ULong field:")
    form.text_changed(InputType.ULONG, "43339131")


if __name__ == "__main__":
    main()
