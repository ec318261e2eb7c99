"""
Row version value type.

A SQL Server rowversion is always 8 bytes. RowVersion keeps them in storage
order (most significant byte first) and renders the textual forms shown to
the user.
"""

import base64
from dataclasses import dataclass
from typing import List, Union

from rowversion.config import BYTE_LIST_SEPARATOR, HEX_PREFIX, ROWVERSION_BYTE_COUNT
from rowversion.utils.byte_order import bytes_to_uint64, uint64_to_bytes


@dataclass(frozen=True)
class RowVersion:
    """
    An 8-byte row version in storage order.

    Example:
        rv = RowVersion.from_uint64(43339131)
        rv.to_hex()      # "0x0000000002954D7B"
        rv.to_base64()   # "AAAAAAKVTXs="
    """

    data: bytes

    def __post_init__(self):
        if isinstance(self.data, (bytearray, list)):
            object.__setattr__(self, "data", bytes(self.data))

        if len(self.data) != ROWVERSION_BYTE_COUNT:
            raise ValueError(
                f"Row version must be {ROWVERSION_BYTE_COUNT} bytes, got {len(self.data)}"
            )

    @classmethod
    def from_uint64(cls, value: int) -> "RowVersion":
        """Build a row version from its unsigned 64-bit integer value."""
        return cls(uint64_to_bytes(value))

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray, List[int]]) -> "RowVersion":
        return cls(bytes(data))

    def to_uint64(self) -> int:
        return bytes_to_uint64(self.data)

    def to_base64(self) -> str:
        """Standard Base64 with '=' padding, e.g. "AAAAAAKVTXs="."""
        return base64.b64encode(self.data).decode("ascii")

    def to_hex(self) -> str:
        """Uppercase hex with 0x prefix, e.g. "0x0000000002954D7B"."""
        return HEX_PREFIX + "".join(f"{b:02X}" for b in self.data)

    def to_byte_list(self) -> str:
        """Decimal bytes separated by ", ", e.g. "0, 0, 0, 0, 2, 149, 77, 123"."""
        return BYTE_LIST_SEPARATOR.join(str(b) for b in self.data)

    def __str__(self) -> str:
        return self.to_hex()
