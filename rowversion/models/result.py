"""
Conversion result types.

A conversion ends in exactly one of three states, each its own frozen
dataclass:

- SuccessfulConversion: all four representations are filled in
- EmptyConversion: the input was blank, every representation is empty
- FailedConversion: the input was rejected; only the source field keeps
  the text the user typed

All three expose the same read-only fields (base64, ulong, hexadecimal,
byte_array, is_success, error_message), so display code can treat a
ConversionResult uniformly.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union


class InputType(Enum):
    """Editable fields a conversion can start from."""

    BASE64 = "base64"
    ULONG = "ulong"
    HEXADECIMAL = "hexadecimal"


RESULT_FIELDS = ("base64", "ulong", "hexadecimal", "byte_array")


class _ResultFields:
    """Shared read-only surface of every result variant."""

    def as_dict(self) -> Dict[str, str]:
        """Return the four representations keyed by field name."""
        return {name: getattr(self, name) for name in RESULT_FIELDS}


@dataclass(frozen=True)
class SuccessfulConversion(_ResultFields):
    """All four mutually consistent representations of one row version."""

    base64: str
    ulong: str
    hexadecimal: str
    byte_array: str

    @property
    def is_success(self) -> bool:
        return True

    @property
    def error_message(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class EmptyConversion(_ResultFields):
    """Result for blank input: nothing to show, nothing wrong."""

    @property
    def base64(self) -> str:
        return ""

    @property
    def ulong(self) -> str:
        return ""

    @property
    def hexadecimal(self) -> str:
        return ""

    @property
    def byte_array(self) -> str:
        return ""

    @property
    def is_success(self) -> bool:
        return True

    @property
    def error_message(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class FailedConversion(_ResultFields):
    """
    Rejected input.

    The field named by input_type echoes original_input verbatim; the other
    editable fields and the byte list are empty.
    """

    input_type: InputType
    original_input: str
    error_message: str

    def __post_init__(self):
        if not isinstance(self.input_type, InputType):
            raise ValueError(f"Invalid InputType was provided: {self.input_type!r}")

    def _echo(self, input_type: InputType) -> str:
        return self.original_input if self.input_type is input_type else ""

    @property
    def base64(self) -> str:
        return self._echo(InputType.BASE64)

    @property
    def ulong(self) -> str:
        return self._echo(InputType.ULONG)

    @property
    def hexadecimal(self) -> str:
        return self._echo(InputType.HEXADECIMAL)

    @property
    def byte_array(self) -> str:
        return ""

    @property
    def is_success(self) -> bool:
        return False


ConversionResult = Union[SuccessfulConversion, EmptyConversion, FailedConversion]


def create_empty() -> EmptyConversion:
    """Create the result returned for blank input."""
    return EmptyConversion()


def create_successful(
    base64: str, ulong: str, hexadecimal: str, byte_array: str
) -> SuccessfulConversion:
    """Create a successful result from the four rendered representations."""
    return SuccessfulConversion(
        base64=base64,
        ulong=ulong,
        hexadecimal=hexadecimal,
        byte_array=byte_array,
    )


def create_failed(
    input_type: InputType, original_input: str, error_message: str
) -> FailedConversion:
    """
    Create a failed result.

    Args:
        input_type: Field the rejected input came from
        original_input: Text exactly as the user entered it
        error_message: Message describing the failure

    Raises:
        ValueError: If input_type is not an InputType
    """
    return FailedConversion(
        input_type=input_type,
        original_input=original_input,
        error_message=error_message,
    )
