"""Data models for row version conversion."""

from rowversion.models.result import (
    ConversionResult,
    EmptyConversion,
    FailedConversion,
    InputType,
    SuccessfulConversion,
    create_empty,
    create_failed,
    create_successful,
)
from rowversion.models.row_version import RowVersion

__all__ = [
    "ConversionResult",
    "EmptyConversion",
    "FailedConversion",
    "InputType",
    "SuccessfulConversion",
    "create_empty",
    "create_failed",
    "create_successful",
    "RowVersion",
]
