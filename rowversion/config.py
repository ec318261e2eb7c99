"""
Configuration constants for row-version conversion.

Keeps the fixed sizes, formatting tokens and user-facing messages in one
place so the converter, the form model and the CLI agree on them.
"""

import logging
import os
from typing import Optional, Union

# Row version layout
ROWVERSION_BYTE_COUNT = 8
HEX_DIGIT_COUNT = ROWVERSION_BYTE_COUNT * 2
UINT64_MAX = 2**64 - 1

# Text formats
HEX_PREFIX = "0x"
HEX_SEPARATORS = frozenset(" -")
BYTE_LIST_SEPARATOR = ", "

# Logging
LOG_LEVEL = os.environ.get("ROWVERSION_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(message)s"


class ErrorMessages:
    """Messages reported for rejected input, one per editable field."""

    INVALID_BASE64 = "Invalid Base64 format"
    INVALID_ULONG = "Invalid ULong format"
    INVALID_HEXADECIMAL = "Invalid hexadecimal format"


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """
    Install a Rich log handler on the root logger.

    Only hosts (the CLI) call this; the library itself never adds handlers.

    Args:
        level: Logging level name or number. Defaults to LOG_LEVEL.
    """
    from rich.logging import RichHandler

    if level is None:
        level = LOG_LEVEL

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
