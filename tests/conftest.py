"""Test configuration and fixtures."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from rowversion.converter import RowVersionConverter

# (base64, ulong, hexadecimal) triples for the same row version
KNOWN_ROW_VERSIONS = [
    ("AAAAAAKVTXs=", "43339131", "0x0000000002954D7B"),
    ("AAAAAAAKN2g=", "669544", "0x00000000000A3768"),
    ("AAAAAAAEzRE=", "314641", "0x000000000004CD11"),
    ("AAAAACn1h7k=", "703956921", "0x0000000029F587B9"),
    ("AAAAAB1Mjn8=", "491556479", "0x000000001D4C8E7F"),
]

BLANK_INPUTS = ["", "   ", "\t\n", None]


@pytest.fixture
def converter():
    """Return a fresh converter."""
    return RowVersionConverter()


@pytest.fixture
def known_row_versions():
    """Return known (base64, ulong, hexadecimal) triples."""
    return KNOWN_ROW_VERSIONS


@pytest.fixture
def blank_inputs():
    """Return inputs that must produce an empty result."""
    return BLANK_INPUTS
