"""
CLI display modules.
"""

from cli.display.tables import display_conversion, display_error, display_plain

__all__ = [
    "display_conversion",
    "display_error",
    "display_plain",
]
