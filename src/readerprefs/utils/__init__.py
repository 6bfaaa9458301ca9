"""Common utility functions and helpers for the readerprefs package."""

from readerprefs.utils.formatting import format_decimal, format_percentage

__all__ = [
    "format_decimal",
    "format_percentage",
]
