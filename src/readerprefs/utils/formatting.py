"""Text and number formatting utilities."""

from __future__ import annotations

from readerprefs.constants import RANGE_MAX_FRACTION_DIGITS


def format_decimal(value: float, max_fraction_digits: int = RANGE_MAX_FRACTION_DIGITS) -> str:
    """Format a number with grouping and without trailing zeros.

    Args:
        value: Number to format
        max_fraction_digits: Maximum number of digits after the decimal point

    Returns:
        Formatted number (e.g. 1,200 or 1.25)
    """
    if isinstance(value, int):
        return f"{value:,}"
    s = f"{value:,.{max_fraction_digits}f}"
    # Remove trailing zeros and dot if needed (e.g. 1.50000 -> 1.5, 2.00000 -> 2)
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    if s == "-0":
        s = "0"
    return s


def format_percentage(value: float) -> str:
    """Format value as percentage.

    Args:
        value: Value to format (0-1)

    Returns:
        Formatted percentage string
    """
    return f"{round(value * 100)}%"
