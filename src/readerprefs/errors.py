"""Exception classes for preferences handling.

Only parsing failures are surfaced as errors: invalid stored values are read
as absent and out-of-range values are clamped.
"""

from __future__ import annotations

from typing import Optional


class PreferencesError(Exception):
    """Base error for the preferences layer."""

    def __init__(
        self, message: str, original_error: Optional[Exception] = None
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            original_error: The original exception that was caught, if any
        """
        super().__init__(message)
        self.message: str = message
        self.original_error: Optional[Exception] = original_error


class PreferencesParseError(PreferencesError):
    """Raised when a JSON document cannot be parsed into Preferences."""

    pass
