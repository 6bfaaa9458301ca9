from __future__ import annotations

from typing import Protocol, runtime_checkable

from readerprefs.config import ReaderDefaults
from readerprefs.preferences import Preferences
from readerprefs.reader.settings import ReaderSettings, ReaderSettingsFactory


@runtime_checkable
class Configurable(Protocol):
    """Protocol for a component whose settings are driven by Preferences.

    The component exposes its current settings, each holding its effective
    value, and recomputes them when new preferences are applied.
    """

    @property
    def settings(self) -> ReaderSettings:
        """Current settings of the component."""
        ...

    def apply_preferences(self, preferences: Preferences) -> None:
        """Recompute the settings from the given preferences.

        Args:
            preferences: Preferences to apply
        """
        ...


class MockConfigurable:
    """Mock implementation of Configurable for testing."""

    def __init__(self, defaults: ReaderDefaults | None = None):
        self._factory = ReaderSettingsFactory(defaults or ReaderDefaults())
        self._settings = self._factory.create(Preferences())
        self.apply_calls: list[Preferences] = []

    @property
    def settings(self) -> ReaderSettings:
        return self._settings

    def apply_preferences(self, preferences: Preferences) -> None:
        """Record the call and resolve the settings."""
        self.apply_calls.append(preferences.copy())
        self._settings = self._factory.create(preferences)

    def reset_call_history(self) -> None:
        """Reset the call history for testing."""
        self.apply_calls = []


def assert_preferences_applied(
    mock_configurable: MockConfigurable, expected: Preferences
) -> bool:
    """Assert that the last applied preferences are the expected ones.

    Args:
        mock_configurable: The mock configurable instance
        expected: The expected preferences

    Returns:
        True if the assertion passes, raises AssertionError otherwise
    """
    assert len(mock_configurable.apply_calls) > 0, "Preferences were not applied"
    last_call = mock_configurable.apply_calls[-1]
    assert last_call == expected, f"Expected {expected}, got {last_call}"
    return True
