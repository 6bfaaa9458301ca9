"""Activation rules of the settings.

A setting may be ignored by a Configurable until other settings hold
compatible preferences, e.g. the word spacing only applies when the
publisher styles are disabled. An activator checks this condition and can
force it in a Preferences value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, Optional, Protocol, runtime_checkable

from readerprefs.settings.coders import SettingCoder
from readerprefs.settings.keys import SettingKey

if TYPE_CHECKING:
    from readerprefs.preferences import Preferences

logger: Final = logging.getLogger(__name__)


@runtime_checkable
class SettingActivator(Protocol):
    """Protocol for the activation rule of a setting."""

    def is_active(self, preferences: Preferences) -> bool:
        """Indicate whether the setting is active with the given preferences.

        Args:
            preferences: Preferences to check
        """
        ...

    def activate(self, preferences: Preferences) -> None:
        """Update the preferences in place so that the setting becomes active.

        Args:
            preferences: Preferences to update
        """
        ...


class NullSettingActivator:
    """Activator of a setting which is always active."""

    def is_active(self, preferences: Preferences) -> bool:
        return True

    def activate(self, preferences: Preferences) -> None:
        pass

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NullSettingActivator)

    def __hash__(self) -> int:
        return hash(NullSettingActivator)


NULL_ACTIVATOR: Final = NullSettingActivator()


@dataclass(frozen=True)
class ForcePreferenceSettingActivator:
    """Activator requiring another setting to hold a given preference.

    Attributes:
        key: Key of the required setting
        value: Preference the required setting must hold
        coder: Coder of the required setting
        fallback: Value assumed for the required setting when it has no
            preference, usually its default
    """

    key: SettingKey
    value: Any
    coder: SettingCoder[Any]
    fallback: Optional[Any] = None

    def is_active(self, preferences: Preferences) -> bool:
        current = preferences.get_value(self.key, self.coder)
        if current is None:
            current = self.fallback
        return current == self.value

    def activate(self, preferences: Preferences) -> None:
        logger.debug("Forcing %s to %r", self.key, self.value)
        preferences.set_value(self.key, self.value, self.coder)
