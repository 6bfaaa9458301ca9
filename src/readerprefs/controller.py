"""Configurable reader controller driven by user preferences."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Final

from readerprefs.config import ReaderDefaults
from readerprefs.preferences import Preferences
from readerprefs.reader.settings import ReaderSettings, ReaderSettingsFactory

TEST_CONFIG_YAML = """\
font_size: 1.2
line_height: 1.4
publisher_styles: true
page_margins: 1.5
column_count: 2
theme: sepia
reading_progression: rtl
supported_reading_progressions: [ltr, rtl]
"""

logger: Final = logging.getLogger(__name__)


class ReaderController:
    """Configurable component holding the effective settings of the reader.

    The controller keeps its own copy of the applied preferences and
    re-resolves its settings each time new preferences are applied. The
    presentation layer reads ``settings`` and builds new preferences from
    them:

        prefs = controller.preferences
        prefs.increment(controller.settings.font_size)
        controller.apply_preferences(prefs)
    """

    def __init__(
        self,
        defaults: ReaderDefaults | None = None,
        preferences: Preferences | None = None,
        debug: bool = False,
    ):
        """Initialize the reader controller.

        Args:
            defaults: Default values of the settings
            preferences: Initial user preferences
            debug: Enable debug logging
        """
        # Configure logging
        logging.basicConfig(
            level=logging.DEBUG if debug else logging.INFO,
            format="%(asctime)s [%(levelname)s] %(message)s",
        )

        self.defaults = defaults or ReaderDefaults()
        self._factory = ReaderSettingsFactory(self.defaults)
        self._preferences = preferences.copy() if preferences is not None else Preferences()
        self._settings = self._factory.create(self._preferences)

    @classmethod
    def from_config(cls, config_path: Path | None = None, debug: bool = False) -> ReaderController:
        """Create a controller using the defaults of a reader.yaml file.

        Raises:
            FileNotFoundError: If no config file is found
            RuntimeError: If the config file is invalid
        """
        return cls(ReaderDefaults.load(config_path), debug=debug)

    @property
    def settings(self) -> ReaderSettings:
        """Current settings, each holding its effective value."""
        return self._settings

    @property
    def preferences(self) -> Preferences:
        """Copy of the applied preferences."""
        return self._preferences.copy()

    @property
    def preferences_json(self) -> str:
        """Applied preferences serialized as JSON, ready to be persisted."""
        return self._preferences.json_string

    def apply_preferences(self, preferences: Preferences) -> None:
        """Apply new preferences and recompute the settings.

        Args:
            preferences: Preferences to apply
        """
        previous = self._settings.values()
        self._preferences = preferences.copy()
        self._settings = self._factory.create(self._preferences)

        changes = self._diff(previous, self._settings.values())
        if changes:
            logger.info("Applied preferences, changed: %s", ", ".join(sorted(changes)))
        else:
            logger.debug("Applied preferences, no setting changed")

    def apply_preferences_json(self, json_string: str) -> None:
        """Parse and apply preferences serialized as JSON.

        Raises:
            PreferencesParseError: If the JSON is invalid, the current
                preferences are then left untouched
        """
        self.apply_preferences(Preferences.from_json_string(json_string))

    @staticmethod
    def _diff(previous: dict[str, Any], current: dict[str, Any]) -> list[str]:
        return [key for key, value in current.items() if previous.get(key) != value]
