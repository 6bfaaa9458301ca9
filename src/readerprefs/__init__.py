"""Typed preferences for the display settings of an e-book reader.

Usage:
    from readerprefs import Preferences, ReaderController

    controller = ReaderController()
    prefs = controller.preferences
    prefs.increment(controller.settings.font_size)
    controller.apply_preferences(prefs)
"""

__version__ = "0.1.0"

from readerprefs.config import ReaderDefaults
from readerprefs.controller import ReaderController
from readerprefs.errors import PreferencesError, PreferencesParseError
from readerprefs.preferences import Preferences
from readerprefs.reader import Configurable, ReaderSettings, ReaderSettingsFactory
from readerprefs.settings import Setting, SettingKey

__all__ = [
    "Configurable",
    "Preferences",
    "PreferencesError",
    "PreferencesParseError",
    "ReaderController",
    "ReaderDefaults",
    "ReaderSettings",
    "ReaderSettingsFactory",
    "Setting",
    "SettingKey",
]
