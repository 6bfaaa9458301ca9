"""Settings of the e-book reader, resolved from defaults and preferences."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, Final

from readerprefs.common.enums import Fit, ReadingProgression, TextAlign, Theme
from readerprefs.config import ReaderDefaults
from readerprefs.constants import (
    COLUMN_COUNT_RANGE,
    FONT_SIZE_RANGE,
    LINE_HEIGHT_INCREMENT,
    LINE_HEIGHT_RANGE,
    PAGE_MARGINS_INCREMENT,
    PAGE_MARGINS_RANGE,
)
from readerprefs.preferences import Preferences
from readerprefs.settings import keys
from readerprefs.settings.activators import ForcePreferenceSettingActivator
from readerprefs.settings.coders import SettingCoder
from readerprefs.settings.setting import (
    Setting,
    enum_setting,
    percent_setting,
    range_setting,
    toggle_setting,
)

logger: Final = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReaderSettings:
    """Current settings of the reader, each holding its effective value."""

    font_size: Setting[float]
    line_height: Setting[float]
    word_spacing: Setting[float]
    letter_spacing: Setting[float]
    text_align: Setting[TextAlign]
    publisher_styles: Setting[bool]
    page_margins: Setting[float]
    column_count: Setting[int]
    scroll: Setting[bool]
    fit: Setting[Fit]
    theme: Setting[Theme]
    reading_progression: Setting[ReadingProgression]

    def all(self) -> list[Setting[Any]]:
        """All the settings, in declaration order."""
        return [getattr(self, f.name) for f in fields(self)]

    def values(self) -> dict[str, Any]:
        """Effective values keyed by setting key id."""
        return {setting.key.id: setting.value for setting in self.all()}


class ReaderSettingsFactory:
    """Builds ReaderSettings from the reader defaults and user preferences.

    A setting takes the user preference when it is active in the preferences
    and the stored value is valid, its default otherwise.

    Examples:
        factory = ReaderSettingsFactory(ReaderDefaults())
        settings = factory.create(Preferences({"fontSize": 2.0}))
        settings.font_size.value  # 2.0
    """

    def __init__(self, defaults: ReaderDefaults):
        self.defaults = defaults

    def create(self, preferences: Preferences) -> ReaderSettings:
        """Resolve the reader settings against the given preferences."""
        resolved = {
            name: self._resolve(setting, preferences)
            for name, setting in self.default_settings().items()
        }
        return ReaderSettings(**resolved)

    def default_settings(self) -> dict[str, Setting[Any]]:
        """Settings holding their default values, keyed by field name."""
        d = self.defaults
        requires_no_publisher_styles = ForcePreferenceSettingActivator(
            key=keys.PUBLISHER_STYLES,
            value=False,
            coder=SettingCoder.literal(bool),
            fallback=d.publisher_styles,
        )
        requires_pagination = ForcePreferenceSettingActivator(
            key=keys.SCROLL,
            value=False,
            coder=SettingCoder.literal(bool),
            fallback=d.scroll,
        )

        return {
            "font_size": percent_setting(
                keys.FONT_SIZE,
                d.font_size,
                value_range=FONT_SIZE_RANGE,
                suggested_steps=d.font_size_steps,
            ),
            "line_height": range_setting(
                keys.LINE_HEIGHT,
                d.line_height,
                value_range=LINE_HEIGHT_RANGE,
                suggested_increment=LINE_HEIGHT_INCREMENT,
                activator=requires_no_publisher_styles,
            ),
            "word_spacing": percent_setting(
                keys.WORD_SPACING,
                d.word_spacing,
                activator=requires_no_publisher_styles,
            ),
            "letter_spacing": percent_setting(
                keys.LETTER_SPACING,
                d.letter_spacing,
                activator=requires_no_publisher_styles,
            ),
            "text_align": enum_setting(
                keys.TEXT_ALIGN,
                d.text_align,
                values=list(TextAlign),
                activator=requires_no_publisher_styles,
            ),
            "publisher_styles": toggle_setting(keys.PUBLISHER_STYLES, d.publisher_styles),
            "page_margins": range_setting(
                keys.PAGE_MARGINS,
                d.page_margins,
                value_range=PAGE_MARGINS_RANGE,
                suggested_increment=PAGE_MARGINS_INCREMENT,
            ),
            "column_count": range_setting(
                keys.COLUMN_COUNT,
                d.column_count,
                value_range=COLUMN_COUNT_RANGE,
                activator=requires_pagination,
            ),
            "scroll": toggle_setting(keys.SCROLL, d.scroll),
            "fit": enum_setting(keys.FIT, d.fit, values=list(Fit)),
            "theme": enum_setting(
                keys.THEME,
                d.theme,
                values=list(Theme),
                formatter=lambda theme: theme.name.capitalize(),
            ),
            "reading_progression": enum_setting(
                keys.READING_PROGRESSION,
                d.reading_progression,
                values=d.supported_reading_progressions,
            ),
        }

    @staticmethod
    def _resolve(setting: Setting[Any], preferences: Preferences) -> Setting[Any]:
        if not preferences.is_active(setting):
            if setting.key.id in preferences:
                logger.debug("Ignoring inactive preference %s", setting.key)
            return setting

        preference = preferences.get(setting)
        if preference is None:
            return setting
        return setting.with_value(preference)
