import pytest

from readerprefs.common.enums import ReadingProgression, TextAlign, Theme
from readerprefs.config import ReaderDefaults
from readerprefs.preferences import Preferences
from readerprefs.reader.settings import ReaderSettings, ReaderSettingsFactory
from readerprefs.settings.setting import SettingKind


@pytest.fixture
def factory() -> ReaderSettingsFactory:
    return ReaderSettingsFactory(ReaderDefaults())


def test_defaults_without_preferences(factory: ReaderSettingsFactory) -> None:
    settings = factory.create(Preferences())
    assert isinstance(settings, ReaderSettings)
    assert settings.font_size.value == 1.0
    assert settings.publisher_styles.value is True
    assert settings.theme.value is Theme.LIGHT
    assert settings.values()["readingProgression"] is ReadingProgression.LTR
    assert len(settings.all()) == 12


def test_setting_kinds(factory: ReaderSettingsFactory) -> None:
    settings = factory.create(Preferences())
    assert settings.font_size.kind is SettingKind.RANGE
    assert settings.scroll.kind is SettingKind.TOGGLE
    assert settings.theme.kind is SettingKind.ENUM
    assert settings.font_size.format_value() == "100%"
    assert settings.theme.format_value() == "Light"


def test_preferences_override_defaults(factory: ReaderSettingsFactory) -> None:
    settings = factory.create(
        Preferences({"fontSize": 2.0, "theme": "dark", "readingProgression": "rtl"})
    )
    assert settings.font_size.value == 2.0
    assert settings.theme.value is Theme.DARK
    assert settings.reading_progression.value is ReadingProgression.RTL


def test_invalid_preferences_are_ignored(factory: ReaderSettingsFactory) -> None:
    settings = factory.create(
        Preferences({"fontSize": "big", "theme": "neon", "readingProgression": "ttb"})
    )
    assert settings.font_size.value == 1.0
    assert settings.theme.value is Theme.LIGHT
    assert settings.reading_progression.value is ReadingProgression.LTR


def test_out_of_range_preferences_are_clamped(factory: ReaderSettingsFactory) -> None:
    settings = factory.create(Preferences({"fontSize": 9.0, "columnCount": 0}))
    assert settings.font_size.value == 5.0
    assert settings.column_count.value == 1


def test_inactive_preferences_are_ignored(factory: ReaderSettingsFactory) -> None:
    settings = factory.create(Preferences({"wordSpacing": 0.4, "textAlign": "justify"}))
    assert settings.word_spacing.value == 0.0
    assert settings.text_align.value is TextAlign.START

    settings = factory.create(
        Preferences({"wordSpacing": 0.4, "textAlign": "justify", "publisherStyles": False})
    )
    assert settings.word_spacing.value == 0.4
    assert settings.text_align.value is TextAlign.JUSTIFY


def test_setting_a_preference_activates_it(factory: ReaderSettingsFactory) -> None:
    defaults = factory.create(Preferences())
    prefs = Preferences()
    prefs.set(defaults.line_height, 1.5)
    assert prefs.json == {"lineHeight": 1.5, "publisherStyles": False}

    settings = factory.create(prefs)
    assert settings.line_height.value == 1.5
    assert settings.publisher_styles.value is False


def test_column_count_requires_pagination(factory: ReaderSettingsFactory) -> None:
    defaults = factory.create(Preferences())
    prefs = Preferences({"scroll": True})
    prefs.increment(defaults.column_count)
    assert prefs.json == {"scroll": False, "columnCount": 2}
    assert factory.create(prefs).column_count.value == 2


def test_fallback_follows_configured_defaults() -> None:
    factory = ReaderSettingsFactory(ReaderDefaults(publisher_styles=False))
    settings = factory.create(Preferences({"wordSpacing": 0.3}))
    assert settings.word_spacing.value == 0.3


def test_supported_reading_progressions() -> None:
    factory = ReaderSettingsFactory(
        ReaderDefaults(supported_reading_progressions=[ReadingProgression.LTR])
    )
    settings = factory.create(Preferences({"readingProgression": "rtl"}))
    assert settings.reading_progression.values == (ReadingProgression.LTR,)
    assert settings.reading_progression.value is ReadingProgression.LTR


def test_font_size_steps_from_defaults(factory: ReaderSettingsFactory) -> None:
    font_size = factory.create(Preferences()).font_size
    prefs = Preferences()
    prefs.increment(font_size)
    assert prefs[font_size] == 1.2
    prefs.decrement(font_size)
    prefs.decrement(font_size)
    assert prefs[font_size] == 0.8
