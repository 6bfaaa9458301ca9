import pytest

from readerprefs.common.enums import Fit, ReadingProgression
from readerprefs.preferences import Preferences
from readerprefs.settings import keys
from readerprefs.settings.coders import SettingCoder
from readerprefs.settings.setting import (
    Setting,
    enum_setting,
    percent_setting,
    range_setting,
    toggle_setting,
)


class MockPublisherStylesSettingActivator:
    """Active only when the publisher styles are explicitly disabled."""

    def is_active(self, preferences: Preferences) -> bool:
        value = preferences.get_value(keys.PUBLISHER_STYLES, SettingCoder.literal(bool))
        return (True if value is None else value) is False

    def activate(self, preferences: Preferences) -> None:
        preferences.set_value(keys.PUBLISHER_STYLES, False, SettingCoder.literal(bool))


@pytest.fixture
def reading_progression() -> Setting[ReadingProgression]:
    return enum_setting(
        keys.READING_PROGRESSION,
        ReadingProgression.LTR,
        values=[ReadingProgression.LTR, ReadingProgression.RTL],
    )


@pytest.fixture
def font_size() -> Setting[float]:
    return percent_setting(
        keys.FONT_SIZE,
        1.0,
        value_range=(0.4, 5.0),
        suggested_steps=[0.5, 0.8, 1.0, 2.0, 3.0, 5.0],
    )


@pytest.fixture
def page_margins() -> Setting[float]:
    return range_setting(
        keys.PAGE_MARGINS,
        1.0,
        value_range=(1.0, 2.0),
        suggested_increment=0.5,
    )


@pytest.fixture
def column_count() -> Setting[int]:
    return range_setting(keys.COLUMN_COUNT, 1, value_range=(1, 5))


@pytest.fixture
def fit() -> Setting[Fit]:
    return enum_setting(
        keys.FIT,
        Fit.CONTAIN,
        values=[Fit.CONTAIN, Fit.COVER, Fit.WIDTH, Fit.HEIGHT],
    )


@pytest.fixture
def publisher_styles() -> Setting[bool]:
    return toggle_setting(keys.PUBLISHER_STYLES, True)


@pytest.fixture
def word_spacing() -> Setting[float]:
    return percent_setting(
        keys.WORD_SPACING,
        0.0,
        activator=MockPublisherStylesSettingActivator(),
    )


@pytest.fixture
def letter_spacing() -> Setting[float]:
    return percent_setting(
        keys.LETTER_SPACING,
        0.0,
        activator=MockPublisherStylesSettingActivator(),
    )
