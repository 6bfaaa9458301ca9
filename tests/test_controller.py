import logging
from pathlib import Path

import pytest

from readerprefs.common.enums import ReadingProgression, Theme
from readerprefs.config import ReaderDefaults
from readerprefs.controller import TEST_CONFIG_YAML, ReaderController
from readerprefs.errors import PreferencesParseError
from readerprefs.preferences import Preferences
from readerprefs.reader.protocols import Configurable


@pytest.fixture
def controller() -> ReaderController:
    return ReaderController(ReaderDefaults())


def test_controller_is_configurable(controller: ReaderController) -> None:
    assert isinstance(controller, Configurable)


def test_from_config(tmp_path: Path) -> None:
    cfg_file = tmp_path / "reader.yaml"
    cfg_file.write_text(TEST_CONFIG_YAML)

    controller = ReaderController.from_config(cfg_file)

    assert controller.settings.font_size.value == 1.2
    assert controller.settings.theme.value is Theme.SEPIA
    assert controller.settings.reading_progression.value is ReadingProgression.RTL
    assert controller.preferences == Preferences()


def test_initial_preferences() -> None:
    controller = ReaderController(preferences=Preferences({"theme": "dark"}))
    assert controller.settings.theme.value is Theme.DARK


def test_apply_preferences(controller: ReaderController) -> None:
    prefs = controller.preferences
    prefs.increment(controller.settings.font_size)
    prefs.set(controller.settings.word_spacing, 0.2)
    controller.apply_preferences(prefs)

    assert controller.settings.font_size.value == 1.2
    assert controller.settings.word_spacing.value == 0.2
    assert controller.settings.publisher_styles.value is False


def test_applied_preferences_are_copied(controller: ReaderController) -> None:
    prefs = Preferences({"fontSize": 2.0})
    controller.apply_preferences(prefs)
    prefs.clear()
    assert controller.settings.font_size.value == 2.0

    exported = controller.preferences
    exported.clear()
    assert controller.preferences == Preferences({"fontSize": 2.0})


def test_apply_preferences_logs_changes(
    controller: ReaderController, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.INFO, logger="readerprefs.controller"):
        controller.apply_preferences(Preferences({"theme": "sepia", "scroll": True}))
    assert "scroll, theme" in caplog.text


def test_apply_preferences_json(controller: ReaderController) -> None:
    controller.apply_preferences_json('{"theme": "dark", "fontSize": 1.5}')
    assert controller.settings.theme.value is Theme.DARK
    assert controller.preferences_json == '{"theme":"dark","fontSize":1.5}'


def test_apply_invalid_json_keeps_preferences(controller: ReaderController) -> None:
    controller.apply_preferences(Preferences({"theme": "dark"}))
    with pytest.raises(PreferencesParseError):
        controller.apply_preferences_json("not json")
    assert controller.settings.theme.value is Theme.DARK
    assert controller.preferences == Preferences({"theme": "dark"})
