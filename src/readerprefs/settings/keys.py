"""Identifiers of the settings, used as field names in the Preferences JSON."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class SettingKey:
    """Unique identifier used to serialize Preferences to JSON.

    The id must stay stable across versions since it ends up in persisted
    preferences.
    """

    id: str

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("SettingKey id cannot be empty")

    def __str__(self) -> str:
        return self.id


BACKGROUND_COLOR: Final = SettingKey("backgroundColor")
COLUMN_COUNT: Final = SettingKey("columnCount")
FIT: Final = SettingKey("fit")
FONT_FAMILY: Final = SettingKey("fontFamily")
FONT_SIZE: Final = SettingKey("fontSize")
HYPHENS: Final = SettingKey("hyphens")
IMAGE_FILTER: Final = SettingKey("imageFilter")
LANGUAGE: Final = SettingKey("language")
LETTER_SPACING: Final = SettingKey("letterSpacing")
LIGATURES: Final = SettingKey("ligatures")
LINE_HEIGHT: Final = SettingKey("lineHeight")
ORIENTATION: Final = SettingKey("orientation")
PAGE_MARGINS: Final = SettingKey("pageMargins")
PARAGRAPH_INDENT: Final = SettingKey("paragraphIndent")
PARAGRAPH_SPACING: Final = SettingKey("paragraphSpacing")
PUBLISHER_STYLES: Final = SettingKey("publisherStyles")
READING_PROGRESSION: Final = SettingKey("readingProgression")
SCROLL: Final = SettingKey("scroll")
SPREAD: Final = SettingKey("spread")
TEXT_ALIGN: Final = SettingKey("textAlign")
TEXT_COLOR: Final = SettingKey("textColor")
TEXT_NORMALIZATION: Final = SettingKey("textNormalization")
THEME: Final = SettingKey("theme")
TYPE_SCALE: Final = SettingKey("typeScale")
VERTICAL_TEXT: Final = SettingKey("verticalText")
WORD_SPACING: Final = SettingKey("wordSpacing")
