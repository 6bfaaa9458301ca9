"""Reader defaults loaded from reader.yaml."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import ClassVar, Final

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from readerprefs.common.enums import Fit, ReadingProgression, TextAlign, Theme
from readerprefs.constants import (
    COLUMN_COUNT_RANGE,
    CONFIG_ENV_VAR,
    FONT_SIZE_RANGE,
    FONT_SIZE_STEPS,
    LINE_HEIGHT_RANGE,
    PAGE_MARGINS_RANGE,
)

# Load environment variables from .env file(s)
load_dotenv()

logger: Final = logging.getLogger(__name__)


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class ReaderDefaults(BaseModel):
    """Default values of the reader settings, used when no preference applies.

    These values can be overridden in reader.yaml. The bounds match the
    ranges of the corresponding settings.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("reader.yaml"),
        Path("~/.config/readerprefs/reader.yaml").expanduser(),
        Path("/etc/readerprefs/reader.yaml"),
    ]

    # Typography
    font_size: float = Field(
        1.0, ge=FONT_SIZE_RANGE[0], le=FONT_SIZE_RANGE[1], description="Font size scale (1.0 = 100%)"
    )
    font_size_steps: list[float] = Field(
        list(FONT_SIZE_STEPS), description="Steps used to increase or decrease the font size"
    )
    line_height: float = Field(
        1.2, ge=LINE_HEIGHT_RANGE[0], le=LINE_HEIGHT_RANGE[1], description="Line height multiplier"
    )
    word_spacing: float = Field(0.0, ge=0.0, le=1.0, description="Extra word spacing (percent)")
    letter_spacing: float = Field(
        0.0, ge=0.0, le=1.0, description="Extra letter spacing (percent)"
    )
    text_align: TextAlign = TextAlign.START
    publisher_styles: bool = Field(True, description="Use the styles of the publication")

    # Layout
    page_margins: float = Field(
        1.0, ge=PAGE_MARGINS_RANGE[0], le=PAGE_MARGINS_RANGE[1], description="Page margins factor"
    )
    column_count: int = Field(
        1, ge=COLUMN_COUNT_RANGE[0], le=COLUMN_COUNT_RANGE[1], description="Number of columns"
    )
    scroll: bool = Field(False, description="Scroll instead of paginating")
    fit: Fit = Fit.CONTAIN

    # Appearance and direction
    theme: Theme = Theme.LIGHT
    reading_progression: ReadingProgression = ReadingProgression.LTR
    supported_reading_progressions: list[ReadingProgression] = Field(
        [ReadingProgression.LTR, ReadingProgression.RTL],
        min_length=1,
        description="Reading progressions the reader can render",
    )

    # ---- validators ----
    @field_validator("font_size_steps")
    @classmethod
    def validate_steps(cls, v: list[float]) -> list[float]:
        """Ensure the font size steps are increasing and within the font size range."""
        if not v:
            raise ValueError("font_size_steps cannot be empty")
        if any(a >= b for a, b in zip(v, v[1:])):
            raise ValueError("font_size_steps must be sorted in increasing order")
        if v[0] < FONT_SIZE_RANGE[0] or v[-1] > FONT_SIZE_RANGE[1]:
            raise ValueError(f"font_size_steps must lie within {FONT_SIZE_RANGE}")
        return v

    @model_validator(mode="after")
    def check_reading_progression_supported(self) -> ReaderDefaults:
        if self.reading_progression not in self.supported_reading_progressions:
            raise ValueError(
                f"reading_progression {self.reading_progression.value!r} is not supported"
            )
        return self

    @classmethod
    def find_config_path(cls) -> Path:
        """Locate reader.yaml, from READERPREFS_CONFIG or the default search paths.

        Raises:
            FileNotFoundError: If no config file is found
        """
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            path = Path(env_path)
            if not path.exists():
                raise FileNotFoundError(f"Config file from {CONFIG_ENV_VAR} not found: {path}")
            return path

        for default_path in cls.DEFAULT_CONFIG_PATHS:
            if default_path.exists():
                return default_path
        raise FileNotFoundError(
            f"No configuration file found. Create reader.yaml or set {CONFIG_ENV_VAR}."
        )

    @classmethod
    def load(cls, path: Path | None = None) -> ReaderDefaults:
        """Load the reader defaults from a YAML file.

        ``${VAR}`` references in the file are replaced by environment
        variables, an empty file keeps every default.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated ReaderDefaults object

        Raises:
            FileNotFoundError: If no config file is found
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        path = path or cls.find_config_path()
        try:
            data = yaml.safe_load(_interpolate_env(path.read_text()))
        except (OSError, yaml.YAMLError) as exc:
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        logger.debug("Loaded reader defaults from %s", path)
        try:
            return cls.model_validate(data or {})
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err
