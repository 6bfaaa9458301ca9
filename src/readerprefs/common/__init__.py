"""Shared enumerations used by the reader settings."""

from .enums import Fit, ReadingProgression, TextAlign, Theme

__all__ = ["Fit", "ReadingProgression", "TextAlign", "Theme"]
