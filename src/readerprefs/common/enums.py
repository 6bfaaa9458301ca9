from enum import Enum


class ReadingProgression(Enum):
    """Direction in which the pages of a publication are read."""

    LTR = "ltr"  # left to right
    RTL = "rtl"  # right to left
    TTB = "ttb"  # top to bottom
    BTT = "btt"  # bottom to top


class Fit(Enum):
    """How a fixed-layout page is fitted into the viewport."""

    CONTAIN = "contain"
    COVER = "cover"
    WIDTH = "width"
    HEIGHT = "height"


class Theme(Enum):
    """Color theme applied to reflowable content."""

    LIGHT = "light"
    DARK = "dark"
    SEPIA = "sepia"


class TextAlign(Enum):
    """Horizontal alignment of the text."""

    START = "start"
    LEFT = "left"
    RIGHT = "right"
    JUSTIFY = "justify"
