from typing import Final

# Environment variable pointing at the reader defaults YAML file
CONFIG_ENV_VAR: Final = "READERPREFS_CONFIG"

# Fallback amounts used to increment a range setting without a suggested progression
INT_FALLBACK_INCREMENT: Final = 1
FLOAT_FALLBACK_INCREMENT: Final = 0.1

# Number formatting for range values
RANGE_MAX_FRACTION_DIGITS: Final = 5

# Bounds of the reader settings
FONT_SIZE_RANGE: Final = (0.4, 5.0)
FONT_SIZE_STEPS: Final = (0.5, 0.8, 1.0, 1.2, 1.5, 2.0, 3.0, 5.0)
PAGE_MARGINS_RANGE: Final = (0.0, 4.0)
PAGE_MARGINS_INCREMENT: Final = 0.3
COLUMN_COUNT_RANGE: Final = (1, 5)
LINE_HEIGHT_RANGE: Final = (1.0, 2.0)
LINE_HEIGHT_INCREMENT: Final = 0.1
