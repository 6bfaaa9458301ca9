"""Typed setting descriptors.

This package provides:
- SettingKey: identifiers of the settings, with the well-known keys in ``keys``
- Setting: one configurable property, built with toggle_setting,
  range_setting, percent_setting or enum_setting
- SettingCoder: JSON coders of the setting values
- SettingActivator: activation rules between settings
"""

from readerprefs.settings import keys
from readerprefs.settings.activators import (
    NULL_ACTIVATOR,
    ForcePreferenceSettingActivator,
    NullSettingActivator,
    SettingActivator,
)
from readerprefs.settings.coders import SettingCoder
from readerprefs.settings.constraints import EnumConstraint, RangeConstraint, Unconstrained
from readerprefs.settings.keys import SettingKey
from readerprefs.settings.ranges import IncrementProgression, StepsProgression, ValueRange
from readerprefs.settings.setting import (
    Setting,
    SettingKind,
    SettingValidator,
    enum_setting,
    percent_setting,
    range_setting,
    toggle_setting,
)

__all__ = [
    "NULL_ACTIVATOR",
    "EnumConstraint",
    "ForcePreferenceSettingActivator",
    "IncrementProgression",
    "NullSettingActivator",
    "RangeConstraint",
    "Setting",
    "SettingActivator",
    "SettingCoder",
    "SettingKey",
    "SettingKind",
    "SettingValidator",
    "StepsProgression",
    "Unconstrained",
    "ValueRange",
    "enum_setting",
    "keys",
    "percent_setting",
    "range_setting",
    "toggle_setting",
]
