"""Set of preferences used to update a Configurable's settings.

Preferences can be serialized to JSON, which is useful to persist user
preferences.

Usage example:

    # Get the currently available settings for the configurable.
    settings = configurable.settings

    # Build a new set of Preferences, using the Setting objects as keys.
    prefs = Preferences()
    prefs.set(settings.scroll, False)
    prefs.increment(settings.font_size)

    # Apply the preferences to the Configurable, which will update its
    # settings accordingly.
    configurable.apply_preferences(prefs)
"""

from __future__ import annotations

import copy
import logging
import math
from collections.abc import Callable, Mapping
from typing import Annotated, Any, Final, Optional, TypeVar, Union

from pydantic import AfterValidator, ConfigDict, JsonValue, TypeAdapter, ValidationError

from readerprefs.errors import PreferencesParseError
from readerprefs.settings.coders import SettingCoder
from readerprefs.settings.keys import SettingKey
from readerprefs.settings.ranges import ValueRange
from readerprefs.settings.setting import Setting

logger: Final = logging.getLogger(__name__)

V = TypeVar("V")

KeyLike = Union[SettingKey, Setting[Any], str]


def _require_finite(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"{value} is not a valid JSON number")
    if isinstance(value, dict):
        for item in value.values():
            _require_finite(item)
    elif isinstance(value, list):
        for item in value:
            _require_finite(item)
    return value


_JSON_OBJECT: Final = TypeAdapter(
    Annotated[dict[str, JsonValue], AfterValidator(_require_finite)],
    config=ConfigDict(allow_inf_nan=False),
)


def _key_id(key: KeyLike) -> str:
    if isinstance(key, Setting):
        return key.key.id
    if isinstance(key, SettingKey):
        return key.id
    return key


def _require_range(setting: Setting[Any]) -> ValueRange[Any]:
    if setting.range is None:
        raise TypeError(f"{setting.key} is not a range setting")
    return setting.range


def _require_amount(bounds: ValueRange[Any], amount: Any) -> None:
    if bounds.is_integral and isinstance(amount, float):
        raise TypeError(f"Cannot move an integer setting by {amount}")


class Preferences:
    """Ordered mapping of setting keys to JSON values.

    Values written through a Setting are validated, and clamped for range
    settings, before being stored. The underlying mapping is never shared
    with callers: it is copied in and out.

    Preferences are mutable, hence unhashable. Use ``json_string`` where a
    hashable snapshot is needed.
    """

    def __init__(self, json: Optional[Mapping[str, Any]] = None):
        """Create preferences from a JSON object.

        Args:
            json: Mapping of setting key ids to JSON values

        Raises:
            ValueError: If the mapping holds values which are not JSON
        """
        try:
            values = _JSON_OBJECT.validate_python(dict(json or {}))
        except ValidationError as err:
            raise ValueError(f"Invalid preferences: {err.errors()[0]['msg']}") from err
        self._values: dict[str, Any] = copy.deepcopy(values)

    @classmethod
    def build(cls, builder: Callable[[Preferences], None]) -> Preferences:
        """Create preferences by running a builder on a fresh instance.

            prefs = Preferences.build(lambda p: p.set(settings.scroll, False))
        """
        preferences = cls()
        builder(preferences)
        return preferences

    @classmethod
    def from_json_string(cls, json_string: str) -> Preferences:
        """Parse preferences from a JSON document.

        Args:
            json_string: JSON object serialized as text

        Returns:
            The parsed preferences

        Raises:
            PreferencesParseError: If the text is not a valid JSON object
        """
        try:
            values = _JSON_OBJECT.validate_json(json_string)
        except ValidationError as err:
            raise PreferencesParseError(
                f"Invalid preferences JSON: {err.errors()[0]['msg']}", original_error=err
            ) from err
        return cls(values)

    @property
    def json(self) -> dict[str, Any]:
        """JSON representation of these preferences."""
        return copy.deepcopy(self._values)

    @property
    def json_string(self) -> str:
        """JSON representation of these preferences, serialized as text."""
        return _JSON_OBJECT.dump_json(self._values).decode("utf-8")

    def copy(self) -> Preferences:
        return Preferences(self._values)

    # ---- access ----
    def get(self, setting: Setting[V]) -> Optional[V]:
        """Get the preference for the given setting.

        A stored value which cannot be decoded or is rejected by the setting
        validator is treated as missing.

        Args:
            setting: Setting to look up

        Returns:
            The validated preference, or None
        """
        json = self._values.get(setting.key.id)
        if json is None:
            return None

        value = setting.decode(json)
        if value is None:
            logger.debug("Ignoring undecodable preference %s=%r", setting.key, json)
            return None

        validated = setting.validate(value)
        if validated is None:
            logger.debug("Ignoring invalid preference %s=%r", setting.key, json)
        return validated

    def get_value(self, key: SettingKey, coder: SettingCoder[V]) -> Optional[V]:
        """Get the preference for a raw setting key, without validation."""
        json = self._values.get(key.id)
        if json is None:
            return None
        return coder.decode(json)

    def set(self, setting: Setting[V], preference: Optional[V], activate: bool = True) -> None:
        """Set the preference for the given setting.

        The preference is removed when None or rejected by the setting.

        Args:
            setting: Setting to update
            preference: New preference
            activate: Whether to force activate the setting if needed
        """
        if preference is None:
            self.remove(setting)
            return

        validated = setting.validate(preference)
        if validated is None:
            logger.debug("Rejected preference %s=%r", setting.key, preference)
            self.remove(setting)
            return

        self._values[setting.key.id] = setting.encode(validated)

        if activate:
            self.activate(setting)

    def set_value(self, key: SettingKey, preference: Optional[V], coder: SettingCoder[V]) -> None:
        """Set the preference for a raw setting key, without validation nor activation."""
        if preference is None:
            self._values.pop(key.id, None)
        else:
            self._values[key.id] = coder.encode(preference)

    def __getitem__(self, setting: Setting[V]) -> Optional[V]:
        return self.get(setting)

    def __setitem__(self, setting: Setting[V], preference: Optional[V]) -> None:
        self.set(setting, preference)

    def __delitem__(self, setting: Setting[Any]) -> None:
        self.remove(setting)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (Setting, SettingKey, str)):
            return False
        return _key_id(key) in self._values

    def __len__(self) -> int:
        return len(self._values)

    def remove(self, setting: Optional[Setting[Any]]) -> None:
        """Remove the preference for the given setting, if any."""
        if setting is None:
            return
        self._values.pop(setting.key.id, None)

    def clear(self) -> None:
        self._values.clear()

    def merge(self, other: Preferences) -> None:
        """Merge the preferences of other, which win in case of conflict."""
        self._values.update(copy.deepcopy(other._values))

    def filter(self, *keys: KeyLike) -> Preferences:
        """Return a copy keeping only the given keys."""
        ids = {_key_id(key) for key in keys}
        return Preferences({k: v for k, v in self._values.items() if k in ids})

    def filter_not(self, *keys: KeyLike) -> Preferences:
        """Return a copy without the given keys."""
        ids = {_key_id(key) for key in keys}
        return Preferences({k: v for k, v in self._values.items() if k not in ids})

    # ---- activation ----
    def is_active(self, setting: Setting[Any]) -> bool:
        """Whether the given setting is active in these preferences.

        An inactive setting is ignored by the Configurable until its
        activation conditions are met, e.g. another setting having a certain
        preference.
        """
        return setting.is_active(self)

    def activate(self, setting: Setting[Any]) -> None:
        """Activate the given setting in these preferences, if needed."""
        if self.is_active(setting):
            return
        logger.debug("Activating %s", setting.key)
        setting.activate(self)

    # ---- transformations ----
    def update(
        self, setting: Setting[V], transform: Callable[[V], V], activate: bool = True
    ) -> None:
        """Set the preference after transforming the current one.

        The setting value is used when there is no preference yet.
        """
        self.set(setting, transform(self._pref_or_value(setting)), activate=activate)

    def toggle(
        self, setting: Setting[V], preference: Optional[V] = None, activate: bool = True
    ) -> None:
        """Toggle the preference of a setting.

        Without a preference, the boolean preference of a toggle setting is
        inverted. With one, the preference is set unless it already has this
        value, in which case it is removed.

        Args:
            setting: Setting to toggle
            preference: Value to toggle on or off
            activate: Whether to force activate the setting if needed

        Raises:
            TypeError: If no preference is given for a non-boolean setting
        """
        if preference is None:
            current = self._pref_or_value(setting)
            if not isinstance(current, bool):
                raise TypeError(f"{setting.key} is not a toggle setting")
            self.set(setting, not current, activate=activate)  # type: ignore[arg-type]
            return

        if self.get(setting) != preference:
            self.set(setting, preference, activate=activate)
        else:
            self.remove(setting)

    def increment(
        self, setting: Setting[V], amount: Optional[V] = None, activate: bool = True
    ) -> None:
        """Increment the preference of a range setting.

        The preference moves by the given amount, or else to the next
        suggested step, or by the suggested increment, or by a fallback of 1
        for integers and 0.1 otherwise. The result is clamped to the range.

        Raises:
            TypeError: If the setting is not a range setting, or a float
                amount is given for an integer setting
            ValueError: If the amount is NaN
        """
        bounds = _require_range(setting)
        _require_amount(bounds, amount)
        progression = setting.suggested_progression

        def next_value(value: Any) -> Any:
            if amount is not None:
                return value + amount
            if progression is not None:
                return progression.increment(value)
            return value + bounds.fallback_increment

        self.update(setting, lambda value: bounds.clamp(next_value(value)), activate=activate)

    def decrement(
        self, setting: Setting[V], amount: Optional[V] = None, activate: bool = True
    ) -> None:
        """Decrement the preference of a range setting, see increment()."""
        bounds = _require_range(setting)
        _require_amount(bounds, amount)
        progression = setting.suggested_progression

        def previous_value(value: Any) -> Any:
            if amount is not None:
                return value - amount
            if progression is not None:
                return progression.decrement(value)
            return value - bounds.fallback_increment

        self.update(setting, lambda value: bounds.clamp(previous_value(value)), activate=activate)

    def adjust_by(self, setting: Setting[V], amount: V, activate: bool = True) -> None:
        """Add a signed amount to the preference of a range setting, clamped."""
        bounds = _require_range(setting)
        _require_amount(bounds, amount)
        self.update(
            setting,
            lambda value: bounds.clamp(value + amount),  # type: ignore[operator]
            activate=activate,
        )

    def _pref_or_value(self, setting: Setting[V]) -> V:
        preference = self.get(setting)
        return setting.value if preference is None else preference

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Preferences):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Preferences({self._values})"
