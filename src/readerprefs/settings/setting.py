"""Setting descriptors: one configurable property of a Configurable component.

A Setting holds the current value of the property along with everything
needed to handle preferences for it: a JSON coder, a validator, an activation
rule and a constraint strategy making it a toggle, range or enum setting.

Examples:
    font_size = percent_setting(
        keys.FONT_SIZE,
        1.0,
        value_range=(0.4, 5.0),
        suggested_steps=[0.5, 0.8, 1.0, 2.0, 3.0, 5.0],
    )
    font_size.validate(7.0)  # 5.0
    font_size.format_value()  # "100%"
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, Optional, TypeVar

from readerprefs.settings.activators import NULL_ACTIVATOR, SettingActivator
from readerprefs.settings.coders import SettingCoder
from readerprefs.settings.constraints import (
    UNCONSTRAINED,
    EnumConstraint,
    RangeConstraint,
    SettingConstraint,
)
from readerprefs.settings.keys import SettingKey
from readerprefs.settings.ranges import Progression, ValueRange, steps_of
from readerprefs.utils.formatting import format_decimal, format_percentage

if TYPE_CHECKING:
    from readerprefs.preferences import Preferences

V = TypeVar("V")

# Returns a valid value for the given value if possible, None otherwise
SettingValidator = Callable[[V], Optional[V]]


def _identity(value: V) -> Optional[V]:
    return value


class SettingKind(Enum):
    """Variant of a setting, used by presenters to pick a widget."""

    TOGGLE = "toggle"
    RANGE = "range"
    ENUM = "enum"
    VALUE = "value"


@dataclass(frozen=True)
class Setting(Generic[V]):
    """Single configurable property holding its current value.

    Two settings are equal when they have the same key, value and
    constraint; the coder, validator and activator are not compared.
    """

    key: SettingKey
    value: V
    coder: SettingCoder[V] = field(compare=False, repr=False)
    constraint: SettingConstraint = UNCONSTRAINED
    validator: SettingValidator[V] = field(default=_identity, compare=False, repr=False)
    activator: SettingActivator = field(default=NULL_ACTIVATOR, compare=False, repr=False)

    @property
    def kind(self) -> SettingKind:
        if isinstance(self.constraint, RangeConstraint):
            return SettingKind.RANGE
        if isinstance(self.constraint, EnumConstraint):
            return SettingKind.ENUM
        if isinstance(self.value, bool):
            return SettingKind.TOGGLE
        return SettingKind.VALUE

    def validate(self, value: V) -> Optional[V]:
        """Return a valid value for the given value, if possible.

        Enum settings reject unsupported members, range settings clamp the
        value into their range.

        Args:
            value: Candidate value

        Returns:
            The validated, possibly coerced, value or None when rejected
        """
        if not self.constraint.accepts(value):
            return None
        validated = self.validator(value)
        if validated is None:
            return None
        return self.constraint.coerce(validated)

    def encode(self, value: V) -> Any:
        return self.coder.encode(value)

    def decode(self, json: Any) -> Optional[V]:
        return self.coder.decode(json)

    def format_value(self, value: Optional[V] = None) -> Optional[str]:
        """User-facing description of a value, the current one by default."""
        return self.constraint.format_value(self.value if value is None else value)

    def with_value(self, value: V) -> Setting[V]:
        """Copy of this setting holding another current value."""
        return replace(self, value=value)

    # ---- activation ----
    def is_active(self, preferences: Preferences) -> bool:
        return self.activator.is_active(preferences)

    def activate(self, preferences: Preferences) -> None:
        self.activator.activate(preferences)

    # ---- range settings ----
    @property
    def range(self) -> Optional[ValueRange[Any]]:
        if isinstance(self.constraint, RangeConstraint):
            return self.constraint.range
        return None

    @property
    def suggested_steps(self) -> Optional[tuple[Any, ...]]:
        if isinstance(self.constraint, RangeConstraint):
            return self.constraint.suggested_steps
        return None

    @property
    def suggested_increment(self) -> Optional[Any]:
        if isinstance(self.constraint, RangeConstraint):
            return self.constraint.suggested_increment
        return None

    @property
    def suggested_progression(self) -> Optional[Progression[Any]]:
        if isinstance(self.constraint, RangeConstraint):
            return self.constraint.suggested_progression
        return None

    # ---- enum settings ----
    @property
    def values(self) -> Optional[tuple[Any, ...]]:
        """Supported values of an enum setting, None when unrestricted."""
        if isinstance(self.constraint, EnumConstraint):
            return self.constraint.values
        return None


def toggle_setting(
    key: SettingKey,
    value: bool,
    validator: SettingValidator[bool] = _identity,
    activator: SettingActivator = NULL_ACTIVATOR,
) -> Setting[bool]:
    """Create a boolean setting."""
    return Setting(
        key=key,
        value=value,
        coder=SettingCoder.literal(bool),
        validator=validator,
        activator=activator,
    )


def range_setting(
    key: SettingKey,
    value: Any,
    value_range: ValueRange[Any] | tuple[Any, Any],
    suggested_steps: Optional[Sequence[Any]] = None,
    suggested_increment: Optional[Any] = None,
    formatter: Optional[Callable[[Any], str]] = None,
    coder: Optional[SettingCoder[Any]] = None,
    validator: SettingValidator[Any] = _identity,
    activator: SettingActivator = NULL_ACTIVATOR,
) -> Setting[Any]:
    """Create a numeric setting constrained to a closed range.

    The value type is float when any of the value, range bounds, suggested
    steps or suggested increment is a float, int otherwise.

    Args:
        key: Setting key
        value: Current value
        value_range: Valid range, as a ValueRange or a (lower, upper) tuple
        suggested_steps: Steps used to increment the value, in increasing order
        suggested_increment: Amount used to increment the value without steps
        formatter: User-facing description of a value, decimal by default
        coder: JSON coder, literal by default
        validator: Extra validation run before clamping
        activator: Activation rule

    Returns:
        The range setting
    """
    if not isinstance(value_range, ValueRange):
        value_range = ValueRange(*value_range)

    steps = steps_of(suggested_steps)
    numbers = (value, value_range.lower, value_range.upper, suggested_increment, *(steps or ()))
    value_type = float if any(isinstance(n, float) for n in numbers) else int
    if value_type is float:
        value = float(value)
        value_range = ValueRange(float(value_range.lower), float(value_range.upper))
        if steps is not None:
            steps = tuple(float(step) for step in steps)
        if suggested_increment is not None:
            suggested_increment = float(suggested_increment)

    return Setting(
        key=key,
        value=value,
        coder=coder or SettingCoder.literal(value_type),
        constraint=RangeConstraint(
            range=value_range,
            suggested_steps=steps,
            suggested_increment=suggested_increment,
            formatter=formatter or format_decimal,
        ),
        validator=validator,
        activator=activator,
    )


def percent_setting(
    key: SettingKey,
    value: float,
    value_range: ValueRange[Any] | tuple[float, float] = (0.0, 1.0),
    suggested_steps: Optional[Sequence[float]] = None,
    suggested_increment: Optional[float] = 0.1,
    formatter: Optional[Callable[[float], str]] = None,
    validator: SettingValidator[float] = _identity,
    activator: SettingActivator = NULL_ACTIVATOR,
) -> Setting[float]:
    """Create a range setting representing a percentage, 1.0 being 100%."""
    if not isinstance(value_range, ValueRange):
        value_range = ValueRange(float(value_range[0]), float(value_range[1]))

    return range_setting(
        key,
        float(value),
        value_range,
        suggested_steps=suggested_steps,
        suggested_increment=suggested_increment,
        formatter=formatter or format_percentage,
        validator=validator,
        activator=activator,
    )


def enum_setting(
    key: SettingKey,
    value: V,
    values: Optional[Sequence[V]],
    formatter: Optional[Callable[[V], Optional[str]]] = None,
    coder: Optional[SettingCoder[V]] = None,
    validator: SettingValidator[V] = _identity,
    activator: SettingActivator = NULL_ACTIVATOR,
) -> Setting[V]:
    """Create a setting whose value is one of a list of supported values.

    Args:
        key: Setting key
        value: Current value
        values: Supported values, None when every value is supported
        formatter: Optional user-facing label of a value
        coder: JSON coder, by raw value for Enum members, literal otherwise
        validator: Extra validation run after the membership check
        activator: Activation rule

    Returns:
        The enum setting
    """
    if coder is None:
        if isinstance(value, Enum):
            coder = SettingCoder.raw_value(type(value))  # type: ignore[assignment]
        else:
            coder = SettingCoder.literal(type(value))

    constraint: EnumConstraint[V] = EnumConstraint(
        values=None if values is None else tuple(values)
    )
    if formatter is not None:
        constraint = EnumConstraint(values=constraint.values, formatter=formatter)

    return Setting(
        key=key,
        value=value,
        coder=coder,  # type: ignore[arg-type]
        constraint=constraint,
        validator=validator,
        activator=activator,
    )
