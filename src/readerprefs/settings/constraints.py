"""Constraint strategies specializing a Setting into a range, enum or plain value."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

from readerprefs.settings.ranges import (
    IncrementProgression,
    Progression,
    StepsProgression,
    ValueRange,
)
from readerprefs.utils.formatting import format_decimal

V = TypeVar("V")


def _no_label(value: Any) -> Optional[str]:
    return None


@dataclass(frozen=True)
class Unconstrained:
    """Any value is accepted as is."""

    def accepts(self, value: Any) -> bool:
        return True

    def coerce(self, value: V) -> V:
        return value

    def format_value(self, value: Any) -> Optional[str]:
        return None


@dataclass(frozen=True)
class RangeConstraint(Generic[V]):
    """Constrains a numeric value to a closed range.

    Attributes:
        range: Valid range for the value, values outside are clamped
        suggested_steps: Steps used to increment or decrement the value,
            sorted in increasing order
        suggested_increment: Amount used to increment or decrement the value
        formatter: Returns a user-facing description of a value, e.g. with
            its unit
    """

    range: ValueRange[Any]
    suggested_steps: Optional[tuple[Any, ...]] = None
    suggested_increment: Optional[Any] = None
    formatter: Callable[[Any], str] = field(default=format_decimal, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.suggested_steps:
            # Validates the order of the steps early
            StepsProgression(self.suggested_steps)

    def accepts(self, value: Any) -> bool:
        return self.range.accepts(value)

    def coerce(self, value: V) -> V:
        return self.range.clamp(value)

    def format_value(self, value: Any) -> Optional[str]:
        return self.formatter(value)

    @property
    def suggested_progression(self) -> Optional[Progression[Any]]:
        """Progression to follow when incrementing, steps taking precedence."""
        if self.suggested_steps:
            return StepsProgression(self.suggested_steps)
        if self.suggested_increment is not None:
            return IncrementProgression(self.suggested_increment)
        return None


@dataclass(frozen=True)
class EnumConstraint(Generic[V]):
    """Restricts the value to a list of supported members.

    ``values`` set to None means every member of the enum is supported.
    """

    values: Optional[tuple[Any, ...]] = None
    formatter: Callable[[Any], Optional[str]] = field(
        default=_no_label, compare=False, repr=False
    )

    def accepts(self, value: Any) -> bool:
        return self.values is None or value in self.values

    def coerce(self, value: V) -> V:
        return value

    def format_value(self, value: Any) -> Optional[str]:
        return self.formatter(value)


SettingConstraint = Unconstrained | RangeConstraint[Any] | EnumConstraint[Any]

UNCONSTRAINED = Unconstrained()
