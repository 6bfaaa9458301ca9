"""Closed value ranges and the suggested progressions used to step through them."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

from readerprefs.constants import FLOAT_FALLBACK_INCREMENT, INT_FALLBACK_INCREMENT

N = TypeVar("N", int, float)


@dataclass(frozen=True)
class ValueRange(Generic[N]):
    """Closed range of numeric values, bounds included."""

    lower: N
    upper: N

    def __post_init__(self) -> None:
        if self.lower > self.upper:
            raise ValueError(f"Invalid range: {self.lower} > {self.upper}")

    def __contains__(self, value: object) -> bool:
        return _is_number(value) and self.lower <= value <= self.upper

    def clamp(self, value: N) -> N:
        """Coerce a value into the range.

        Args:
            value: Value to coerce

        Returns:
            The nearest bound when the value is outside the range, else the value

        Raises:
            ValueError: If the value is NaN, which has no place in the range
        """
        if isinstance(value, float) and math.isnan(value):
            raise ValueError("Cannot clamp NaN into a range")
        if value < self.lower:
            return self.lower
        if value > self.upper:
            return self.upper
        return value

    @property
    def is_integral(self) -> bool:
        """Whether the range holds integers only."""
        return isinstance(self.lower, int) and isinstance(self.upper, int)

    def accepts(self, value: object) -> bool:
        """Whether the value is a number which can be clamped into the range.

        NaN is never accepted, nor floats in an integral range.
        """
        if not _is_number(value):
            return False
        if isinstance(value, float):
            return not self.is_integral and not math.isnan(value)
        return True

    @property
    def fallback_increment(self) -> N:
        """Increment used when nothing better is known: 1 for integers, 0.1 otherwise."""
        if self.is_integral:
            return INT_FALLBACK_INCREMENT  # type: ignore[return-value]
        return FLOAT_FALLBACK_INCREMENT  # type: ignore[return-value]


class Progression(Protocol[N]):
    """Strategy computing the next or previous value of a range setting.

    Results are not clamped, callers coerce them into the setting range.
    """

    def increment(self, value: N) -> N: ...

    def decrement(self, value: N) -> N: ...


@dataclass(frozen=True)
class StepsProgression(Generic[N]):
    """Moves between predefined steps, sorted in increasing order.

    A value that is not one of the steps moves to the closest step in the
    requested direction. Past the last (or before the first) step, the value
    is left unchanged.
    """

    steps: tuple[N, ...]

    def __post_init__(self) -> None:
        if not self.steps:
            raise ValueError("Steps cannot be empty")
        if any(a >= b for a, b in zip(self.steps, self.steps[1:])):
            raise ValueError(f"Steps must be sorted in increasing order: {self.steps}")

    def increment(self, value: N) -> N:
        index = bisect_right(self.steps, value)
        if index < len(self.steps):
            return self.steps[index]
        return value

    def decrement(self, value: N) -> N:
        index = bisect_left(self.steps, value)
        if index > 0:
            return self.steps[index - 1]
        return value


@dataclass(frozen=True)
class IncrementProgression(Generic[N]):
    """Moves by a fixed amount."""

    amount: N

    def __post_init__(self) -> None:
        if self.amount <= 0:
            raise ValueError(f"Increment must be positive: {self.amount}")

    def increment(self, value: N) -> N:
        return value + self.amount

    def decrement(self, value: N) -> N:
        return value - self.amount


def steps_of(steps: Sequence[N] | None) -> tuple[N, ...] | None:
    """Normalize an optional sequence of steps into a tuple."""
    if steps is None:
        return None
    return tuple(steps)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
