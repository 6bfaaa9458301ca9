"""JSON coders converting setting values to and from JSON-compatible values."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Final, Generic, Optional, TypeVar

logger: Final = logging.getLogger(__name__)

V = TypeVar("V")
E = TypeVar("E", bound=Enum)


@dataclass(frozen=True)
class SettingCoder(Generic[V]):
    """Pair of functions serializing a setting value to JSON and back.

    ``decode`` returns None when the JSON value cannot represent a value of
    the setting, it never raises.
    """

    encode: Callable[[V], Any]
    decode: Callable[[Any], Optional[V]]

    @classmethod
    def literal(cls, value_type: type[V]) -> SettingCoder[V]:
        """Coder passing primitive values through unchanged.

        Args:
            value_type: One of bool, int, float, str or list

        Returns:
            A coder checking the JSON type on decode
        """
        if value_type is float:
            return cls(encode=float, decode=_decode_float)  # type: ignore[arg-type]
        if value_type is int:
            return cls(encode=int, decode=_decode_int)  # type: ignore[arg-type]

        def decode(json: Any) -> Optional[V]:
            # bool is an int subclass, so a JSON number never decodes as a bool
            if isinstance(json, value_type) and (
                value_type is bool or not isinstance(json, bool)
            ):
                return json
            logger.debug("Cannot decode %r as %s", json, value_type.__name__)
            return None

        return cls(encode=lambda value: value, decode=decode)

    @classmethod
    def raw_value(cls, enum_type: type[E]) -> SettingCoder[E]:
        """Coder serializing an Enum member as its raw value.

        Args:
            enum_type: Enum class of the setting values

        Returns:
            A coder looking up members by value on decode
        """

        def decode(json: Any) -> Optional[E]:
            try:
                return enum_type(json)
            except ValueError:
                logger.debug("Unknown %s value: %r", enum_type.__name__, json)
                return None

        return cls(encode=lambda member: member.value, decode=decode)  # type: ignore[arg-type]


def _decode_float(json: Any) -> Optional[float]:
    # JSON has no NaN nor Infinity
    if (
        isinstance(json, bool)
        or not isinstance(json, (int, float))
        or (isinstance(json, float) and not math.isfinite(json))
    ):
        logger.debug("Cannot decode %r as float", json)
        return None
    return float(json)


def _decode_int(json: Any) -> Optional[int]:
    if isinstance(json, bool) or not isinstance(json, int):
        logger.debug("Cannot decode %r as int", json)
        return None
    return json
