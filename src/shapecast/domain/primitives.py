"""Primitive validators: exact-type pass-through or a fixed default.

No coercion happens here. ``"5"`` is not a number and ``5`` is not a string.
"""

from __future__ import annotations

from typing import Any

from shapecast.domain.guards import is_number
from shapecast.domain.types import D, T, Validator


def number(default: D) -> Validator[int | float | D]:
    """Accept ints and floats (NaN included), else return *default*.

    Examples:
        >>> validate = number(10)
        >>> validate(3), validate("3"), validate(True), validate(None)
        (3, 10, 10, 10)
    """

    def validate(value: Any) -> int | float | D:
        if is_number(value):
            return value
        return default

    return validate


def string(default: D) -> Validator[str | D]:
    """Accept ``str`` values, else return *default*."""

    def validate(value: Any) -> str | D:
        if isinstance(value, str):
            return value
        return default

    return validate


def boolean(default: D) -> Validator[bool | D]:
    """Accept ``True``/``False``, else return *default*.

    ``0``, ``1`` and ``"true"`` are not booleans.
    """

    def validate(value: Any) -> bool | D:
        if isinstance(value, bool):
            return value
        return default

    return validate


def always(value: T) -> Validator[T]:
    """Ignore the input and return *value*."""

    def to_value(_: Any) -> T:
        return value

    return to_value
