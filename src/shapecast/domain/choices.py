"""Enumerated validator: membership test with the first allowed value as default.

Membership is by value equality with two refinements so that decoded JSON
behaves like JSON:
- Booleans only match booleans (``True`` is not ``1``, ``False`` is not ``0``).
- NaN matches NaN.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from shapecast.domain.errors import SchemaError
from shapecast.domain.guards import is_record, is_text
from shapecast.domain.types import T, Validator

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _Tagged:
    """Stand-in key for values whose Python equality differs from JSON's."""

    tag: str
    value: Any = None


_NAN_KEY = _Tagged("nan")


def membership_key(value: Any) -> Any:
    """Return the key used to test *value* for membership.

    Raises ``TypeError`` for unhashable values only when the key is hashed.
    """
    if isinstance(value, bool):
        return _Tagged("bool", value)
    if isinstance(value, float) and math.isnan(value):
        return _NAN_KEY
    return value


def either(allowed: Iterable[T]) -> Validator[T]:
    """Pass through members of *allowed*, else return its first element.

    ``None`` may be an allowed value, and may be the default.

    Examples:
        >>> language = either(["english", "spanish"])
        >>> language("spanish"), language("italian"), language(None)
        ('spanish', 'english', 'english')

    Raises:
        SchemaError: If *allowed* is empty or is a string.
    """
    if is_text(allowed) or is_record(allowed):
        msg = f"either() expects an ordered collection of values, got {type(allowed).__name__}"
        raise SchemaError(msg)
    choices = tuple(allowed)
    if not choices:
        raise SchemaError("either() needs at least one allowed value")

    initial = choices[0]
    hashable: set[Any] = set()
    unhashable: list[Any] = []
    for choice in choices:
        try:
            hashable.add(membership_key(choice))
        except TypeError:
            unhashable.append(choice)
    members = frozenset(hashable)
    others = tuple(unhashable)

    logger.debug("Built either validator: %d choices, default=%r", len(choices), initial)

    def validate(value: Any) -> T:
        try:
            if membership_key(value) in members:
                return value
        except TypeError:
            if any(value == other for other in others):
                return value
        return initial

    return validate
